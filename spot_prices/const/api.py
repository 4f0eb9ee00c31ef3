"""API-specific constants."""


class EntsoE:
    """Constants for ENTSO-E API."""
    DOC_TYPE_A44 = "A44"  # Day-ahead prices
    XML_NAMESPACE = "urn:iec62325.351:tc57wg16:451-3:publicationdocument:7:3"
    ROOT_ELEMENT = "Publication_MarketDocument"
    NO_DATA_MARKER = "No matching data found"
    UNAUTHORIZED_MARKER = "Not authorized"
    DEFAULT_CURRENCY = "EUR"


class Nordpool:
    """Nordpool API constants."""
    MARKET_DAYAHEAD = "DayAhead"
    # 24 hours of 15-minute delivery periods
    QUARTER_HOUR_ENTRIES = 96


class ECB:
    """European Central Bank API constants."""
    XML_NAMESPACE_GESMES = "http://www.gesmes.org/xml/2002-08-01"
    XML_NAMESPACE_ECB = "http://www.ecb.int/vocabulary/2002-08-01/eurofxref"
    BASE_CURRENCY = "EUR"


class OpenExchangeRates:
    """Open Exchange Rates API constants."""
    LATEST_PATH = "/latest.json"
    BASE_CURRENCY = "USD"
