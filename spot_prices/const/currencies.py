"""Currency constants."""


class Currency:
    """Currency code constants."""
    EUR = "EUR"  # Euro
    SEK = "SEK"  # Swedish krona
    NOK = "NOK"  # Norwegian krone
    DKK = "DKK"  # Danish krone
    PLN = "PLN"  # Polish zloty
    GBP = "GBP"  # British pound
    USD = "USD"  # US dollar

    # All conversions are routed through this currency
    PIVOT = EUR


class CurrencyInfo:
    """Region to currency mappings."""

    REGION_TO_CURRENCY = {
        # Nordics
        "SE1": Currency.SEK,
        "SE2": Currency.SEK,
        "SE3": Currency.SEK,
        "SE4": Currency.SEK,
        "DK1": Currency.DKK,
        "DK2": Currency.DKK,
        "FI": Currency.EUR,
        "NO1": Currency.NOK,
        "NO2": Currency.NOK,
        "NO3": Currency.NOK,
        "NO4": Currency.NOK,
        "NO5": Currency.NOK,
        # Baltics
        "EE": Currency.EUR,
        "LV": Currency.EUR,
        "LT": Currency.EUR,
        # Central Europe
        "AT": Currency.EUR,
        "BE": Currency.EUR,
        "FR": Currency.EUR,
        "DE-LU": Currency.EUR,
        "GER": Currency.EUR,
        "NL": Currency.EUR,
        "PL": Currency.PLN,
    }

    @staticmethod
    def get_default_currency(region: str) -> str:
        """Get the national currency of a region, EUR when unknown."""
        return CurrencyInfo.REGION_TO_CURRENCY.get(str(region).upper(), Currency.EUR)
