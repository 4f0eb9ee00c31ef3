"""Network-related constants."""


class Network:
    """Network-related constants."""

    class Defaults:
        """Default network parameters."""

        # Retries per provider request on retryable errors
        RETRY_COUNT = 2
        RETRY_BASE_DELAY = 2.0  # seconds
        RETRY_MAX_DELAY = 60.0  # seconds

        HTTP_TIMEOUT = 30  # seconds - basic HTTP request timeout
        USER_AGENT = "spot-prices/1.0"

    class URLs:
        """Base URLs for various APIs."""

        NORDPOOL = "https://dataportal-api.nordpoolgroup.com/api/DayAheadPrices"
        ENTSOE = "https://web-api.tp.entsoe.eu/api"
        ECB = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"
        OPEN_EXCHANGE_RATES = "https://openexchangerates.org/api"


class ContentType:
    """Content type constants."""

    JSON = "application/json"
    XML = "application/xml"


class NetworkErrorType:
    """Network error type constants for error classification."""

    CONNECTIVITY = "connectivity"  # Network connectivity issues
    RATE_LIMIT = "rate_limit"  # Rate limiting or throttling
    AUTHENTICATION = "authentication"  # Authentication or authorization issues
    SERVER = "server"  # Server-side errors
    DATA_FORMAT = "data_format"  # Data parsing or format issues
    NOT_PUBLISHED = "not_published"  # Prices for the day are not out yet
    TIMEOUT = "timeout"  # Request timeout
    UNKNOWN = "unknown"  # Unclassified errors
