"""Error codes and exception classes."""


class Errors:
    """Error code constants."""

    INVALID_INPUT = "invalid_input"
    API_ERROR = "api_error"
    NO_SOURCES_AVAILABLE = "no_sources_available"
    RATE_UNAVAILABLE = "rate_unavailable"
    MISSING_PIVOT_RATE = "missing_pivot_rate"
    NO_RATE_PROVIDER = "no_rate_provider"
    RATE_FETCH_FAILED = "rate_fetch_failed"


# Custom Exception Classes
class SpotPriceError(Exception):
    """Base class for all errors raised by this package."""

    code = Errors.API_ERROR


class InvalidInputError(SpotPriceError, ValueError):
    """Missing region, unparseable date or otherwise invalid configuration."""

    code = Errors.INVALID_INPUT


class PriceFetchError(SpotPriceError):
    """Custom exception for errors during price fetching.

    Raised by provider transports; the fallback manager records it and moves
    on to the next candidate source.
    """

    code = Errors.API_ERROR

    def __init__(self, message: str, source: str = None):
        """Initialize the error.

        Args:
            message: Error message
            source: Source identifier the error belongs to
        """
        self.source = source
        super().__init__(message)


class NoProvidersAvailableError(SpotPriceError):
    """No candidate source was left after filtering."""

    code = Errors.NO_SOURCES_AVAILABLE


class CurrencyError(SpotPriceError):
    """Base class for currency conversion failures."""


class RateUnavailableError(CurrencyError):
    """A rate snapshot does not contain the requested currency."""

    code = Errors.RATE_UNAVAILABLE


class MissingPivotRateError(CurrencyError):
    """A snapshot cannot be rebased because the pivot rate is missing."""

    code = Errors.MISSING_PIVOT_RATE


class NoRateProviderError(CurrencyError):
    """Conversion is needed but no rate source was configured."""

    code = Errors.NO_RATE_PROVIDER


class RateFetchError(CurrencyError):
    """The rate transport failed or returned a malformed payload."""

    code = Errors.RATE_FETCH_FAILED
