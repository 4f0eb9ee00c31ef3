"""Day-ahead electricity spot prices with provider fallback.

Prices are fetched from Nord Pool or ENTSO-E, converted through EUR into the
requested currency, resampled to hourly or quarter-hourly resolution and
summarized with daily peak/off-peak statistics.
"""
from .client import SpotPriceClient
from .config.fetch_config import FetchConfig
from .const.errors import (
    CurrencyError,
    InvalidInputError,
    MissingPivotRateError,
    NoProvidersAvailableError,
    NoRateProviderError,
    PriceFetchError,
    RateFetchError,
    RateUnavailableError,
    SpotPriceError,
)
from .coordinator.data_models import PriceResult
from .coordinator.price_fetcher import fetch_day_ahead_prices, resolve_source_order
from .price.rate_cache import RateCache

__version__ = "1.0.0"

__all__ = [
    "CurrencyError",
    "FetchConfig",
    "InvalidInputError",
    "MissingPivotRateError",
    "NoProvidersAvailableError",
    "NoRateProviderError",
    "PriceFetchError",
    "PriceResult",
    "RateCache",
    "RateFetchError",
    "RateUnavailableError",
    "SpotPriceClient",
    "SpotPriceError",
    "fetch_day_ahead_prices",
    "resolve_source_order",
]
