"""Constants for the spot-prices package."""

from .config import Config
from .defaults import Defaults
from .sources import Source
from .areas import Area, AreaMapping, Timezone
from .currencies import Currency, CurrencyInfo
from .energy import EnergyUnit
from .network import Network, ContentType, NetworkErrorType
from .time import TimeFormat, TimeInterval
from .api import EntsoE, Nordpool, ECB, OpenExchangeRates
from .errors import (
    Errors,
    SpotPriceError,
    InvalidInputError,
    PriceFetchError,
    NoProvidersAvailableError,
    CurrencyError,
    RateUnavailableError,
    MissingPivotRateError,
    NoRateProviderError,
    RateFetchError,
)

__all__ = [
    "Config",
    "Defaults",
    "Source",
    "Area",
    "AreaMapping",
    "Timezone",
    "Currency",
    "CurrencyInfo",
    "EnergyUnit",
    "Network",
    "ContentType",
    "NetworkErrorType",
    "TimeFormat",
    "TimeInterval",
    "EntsoE",
    "Nordpool",
    "ECB",
    "OpenExchangeRates",
    "Errors",
    "SpotPriceError",
    "InvalidInputError",
    "PriceFetchError",
    "NoProvidersAvailableError",
    "CurrencyError",
    "RateUnavailableError",
    "MissingPivotRateError",
    "NoRateProviderError",
    "RateFetchError",
]
