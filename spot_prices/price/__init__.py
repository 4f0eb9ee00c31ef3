"""Currency, resampling and statistics steps of the price pipeline."""
from .currency import CurrencySnapshot, harmonize_snapshot
from .currency_converter import convert_currency, prepare_points
from .rate_cache import RateCache
from .series_normalizer import detect_interval, normalize_series
from .statistics import build_daily_stats, build_hourly_entries

__all__ = [
    "CurrencySnapshot",
    "harmonize_snapshot",
    "convert_currency",
    "prepare_points",
    "RateCache",
    "detect_interval",
    "normalize_series",
    "build_daily_stats",
    "build_hourly_entries",
]
