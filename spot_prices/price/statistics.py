"""Statistics utility functions for price calculations."""

from typing import List, Optional, Sequence

from ..api.base.data_structure import DailyStats, HourlyEntry, NormalizedPoint
from ..const.defaults import Defaults
from ..const.time import TimeInterval


def _round(value: float) -> float:
    return round(value, Defaults.PRECISION)


def build_hourly_entries(points: Sequence[NormalizedPoint]) -> List[HourlyEntry]:
    """Turn normalized points into published entries with rounded prices."""
    return [
        HourlyEntry(
            start_time=point.start.isoformat(),
            end_time=point.end.isoformat(),
            spot_price=_round(point.value),
        )
        for point in points
    ]


def average_range(entries: Sequence[HourlyEntry], start: int, end: int) -> Optional[float]:
    """Average spot price of entries ``start`` through ``end`` inclusive.

    Indices are clamped to the series. Returns None when the range is empty.
    """
    start = max(start, 0)
    end = min(end, len(entries) - 1)
    if start > end:
        return None
    prices = [entry.spot_price for entry in entries[start:end + 1]]
    return sum(prices) / len(prices)


def build_daily_stats(
    entries: Sequence[HourlyEntry],
    peak_start_hour: int = Defaults.PEAK_START_HOUR,
    peak_end_hour: int = Defaults.PEAK_END_HOUR,
) -> DailyStats:
    """Calculate min/max/average and peak/off-peak averages.

    Args:
        entries: Price entries for one day, sorted by start time
        peak_start_hour: First hour of the peak window
        peak_end_hour: Hour the peak window ends (exclusive)

    Returns:
        DailyStats with every field rounded to 4 decimals; all zeros for an
        empty series
    """
    if not entries:
        return DailyStats()

    prices = [entry.spot_price for entry in entries]
    avg_price = sum(prices) / len(prices)

    # More than two days' worth of hourly entries means a quarter-hour series
    entries_per_hour = 4 if len(entries) > TimeInterval.QUARTER_HOURLY_POINT_THRESHOLD else 1
    peak_start = peak_start_hour * entries_per_hour
    peak_end = max(peak_start, peak_end_hour * entries_per_hour - 1)

    peak = average_range(entries, peak_start, peak_end) or 0
    off_peak_1 = average_range(entries, 0, peak_start - 1) or 0
    off_peak_2 = average_range(entries, peak_end + 1, len(entries) - 1) or 0

    return DailyStats(
        min_price=_round(min(prices)),
        max_price=_round(max(prices)),
        avg_price=_round(avg_price),
        peak_price=_round(peak),
        off_peak_price_1=_round(off_peak_1),
        off_peak_price_2=_round(off_peak_2),
    )
