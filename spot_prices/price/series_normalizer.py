"""Converting price series between hourly and quarter-hourly granularity.

Supports:
- Quarter-hourly data (15 min) → hourly (aggregate/average)
- Hourly data (60 min) → quarter-hourly (split the value across slices)
- Pass-through when the series already has the target granularity

The native resolution of a series is detected from the gap between its
first two points. When that gap is neither 15 nor 60 minutes (or there is
only one point) the point count decides: up to 48 points is read as
hourly, more as quarter-hourly. This is a heuristic for irregular feeds,
not a guaranteed inference.
"""
import logging
import math
from collections import OrderedDict
from datetime import timedelta
from typing import Any, Iterable, List, Optional

from ..api.base.data_structure import NormalizedPoint
from ..const.time import TimeInterval
from ..timezone.parser import parse_timestamp

_LOGGER = logging.getLogger(__name__)

QUARTER_HOUR = timedelta(minutes=15)


def _clean_currency(currency: Any) -> Optional[str]:
    if not currency:
        return None
    return str(currency).upper()


def _drop_overlaps(points: List[NormalizedPoint]) -> List[NormalizedPoint]:
    kept: List[NormalizedPoint] = []
    for point in points:
        if kept and point.start < kept[-1].end:
            dropped = point
            if point.end - point.start < kept[-1].end - kept[-1].start:
                dropped, kept[-1] = kept[-1], point
            _LOGGER.debug("Dropping overlapping interval %s - %s", dropped.start, dropped.end)
            continue
        kept.append(point)
    return kept


def clean_points(points: Iterable[Any]) -> List[NormalizedPoint]:
    """Coerce timestamps and values, drop invalid points and sort by start.

    Duplicates and overlaps are removed. Of points sharing a start the
    shortest interval wins, so a finer period replaces a coarser one for the
    same time; among identical intervals the first point seen is kept.

    Args:
        points: Objects with ``start``, ``end``, ``value`` and ``currency``
            attributes, or dicts with those keys

    Returns:
        Valid, non-overlapping points sorted ascending by start
    """
    cleaned = []
    for point in points or []:
        if isinstance(point, dict):
            start, end = point.get("start"), point.get("end")
            value, currency = point.get("value"), point.get("currency")
        else:
            start, end = point.start, point.end
            value, currency = point.value, point.currency

        start_dt = parse_timestamp(start)
        end_dt = parse_timestamp(end)
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = math.nan

        if start_dt is None or end_dt is None or not math.isfinite(number):
            _LOGGER.debug("Dropping invalid price point: start=%r end=%r value=%r", start, end, value)
            continue
        if start_dt >= end_dt:
            _LOGGER.debug("Dropping empty interval %s - %s", start_dt, end_dt)
            continue

        cleaned.append(NormalizedPoint(start=start_dt, end=end_dt, value=number, currency=_clean_currency(currency)))

    # Stable sort keeps input order among identical intervals
    cleaned.sort(key=lambda p: (p.start, p.end - p.start))
    return _drop_overlaps(cleaned)


def detect_interval(points: List[NormalizedPoint]) -> Optional[str]:
    """Detect the native resolution of a sorted series.

    Returns:
        "15m", "1h", or None for an empty series
    """
    if not points:
        return None

    if len(points) >= 2:
        gap_minutes = round((points[1].start - points[0].start).total_seconds() / 60)
        if gap_minutes == 15:
            return TimeInterval.QUARTER_HOURLY
        if gap_minutes == 60:
            return TimeInterval.HOURLY

    if len(points) > TimeInterval.QUARTER_HOURLY_POINT_THRESHOLD:
        return TimeInterval.QUARTER_HOURLY
    return TimeInterval.HOURLY


def condense_to_hourly(points: List[NormalizedPoint]) -> List[NormalizedPoint]:
    """Aggregate fine intervals into hour buckets by averaging."""
    buckets = OrderedDict()

    for point in points:
        key = point.start.replace(minute=0, second=0, microsecond=0)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = {
                "start": point.start,
                "end": point.end,
                "values": [],
                "currency": point.currency,
            }
        bucket["values"].append(point.value)
        if point.start < bucket["start"]:
            bucket["start"] = point.start
        if point.end > bucket["end"]:
            bucket["end"] = point.end
        if not bucket["currency"]:
            bucket["currency"] = point.currency

    condensed = [
        NormalizedPoint(
            start=bucket["start"],
            end=bucket["end"],
            value=sum(bucket["values"]) / len(bucket["values"]),
            currency=bucket["currency"],
        )
        for bucket in buckets.values()
    ]

    _LOGGER.debug(f"Aggregated: {len(points)} → {len(condensed)} hourly intervals")
    return sorted(condensed, key=lambda p: p.start)


def expand_to_quarter_hour(points: List[NormalizedPoint]) -> List[NormalizedPoint]:
    """Split coarse intervals into 15-minute slices.

    The value is divided evenly across the slices, so the slices of one
    interval add up to the original value.
    """
    expanded = []

    for point in points:
        duration_minutes = max(15, point.duration_minutes)
        slices = max(1, math.floor(duration_minutes / 15 + 0.5))
        slice_value = point.value / slices

        for index in range(slices):
            slice_start = point.start + index * QUARTER_HOUR
            expanded.append(
                NormalizedPoint(
                    start=slice_start,
                    end=slice_start + QUARTER_HOUR,
                    value=slice_value,
                    currency=point.currency,
                )
            )

    _LOGGER.debug(f"Expanded: {len(points)} → {len(expanded)} quarter-hour intervals")
    return sorted(expanded, key=lambda p: p.start)


def normalize_series(points: Iterable[Any], target_interval: str) -> List[NormalizedPoint]:
    """Clean a price series and resample it to the target interval.

    Args:
        points: Raw price points
        target_interval: "1h" or "15m"; anything else only cleans and sorts

    Returns:
        Sorted normalized points at the target resolution
    """
    cleaned = clean_points(points)
    if not cleaned:
        return []

    source_interval = detect_interval(cleaned)
    _LOGGER.debug(
        "Normalizing %d points: detected %s, target %s", len(cleaned), source_interval, target_interval
    )

    if target_interval == TimeInterval.HOURLY:
        if source_interval == TimeInterval.HOURLY:
            return cleaned
        return condense_to_hourly(cleaned)

    if target_interval == TimeInterval.QUARTER_HOURLY:
        if source_interval == TimeInterval.QUARTER_HOURLY:
            return cleaned
        return expand_to_quarter_hour(cleaned)

    _LOGGER.debug("Unsupported target interval %r, returning series unchanged", target_interval)
    return cleaned
