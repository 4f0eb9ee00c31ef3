"""Timestamp and timezone helpers."""
from .parser import TimestampParser, parse_timestamp
from .timezone_utils import get_timezone_object, get_timezone_for_area

__all__ = [
    "TimestampParser",
    "parse_timestamp",
    "get_timezone_object",
    "get_timezone_for_area",
]
