"""Timezone lookup utilities."""
import logging
import zoneinfo
from datetime import timezone, tzinfo

from ..const.areas import Timezone

_LOGGER = logging.getLogger(__name__)


def get_timezone_object(timezone_id: str) -> tzinfo:
    """Get timezone object for a timezone ID.

    Args:
        timezone_id: Timezone identifier

    Returns:
        Timezone object

    Raises:
        ValueError: If timezone_id is invalid or cannot be resolved
    """
    # Handle case where timezone_id is already a timezone object
    if isinstance(timezone_id, tzinfo):
        return timezone_id

    if timezone_id in ("UTC", "Etc/UTC"):
        return timezone.utc

    try:
        return zoneinfo.ZoneInfo(timezone_id)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, TypeError) as e:
        error_msg = f"Failed to get timezone object for {timezone_id}: {e}"
        _LOGGER.error(error_msg)
        raise ValueError(error_msg) from e


def get_timezone_for_area(area: str) -> tzinfo:
    """Get the market timezone for an area, CET when the area is unmapped.

    Args:
        area: The area code to get timezone for

    Returns:
        Timezone object (e.g. ZoneInfo('Europe/Oslo'))
    """
    return get_timezone_object(Timezone.AREA_TIMEZONES.get(area, Timezone.DEFAULT))
