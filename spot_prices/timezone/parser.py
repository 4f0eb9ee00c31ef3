"""Timestamp parsing with proper timezone handling."""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Optional

_LOGGER = logging.getLogger(__name__)


class TimestampParser:
    """Parser turning provider timestamps into aware UTC datetimes.

    Accepts ISO-8601 strings (including a trailing ``Z``), ``datetime``
    objects and epoch seconds. Naive values are taken to be UTC.
    """

    def parse(self, value: Any) -> datetime:
        """Parse a timestamp.

        Args:
            value: ISO string, datetime or epoch seconds

        Returns:
            Timezone-aware datetime in UTC

        Raises:
            ValueError: If the value cannot be interpreted as a timestamp
        """
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, bool):
            raise ValueError(f"Expected timestamp, got boolean {value!r}")
        elif isinstance(value, (int, float)):
            if not math.isfinite(value):
                raise ValueError(f"Non-finite epoch value: {value}")
            dt = datetime.fromtimestamp(value, tz=timezone.utc)
        elif isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("Empty timestamp string provided")
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            dt = datetime.fromisoformat(text)
        else:
            raise ValueError(f"Expected string or datetime, got {type(value)}: {value}")

        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    def try_parse(self, value: Any) -> Optional[datetime]:
        """Parse a timestamp, returning None instead of raising."""
        try:
            return self.parse(value)
        except (ValueError, TypeError, OverflowError, OSError) as e:
            _LOGGER.debug("Discarding unparseable timestamp %r: %s", value, e)
            return None


_PARSER = TimestampParser()


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a timestamp into an aware UTC datetime, None if it is invalid."""
    return _PARSER.try_parse(value)
