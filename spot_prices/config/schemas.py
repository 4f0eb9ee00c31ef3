"""Validation schemas for fetch configuration."""
import logging
import re
from datetime import date, datetime
from typing import Any, List, Optional

import voluptuous as vol

from ..const.config import Config
from ..const.defaults import Defaults
from ..const.time import TimeInterval

_LOGGER = logging.getLogger(__name__)

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


def currency_code(value: Any) -> str:
    """Validate a three-letter currency code and upper-case it."""
    code = str(value).strip().upper()
    if not _CURRENCY_RE.match(code):
        raise vol.Invalid(f"Invalid currency code: {value}")
    return code


def coerce_date(value: Any) -> date:
    """Accept a date, a datetime or an ISO-8601 string.

    Raises:
        vol.Invalid: If the value is not a recognisable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise vol.Invalid(f"Invalid date supplied: {value}")


def source_list(value: Any) -> Optional[List[str]]:
    """Accept a comma separated string or a list of source names.

    Names are lower-cased; an empty list means no override.
    """
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise vol.Invalid(f"Expected a list of sources, got {type(value).__name__}")
    sources = [str(item).strip().lower() for item in value if str(item).strip()]
    return sources or None


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(Config.AREA): vol.All(str, vol.Strip, vol.Upper, vol.Length(min=1)),
        vol.Optional(Config.CURRENCY, default=None): vol.Any(None, currency_code),
        vol.Optional(Config.DATE, default=None): vol.Any(None, coerce_date),
        vol.Optional(Config.INTERVAL, default=Defaults.INTERVAL): vol.All(
            str, vol.Strip, vol.Lower, vol.In(TimeInterval.SUPPORTED)
        ),
        vol.Optional(Config.PREFER, default=Defaults.PREFER): vol.All(str, vol.Strip, vol.Lower),
        vol.Optional(Config.PROVIDERS, default=None): vol.Any(None, source_list),
        vol.Optional(Config.ENTSOE_TOKEN, default=None): vol.Any(None, str),
        vol.Optional(Config.PEAK_START_HOUR, default=Defaults.PEAK_START_HOUR): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=24)
        ),
        vol.Optional(Config.PEAK_END_HOUR, default=Defaults.PEAK_END_HOUR): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=24)
        ),
        vol.Optional(Config.BASE_URLS, default=dict): vol.Any(None, {str: str}),
        vol.Optional(Config.MAX_RETRIES, default=Defaults.MAX_RETRIES): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)
