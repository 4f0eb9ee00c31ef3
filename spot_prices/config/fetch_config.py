"""Validated configuration for one price fetch."""
import logging
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

import voluptuous as vol

from .schemas import CONFIG_SCHEMA
from ..const.config import Config
from ..const.currencies import CurrencyInfo
from ..const.defaults import Defaults
from ..const.errors import InvalidInputError
from ..const.time import TimeFormat

_LOGGER = logging.getLogger(__name__)


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class FetchConfig:
    """Options for :func:`spot_prices.coordinator.price_fetcher.fetch_day_ahead_prices`.

    Build instances with :meth:`from_dict` so the schema defaults and checks
    apply; direct construction skips validation.
    """

    region: str
    currency: str
    target_date: date
    interval: str = Defaults.INTERVAL
    prefer: str = Defaults.PREFER
    providers: Optional[List[str]] = None
    entsoe_token: Optional[str] = field(default=None, repr=False)
    peak_start_hour: int = Defaults.PEAK_START_HOUR
    peak_end_hour: int = Defaults.PEAK_END_HOUR
    base_urls: Mapping[str, str] = field(default_factory=dict)
    max_retries: int = Defaults.MAX_RETRIES

    @property
    def iso_date(self) -> str:
        """Delivery day as YYYY-MM-DD."""
        return self.target_date.strftime(TimeFormat.DATE_ONLY)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FetchConfig":
        """Validate a mapping of options and build a config.

        Args:
            data: Options keyed by the names in ``Config``

        Returns:
            A validated FetchConfig

        Raises:
            InvalidInputError: If a required option is missing or an option
                has an invalid value
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError(f"Expected a mapping of options, got {type(data).__name__}")
        if not data.get(Config.AREA):
            raise InvalidInputError("region is required (e.g. NO1, SE3, DK1)")

        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as e:
            raise InvalidInputError(f"Invalid configuration: {e}") from e

        if validated[Config.PEAK_END_HOUR] < validated[Config.PEAK_START_HOUR]:
            raise InvalidInputError(
                f"{Config.PEAK_END_HOUR} ({validated[Config.PEAK_END_HOUR]}) must not be before "
                f"{Config.PEAK_START_HOUR} ({validated[Config.PEAK_START_HOUR]})"
            )

        region = validated[Config.AREA]
        currency = validated[Config.CURRENCY] or CurrencyInfo.get_default_currency(region)
        target_date = validated[Config.DATE] or _today_utc()

        config = cls(
            region=region,
            currency=currency,
            target_date=target_date,
            interval=validated[Config.INTERVAL],
            prefer=validated[Config.PREFER],
            providers=validated[Config.PROVIDERS],
            entsoe_token=validated[Config.ENTSOE_TOKEN] or None,
            peak_start_hour=validated[Config.PEAK_START_HOUR],
            peak_end_hour=validated[Config.PEAK_END_HOUR],
            base_urls=dict(validated[Config.BASE_URLS] or {}),
            max_retries=validated[Config.MAX_RETRIES],
        )
        _LOGGER.debug("Fetch config: %s", config)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, without the token."""
        data = asdict(self)
        data.pop("entsoe_token")
        data["target_date"] = self.iso_date
        return data
