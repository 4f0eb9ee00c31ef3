"""Data models for assembled price results."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..api.base.data_structure import DailyStats, HourlyEntry

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceResult:
    """Normalized prices for one region and delivery day.

    ``hourly`` holds the published series at the requested resolution (the
    name is kept for both hourly and quarter-hourly output); ``daily`` holds
    the statistics computed from it.
    """

    price_date: str
    provider: str
    provider_url: str
    region_code: str
    currency: str
    hourly: Tuple[HourlyEntry, ...] = field(default_factory=tuple)
    daily: DailyStats = field(default_factory=DailyStats)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the flat JSON-compatible form."""
        return {
            "priceDate": self.price_date,
            "provider": self.provider,
            "providerUrl": self.provider_url,
            "regionCode": self.region_code,
            "currency": self.currency,
            "hourly": [entry.to_dict() for entry in self.hourly],
            "daily": self.daily.to_dict(),
        }
