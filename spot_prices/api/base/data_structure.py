"""Standardized data structures for raw provider data."""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RawPricePoint:
    """One upstream-reported delivery interval ``[start, end)``.

    ``start``/``end`` are whatever the transport produced (ISO strings or
    datetimes); the normalizer coerces them. ``value`` is the price per kWh
    in ``currency``, which may be absent when the provider does not report
    one per point.
    """

    start: Any
    end: Any
    value: Any
    currency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class NormalizedPoint:
    """A cleaned price point.

    ``start < end``, both aware UTC datetimes, ``value`` finite.
    """

    start: datetime
    end: datetime
    value: float
    currency: Optional[str] = None

    @property
    def duration_minutes(self) -> float:
        """Length of the delivery interval in minutes."""
        return (self.end - self.start).total_seconds() / 60

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with ISO timestamps."""
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "value": self.value,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class HourlyEntry:
    """One entry of the published price series."""

    start_time: str  # ISO format datetime string
    end_time: str  # ISO format datetime string
    spot_price: float  # rounded to 4 decimals

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "spotPrice": self.spot_price,
        }


@dataclass(frozen=True)
class DailyStats:
    """Daily price statistics.

    ``peak_price`` averages the configured peak window, the two off-peak
    prices average the hours strictly before and strictly after it.
    """

    min_price: float = 0
    max_price: float = 0
    avg_price: float = 0
    peak_price: float = 0
    off_peak_price_1: float = 0
    off_peak_price_2: float = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "avgPrice": self.avg_price,
            "peakPrice": self.peak_price,
            "offPeakPrice1": self.off_peak_price_1,
            "offPeakPrice2": self.off_peak_price_2,
        }


@dataclass
class ProviderResponse:
    """What a provider transport returns for one delivery day."""

    provider: str
    provider_url: str
    resolution: str  # ISO-8601 duration, e.g. PT60M
    points: List[RawPricePoint] = field(default_factory=list)
    source: Optional[str] = None
