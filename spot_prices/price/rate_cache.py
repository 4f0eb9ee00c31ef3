"""Per-day cache of pivot-relative exchange rates."""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..const.currencies import Currency
from ..const.errors import RateUnavailableError
from .currency import CurrencySnapshot, harmonize_snapshot

_LOGGER = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RateCache:
    """Memoized currency lookup backed by a rate provider.

    ``get_rate(code)`` returns how many ``code`` units one pivot unit buys.
    The harmonized snapshot is kept for the UTC calendar day it was fetched
    on and refreshed on the first lookup of a new day.

    One instance is meant to live as long as the application that owns it
    (see :class:`spot_prices.client.SpotPriceClient`); nothing is shared
    between instances.
    """

    def __init__(
        self,
        provider,
        pivot: str = Currency.PIVOT,
        disable_cache: bool = False,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the cache.

        Args:
            provider: Rate transport with ``async fetch_snapshot(base)``
            pivot: Pivot currency all rates are expressed against
            disable_cache: Re-fetch the snapshot on every lookup
            clock: Returns the current time, used for the day key
        """
        self.provider = provider
        self.pivot = pivot.upper()
        self.disable_cache = disable_cache
        self._clock = clock
        self._snapshot: Optional[CurrencySnapshot] = None
        self._cache_key: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def snapshot(self) -> Optional[CurrencySnapshot]:
        """The last harmonized snapshot, if any."""
        return self._snapshot

    @property
    def cache_key(self) -> Optional[str]:
        """Date key of the cached snapshot."""
        return self._cache_key

    def clear(self) -> None:
        """Drop the cached snapshot."""
        self._snapshot = None
        self._cache_key = None

    def _today_key(self) -> str:
        now = self._clock()
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        return now.date().isoformat()

    async def _fetch(self) -> CurrencySnapshot:
        raw = await self.provider.fetch_snapshot(self.pivot)
        return harmonize_snapshot(raw, self.pivot)

    async def ensure_snapshot(self) -> CurrencySnapshot:
        """Return a snapshot that is fresh for today, fetching if needed."""
        if self.disable_cache:
            return await self._fetch()

        today = self._today_key()
        if self._snapshot is not None and self._cache_key == today:
            return self._snapshot

        async with self._lock:
            # Another caller may have populated the cache while we waited
            if self._snapshot is not None and self._cache_key == today:
                return self._snapshot

            _LOGGER.debug("Fetching exchange rates for %s (cached key: %s)", today, self._cache_key)
            snapshot = await self._fetch()
            self._snapshot = snapshot
            self._cache_key = today
            _LOGGER.info("Cached %d exchange rates for %s", len(snapshot.rates), today)
            return snapshot

    async def get_rate(self, currency_code: Optional[str]) -> float:
        """Get the number of ``currency_code`` units per pivot unit.

        Raises:
            RateUnavailableError: The snapshot does not list the currency
        """
        code = (currency_code or self.pivot).upper()
        if code == self.pivot:
            return 1

        snapshot = await self.ensure_snapshot()
        rates = snapshot.rates if snapshot else {}
        if code not in rates:
            raise RateUnavailableError(f"Currency rate for {code} not available")
        return float(rates[code])

    __call__ = get_rate
