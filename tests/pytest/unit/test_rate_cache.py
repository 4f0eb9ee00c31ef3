#!/usr/bin/env python3
"""Tests for the per-day exchange rate cache."""
import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time

from spot_prices.const.errors import MissingPivotRateError, RateFetchError, RateUnavailableError
from spot_prices.price.currency import CurrencySnapshot
from spot_prices.price.rate_cache import RateCache


def make_provider(*snapshots):
    """Rate provider mock returning the given snapshots in order."""
    provider = AsyncMock()
    if len(snapshots) == 1:
        provider.fetch_snapshot = AsyncMock(return_value=snapshots[0])
    else:
        provider.fetch_snapshot = AsyncMock(side_effect=list(snapshots))
    return provider


ECB_SNAPSHOT = CurrencySnapshot(base="EUR", rates={"EUR": 1.0, "SEK": 11.0, "NOK": 11.5}, date="2025-01-15")


class TestRateCache:
    """Test RateCache lookups and freshness."""

    @pytest.mark.asyncio
    async def test_pivot_returns_one_without_fetch(self):
        """EUR (or an empty code) never triggers a fetch."""
        provider = make_provider(ECB_SNAPSHOT)
        cache = RateCache(provider)

        assert await cache.get_rate("EUR") == 1
        assert await cache.get_rate("eur") == 1
        assert await cache.get_rate(None) == 1
        provider.fetch_snapshot.assert_not_called()

    @pytest.mark.asyncio
    async def test_rate_lookup_fetches_once_per_day(self):
        """Repeated lookups on the same day reuse the snapshot."""
        provider = make_provider(ECB_SNAPSHOT)
        cache = RateCache(provider)

        with freeze_time("2025-01-15 08:00:00"):
            assert await cache.get_rate("SEK") == 11.0
            assert await cache.get_rate("nok") == 11.5

        provider.fetch_snapshot.assert_awaited_once_with("EUR")
        assert cache.cache_key == "2025-01-15"

    @pytest.mark.asyncio
    async def test_new_day_refreshes_snapshot(self):
        """The first lookup of a new UTC day fetches again."""
        second = CurrencySnapshot(base="EUR", rates={"SEK": 12.0}, date="2025-01-16")
        provider = make_provider(ECB_SNAPSHOT, second)
        cache = RateCache(provider)

        with freeze_time("2025-01-15 23:59:00"):
            assert await cache.get_rate("SEK") == 11.0
        with freeze_time("2025-01-16 00:01:00"):
            assert await cache.get_rate("SEK") == 12.0

        assert provider.fetch_snapshot.await_count == 2
        assert cache.cache_key == "2025-01-16"

    @pytest.mark.asyncio
    async def test_injected_clock_drives_day_key(self):
        """The day key comes from the injected clock."""
        now = {"value": datetime(2025, 3, 1, 12, tzinfo=timezone.utc)}
        provider = make_provider(ECB_SNAPSHOT, ECB_SNAPSHOT)
        cache = RateCache(provider, clock=lambda: now["value"])

        await cache.get_rate("SEK")
        await cache.get_rate("SEK")
        now["value"] = datetime(2025, 3, 2, 0, 30, tzinfo=timezone.utc)
        await cache.get_rate("SEK")

        assert provider.fetch_snapshot.await_count == 2

    @pytest.mark.asyncio
    async def test_disable_cache_fetches_every_time(self):
        """With the cache disabled each lookup fetches."""
        provider = make_provider(ECB_SNAPSHOT, ECB_SNAPSHOT, ECB_SNAPSHOT)
        cache = RateCache(provider, disable_cache=True)

        for _ in range(3):
            await cache.get_rate("SEK")

        assert provider.fetch_snapshot.await_count == 3

    @pytest.mark.asyncio
    async def test_unknown_currency_raises(self):
        """A code missing from the snapshot is an error."""
        cache = RateCache(make_provider(ECB_SNAPSHOT))

        with pytest.raises(RateUnavailableError, match="Currency rate for XYZ not available"):
            await cache.get_rate("xyz")

    @pytest.mark.asyncio
    async def test_non_pivot_snapshot_is_harmonized(self):
        """Snapshots in another base are rebased before use."""
        usd_snapshot = CurrencySnapshot(base="USD", rates={"EUR": 0.8, "SEK": 10.0})
        cache = RateCache(make_provider(usd_snapshot))

        assert await cache.get_rate("SEK") == 12.5
        assert await cache.get_rate("USD") == 1.25
        assert cache.snapshot.base == "EUR"
        assert cache.snapshot.rates["EUR"] == 1

    @pytest.mark.asyncio
    async def test_harmonization_error_propagates(self):
        """A snapshot that cannot be rebased fails the lookup."""
        cache = RateCache(make_provider(CurrencySnapshot(base="USD", rates={"SEK": 10.0})))

        with pytest.raises(MissingPivotRateError):
            await cache.get_rate("SEK")
        assert cache.snapshot is None

    @pytest.mark.asyncio
    async def test_fetch_error_is_not_cached(self):
        """A failed fetch leaves the cache empty so the next lookup retries."""
        provider = AsyncMock()
        provider.fetch_snapshot = AsyncMock(side_effect=[RateFetchError("boom"), ECB_SNAPSHOT])
        cache = RateCache(provider)

        with pytest.raises(RateFetchError):
            await cache.get_rate("SEK")
        assert await cache.get_rate("SEK") == 11.0

    @pytest.mark.asyncio
    async def test_concurrent_lookups_share_one_fetch(self):
        """Callers arriving during a fetch wait for it instead of fetching again."""
        release = asyncio.Event()

        async def slow_fetch(base):
            await release.wait()
            return ECB_SNAPSHOT

        provider = AsyncMock()
        provider.fetch_snapshot = AsyncMock(side_effect=slow_fetch)
        cache = RateCache(provider)

        tasks = [asyncio.ensure_future(cache.get_rate(code)) for code in ("SEK", "NOK", "SEK")]
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*tasks)

        assert results == [11.0, 11.5, 11.0]
        provider.fetch_snapshot.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_clear_drops_snapshot(self):
        """clear() forces the next lookup to fetch."""
        provider = make_provider(ECB_SNAPSHOT, ECB_SNAPSHOT)
        cache = RateCache(provider)

        await cache.get_rate("SEK")
        cache.clear()
        assert cache.snapshot is None
        await cache.get_rate("SEK")

        assert provider.fetch_snapshot.await_count == 2

    @pytest.mark.asyncio
    async def test_cache_is_callable(self):
        """The cache itself can be passed as a rate lookup."""
        cache = RateCache(make_provider(ECB_SNAPSHOT))

        assert await cache("SEK") == 11.0
