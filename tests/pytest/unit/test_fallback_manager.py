#!/usr/bin/env python3
"""Tests for the provider fallback state machine."""
from unittest.mock import AsyncMock

import pytest

from spot_prices.const.errors import (
    NoProvidersAvailableError,
    PriceFetchError,
    RateUnavailableError,
)
from spot_prices.coordinator.fallback_manager import (
    FallbackManager,
    FetchExhausted,
    FetchState,
    FetchSuccess,
)


class TestFallbackManager:
    """Test FallbackManager.run and fetch."""

    @pytest.mark.asyncio
    async def test_first_success_wins(self):
        """Later candidates are not tried after a success."""
        attempt = AsyncMock(return_value="result")
        manager = FallbackManager("SE3")

        outcome = await manager.run(["nordpool", "entsoe"], attempt)

        assert outcome == FetchSuccess(result="result", provider="nordpool", attempted=["nordpool"])
        assert manager.state is FetchState.SUCCESS
        attempt.assert_awaited_once_with("nordpool")

    @pytest.mark.asyncio
    async def test_falls_back_to_next_candidate(self):
        """A provider failure moves on to the next source."""
        attempt = AsyncMock(side_effect=[PriceFetchError("down", "nordpool"), "result"])

        outcome = await FallbackManager().run(["nordpool", "entsoe"], attempt)

        assert isinstance(outcome, FetchSuccess)
        assert outcome.provider == "entsoe"
        assert outcome.attempted == ["nordpool", "entsoe"]

    @pytest.mark.asyncio
    async def test_exhausted_keeps_only_last_error(self):
        """When all fail, the outcome carries the last failure."""
        attempt = AsyncMock(side_effect=[PriceFetchError("first"), PriceFetchError("second")])
        manager = FallbackManager()

        outcome = await manager.run(["nordpool", "entsoe"], attempt)

        assert isinstance(outcome, FetchExhausted)
        assert str(outcome.last_error) == "second"
        assert outcome.attempted == ["nordpool", "entsoe"]
        assert manager.state is FetchState.ALL_EXHAUSTED

    @pytest.mark.asyncio
    async def test_foreign_exception_is_wrapped(self):
        """Errors that are not library errors become PriceFetchError with the same message."""
        original = ConnectionError("socket closed")
        attempt = AsyncMock(side_effect=original)

        outcome = await FallbackManager().run(["nordpool"], attempt)

        assert isinstance(outcome.last_error, PriceFetchError)
        assert str(outcome.last_error) == "socket closed"
        assert outcome.last_error.source == "nordpool"
        assert outcome.last_error.__cause__ is original

    @pytest.mark.asyncio
    async def test_currency_error_propagates(self):
        """Rate failures are not provider failures and stop the run."""
        attempt = AsyncMock(side_effect=RateUnavailableError("Missing currency rate for SEK"))

        with pytest.raises(RateUnavailableError):
            await FallbackManager().run(["nordpool", "entsoe"], attempt)
        attempt.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_fetch_raises_last_error(self):
        """fetch() unwraps an exhausted outcome into its last error."""
        attempt = AsyncMock(side_effect=[PriceFetchError("first"), PriceFetchError("ENTSO-E down")])

        with pytest.raises(PriceFetchError, match="ENTSO-E down"):
            await FallbackManager().fetch(["nordpool", "entsoe"], attempt)

    @pytest.mark.asyncio
    async def test_fetch_without_candidates(self):
        """An empty candidate list is its own error."""
        with pytest.raises(NoProvidersAvailableError):
            await FallbackManager().fetch([], AsyncMock())

    @pytest.mark.asyncio
    async def test_run_without_candidates_is_exhausted(self):
        """run() itself reports an empty list as exhausted."""
        outcome = await FallbackManager().run([], AsyncMock())

        assert outcome == FetchExhausted(last_error=None, attempted=[])
