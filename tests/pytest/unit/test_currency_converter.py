#!/usr/bin/env python3
"""Tests for pivot currency conversion of price points."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from spot_prices.api.base.data_structure import RawPricePoint
from spot_prices.const.errors import NoRateProviderError, RateUnavailableError
from spot_prices.price.currency_converter import convert_currency, prepare_points

RATES = {"SEK": 11.0, "NOK": 11.5, "EUR": 1.0}


def sync_lookup():
    return MagicMock(side_effect=lambda code: RATES.get(code))


class TestConvertCurrency:
    """Test convert_currency."""

    @pytest.mark.asyncio
    async def test_identity_skips_lookup(self):
        """Converting to the same currency never consults the rates."""
        lookup = MagicMock()

        assert await convert_currency(100, "EUR", "EUR", lookup) == 100
        assert await convert_currency(100, "sek", "SEK", lookup) == 100
        lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_from_pivot_multiplies(self):
        """EUR to SEK multiplies by the SEK rate only."""
        lookup = sync_lookup()

        assert await convert_currency(2.0, "EUR", "SEK", lookup) == 22.0
        lookup.assert_called_once_with("SEK")

    @pytest.mark.asyncio
    async def test_to_pivot_divides(self):
        """SEK to EUR divides by the SEK rate only."""
        lookup = sync_lookup()

        assert await convert_currency(22.0, "SEK", "EUR", lookup) == 2.0
        lookup.assert_called_once_with("SEK")

    @pytest.mark.asyncio
    async def test_cross_rate_goes_through_pivot(self):
        """NOK to SEK is value / NOK * SEK."""
        result = await convert_currency(23.0, "NOK", "SEK", sync_lookup())

        assert result == pytest.approx(22.0)

    @pytest.mark.asyncio
    async def test_async_lookup_is_awaited(self):
        """Async rate lookups work the same as sync ones."""
        lookup = AsyncMock(side_effect=lambda code: RATES[code])

        assert await convert_currency(1.0, "EUR", "NOK", lookup) == 11.5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rate", [0, None])
    async def test_missing_rate_raises(self, rate):
        """A zero or missing rate cannot be used."""
        with pytest.raises(RateUnavailableError, match="Missing currency rate for SEK"):
            await convert_currency(1.0, "EUR", "SEK", lambda code: rate)


class TestPreparePoints:
    """Test prepare_points."""

    @pytest.mark.asyncio
    async def test_none_returns_empty_list(self):
        """No points means nothing to prepare."""
        assert await prepare_points(None, "EUR") == []

    @pytest.mark.asyncio
    async def test_same_currency_needs_no_lookup(self):
        """Points already in the target currency pass without rates."""
        points = [
            RawPricePoint("2025-01-15T00:00:00Z", "2025-01-15T01:00:00Z", 0.1, "eur"),
            RawPricePoint("2025-01-15T01:00:00Z", "2025-01-15T02:00:00Z", 0.2, None),
        ]

        prepared = await prepare_points(points, "EUR", rate_lookup=None)

        assert [p.value for p in prepared] == [0.1, 0.2]
        assert all(p.currency == "EUR" for p in prepared)

    @pytest.mark.asyncio
    async def test_conversion_without_lookup_raises(self):
        """Converting needs a rate source."""
        points = [RawPricePoint("2025-01-15T00:00:00Z", "2025-01-15T01:00:00Z", 0.1, "EUR")]

        with pytest.raises(NoRateProviderError):
            await prepare_points(points, "SEK", rate_lookup=None)

    @pytest.mark.asyncio
    async def test_rate_looked_up_once_per_currency(self):
        """One lookup per source currency serves the whole batch."""
        lookup = sync_lookup()
        points = [
            RawPricePoint(f"2025-01-15T{hour:02d}:00:00Z", f"2025-01-15T{hour + 1:02d}:00:00Z", 1.0, "EUR")
            for hour in range(4)
        ]

        prepared = await prepare_points(points, "SEK", rate_lookup=lookup)

        assert [p.value for p in prepared] == [11.0] * 4
        assert all(p.currency == "SEK" for p in prepared)
        lookup.assert_called_once_with("SEK")

    @pytest.mark.asyncio
    async def test_mixed_currencies(self):
        """Points missing a currency are not converted, the others are."""
        points = [
            RawPricePoint("2025-01-15T00:00:00Z", "2025-01-15T01:00:00Z", 1.0, "EUR"),
            RawPricePoint("2025-01-15T01:00:00Z", "2025-01-15T02:00:00Z", 5.0, None),
        ]

        prepared = await prepare_points(points, "NOK", rate_lookup=sync_lookup())

        assert [p.value for p in prepared] == [11.5, 5.0]
        assert [p.currency for p in prepared] == ["NOK", "NOK"]

    @pytest.mark.asyncio
    async def test_unparseable_value_left_for_normalizer(self):
        """Bad values are passed through unchanged instead of failing the batch."""
        points = [
            RawPricePoint("2025-01-15T00:00:00Z", "2025-01-15T01:00:00Z", "n/a", "EUR"),
            RawPricePoint("2025-01-15T01:00:00Z", "2025-01-15T02:00:00Z", "2", "EUR"),
        ]

        prepared = await prepare_points(points, "SEK", rate_lookup=sync_lookup())

        assert prepared[0].value == "n/a"
        assert prepared[1].value == 22.0

    @pytest.mark.asyncio
    async def test_input_points_are_not_modified(self):
        """prepare_points builds new points."""
        point = RawPricePoint("2025-01-15T00:00:00Z", "2025-01-15T01:00:00Z", 1.0, "EUR")

        await prepare_points([point], "SEK", rate_lookup=sync_lookup())

        assert point.value == 1.0
        assert point.currency == "EUR"
