#!/usr/bin/env python3
"""Tests for timestamp parsing."""
from datetime import datetime, timedelta, timezone

import pytest

from spot_prices.timezone.parser import TimestampParser, parse_timestamp


class TestTimestampParser:
    """Test TimestampParser."""

    @pytest.mark.parametrize(
        "value",
        [
            "2025-01-15T00:00:00Z",
            "2025-01-15T00:00Z",
            "2025-01-15T01:00:00+01:00",
            "2025-01-15T00:00:00",
            datetime(2025, 1, 15),
            1736899200,
        ],
    )
    def test_forms_resolve_to_same_instant(self, value):
        """Every supported form gives an aware UTC datetime."""
        assert TimestampParser().parse(value) == datetime(2025, 1, 15, tzinfo=timezone.utc)
        assert TimestampParser().parse(value).utcoffset() == timedelta(0)

    @pytest.mark.parametrize("value", ["", "not a date", None, True, float("nan"), [2025]])
    def test_invalid_values_raise(self, value):
        """Garbage is rejected with ValueError."""
        with pytest.raises(ValueError):
            TimestampParser().parse(value)

    def test_parse_timestamp_returns_none_on_garbage(self):
        """The module helper never raises."""
        assert parse_timestamp("garbage") is None
        assert parse_timestamp("2025-03-30T01:00:00Z") == datetime(2025, 3, 30, 1, tzinfo=timezone.utc)
