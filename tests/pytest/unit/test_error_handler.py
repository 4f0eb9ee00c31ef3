#!/usr/bin/env python3
"""Tests for error classification and retries."""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from spot_prices.api.base.error_handler import ErrorHandler
from spot_prices.const.errors import PriceFetchError, RateFetchError, InvalidInputError
from spot_prices.const.network import NetworkErrorType


class StatusError(Exception):
    """Exception carrying an HTTP status like aiohttp's."""

    def __init__(self, status, message="HTTP error"):
        super().__init__(message)
        self.status = status


class TestClassifyError:
    """Test ErrorHandler.classify_error."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (asyncio.TimeoutError(), NetworkErrorType.TIMEOUT),
            (StatusError(401), NetworkErrorType.AUTHENTICATION),
            (StatusError(403), NetworkErrorType.AUTHENTICATION),
            (StatusError(429), NetworkErrorType.RATE_LIMIT),
            (StatusError(503), NetworkErrorType.SERVER),
            (PriceFetchError("Nord Pool: Day ahead prices are not ready for 2025-01-15"), NetworkErrorType.NOT_PUBLISHED),
            (PriceFetchError("ENTSO-E: No matching data found for SE3"), NetworkErrorType.NOT_PUBLISHED),
            (PriceFetchError("ENTSO-E API requires an access token"), NetworkErrorType.AUTHENTICATION),
            (ConnectionError("connection reset by peer"), NetworkErrorType.CONNECTIVITY),
            (PriceFetchError("ENTSO-E: Failed to parse XML response"), NetworkErrorType.DATA_FORMAT),
        ],
    )
    def test_known_errors(self, error, expected):
        """Errors are classified by status first, then by message."""
        assert ErrorHandler("nordpool").classify_error(error) == expected

    def test_unknown_error_includes_class(self):
        """Unrecognized errors keep their class name."""
        assert ErrorHandler("nordpool").classify_error(KeyError("x")) == "unknown:KeyError"


class TestShouldRetry:
    """Test ErrorHandler.should_retry."""

    def test_permanent_errors_are_not_retried(self):
        """Authentication, format and publication errors stop at once."""
        handler = ErrorHandler("entsoe")

        for error_type in (NetworkErrorType.AUTHENTICATION, NetworkErrorType.DATA_FORMAT,
                           NetworkErrorType.NOT_PUBLISHED):
            assert not handler.should_retry(error_type, 0, 3)

    def test_transient_errors_retry_until_limit(self):
        """Connectivity problems retry until max_retries."""
        handler = ErrorHandler("entsoe")

        assert handler.should_retry(NetworkErrorType.CONNECTIVITY, 0, 2)
        assert handler.should_retry(NetworkErrorType.CONNECTIVITY, 1, 2)
        assert not handler.should_retry(NetworkErrorType.CONNECTIVITY, 2, 2)

    def test_retry_delay_backs_off_exponentially(self):
        """Delays double per retry, with jitter, up to the maximum."""
        handler = ErrorHandler("entsoe")

        assert handler.get_retry_delay(NetworkErrorType.SERVER, 20) <= 60.0
        assert 1.6 <= handler.get_retry_delay(NetworkErrorType.SERVER, 0) <= 2.4
        assert 3.2 <= handler.get_retry_delay(NetworkErrorType.SERVER, 1) <= 4.8
        assert 4.0 <= handler.get_retry_delay(NetworkErrorType.RATE_LIMIT, 0) <= 6.0


class TestRunWithRetry:
    """Test ErrorHandler.run_with_retry."""

    @pytest.mark.asyncio
    async def test_returns_result_after_transient_failure(self):
        """A transient failure followed by success returns the value."""
        handler = ErrorHandler("nordpool")
        func = AsyncMock(side_effect=[ConnectionError("connection refused"), {"ok": True}])

        with patch("spot_prices.api.base.error_handler.asyncio.sleep", AsyncMock()):
            assert await handler.run_with_retry(func, "url", max_retries=2) == {"ok": True}

        assert func.await_count == 2

    @pytest.mark.asyncio
    async def test_foreign_errors_are_wrapped(self):
        """Non-library exceptions become the handler's error class."""
        handler = ErrorHandler("nordpool")
        original = ValueError("unexpected payload")

        with pytest.raises(PriceFetchError) as exc_info:
            await handler.run_with_retry(AsyncMock(side_effect=original), max_retries=0)

        assert exc_info.value.source == "nordpool"
        assert exc_info.value.__cause__ is original

    @pytest.mark.asyncio
    async def test_error_class_is_configurable(self):
        """Rate transports raise RateFetchError."""
        handler = ErrorHandler("ecb", error_class=RateFetchError)

        with pytest.raises(RateFetchError, match="bad gateway"):
            await handler.run_with_retry(AsyncMock(side_effect=OSError("bad gateway")), max_retries=0)

    @pytest.mark.asyncio
    async def test_library_errors_pass_through(self):
        """Errors already raised by this package are not rewrapped."""
        handler = ErrorHandler("nordpool")
        error = InvalidInputError("bad format")

        with pytest.raises(InvalidInputError) as exc_info:
            await handler.run_with_retry(AsyncMock(side_effect=error))

        assert exc_info.value is error
