"""Centralized error handling for API calls."""
import asyncio
import logging
import random
from typing import Any, Callable, Type

from ...const.errors import PriceFetchError, SpotPriceError
from ...const.network import Network, NetworkErrorType

_LOGGER = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling for API calls."""

    def __init__(self, source_type: str, error_class: Type[SpotPriceError] = PriceFetchError):
        """Initialize the error handler.

        Args:
            source_type: The source type identifier
            error_class: Library error raised when retries are given up
        """
        self.source_type = source_type
        self.error_class = error_class

    def classify_error(self, error: Exception) -> str:
        """Classify an error into a standardized type.

        Args:
            error: The exception to classify

        Returns:
            Standardized error type
        """
        if isinstance(error, asyncio.TimeoutError):
            return NetworkErrorType.TIMEOUT

        status = getattr(error, "status", None)
        if status in (401, 403):
            return NetworkErrorType.AUTHENTICATION
        if status == 429:
            return NetworkErrorType.RATE_LIMIT
        if status == 204:
            return NetworkErrorType.NOT_PUBLISHED
        if isinstance(status, int) and status >= 500:
            return NetworkErrorType.SERVER

        error_str = str(error).lower()

        # Prices not published yet will not appear by retrying right away
        if any(x in error_str for x in ["not ready", "not published", "no matching data"]):
            return NetworkErrorType.NOT_PUBLISHED

        if any(x in error_str for x in ["rate limit", "throttle", "too many requests"]):
            return NetworkErrorType.RATE_LIMIT

        if any(x in error_str for x in ["auth", "token", "credential", "permission"]):
            return NetworkErrorType.AUTHENTICATION

        if any(x in error_str for x in ["timeout", "timed out"]):
            return NetworkErrorType.TIMEOUT

        if any(x in error_str for x in ["connection", "connect", "unreachable", "network"]):
            return NetworkErrorType.CONNECTIVITY

        if any(x in error_str for x in ["server", "internal", "bad gateway", "unavailable"]):
            return NetworkErrorType.SERVER

        if any(x in error_str for x in ["parse", "format", "json", "xml", "unexpected", "mapping"]):
            return NetworkErrorType.DATA_FORMAT

        return f"{NetworkErrorType.UNKNOWN}:{error.__class__.__name__}"

    def should_retry(self, error_type: str, retry_count: int, max_retries: int) -> bool:
        """Determine if a retry should be attempted for a given error.

        Args:
            error_type: The error type
            retry_count: Current retry count
            max_retries: Maximum number of retries

        Returns:
            Whether to retry
        """
        if retry_count >= max_retries:
            return False

        # These need user intervention or a later publication, not a retry
        if error_type in (
            NetworkErrorType.AUTHENTICATION,
            NetworkErrorType.DATA_FORMAT,
            NetworkErrorType.NOT_PUBLISHED,
        ):
            return False

        return True

    def get_retry_delay(self, error_type: str, retry_count: int) -> float:
        """Calculate the exponential backoff delay before retrying.

        Args:
            error_type: The error type
            retry_count: Current retry count

        Returns:
            Delay in seconds before retrying
        """
        base_delay = Network.Defaults.RETRY_BASE_DELAY
        if error_type == NetworkErrorType.RATE_LIMIT:
            # Rate limit errors need longer backoff
            base_delay *= 2.5

        # Jitter in [-0.2, 0.2] to prevent thundering herd
        jitter = random.uniform(-0.2, 0.2)

        delay = base_delay * (2 ** retry_count) * (1.0 + jitter)

        return min(delay, Network.Defaults.RETRY_MAX_DELAY)

    async def run_with_retry(
        self,
        func: Callable,
        *args,
        max_retries: int = Network.Defaults.RETRY_COUNT,
        **kwargs
    ) -> Any:
        """Run a coroutine function with retry logic.

        Args:
            func: The function to call
            *args: Arguments to pass to the function
            max_retries: Maximum number of retries
            **kwargs: Keyword arguments to pass to the function

        Returns:
            The result of the function

        Raises:
            PriceFetchError: If all retries fail (or ``error_class``); library
                errors raised by the call are re-raised as they are
        """
        retry_count = 0

        while True:
            try:
                return await func(*args, **kwargs)
            except Exception as error:
                error_type = self.classify_error(error)

                if not self.should_retry(error_type, retry_count, max_retries):
                    _LOGGER.debug(
                        "Error in %s API call (attempt %d/%d): %s. Classified as %s. Not retrying.",
                        self.source_type, retry_count + 1, max_retries + 1, error, error_type,
                    )
                    if isinstance(error, SpotPriceError):
                        raise
                    raise self._wrap(error) from error

                delay = self.get_retry_delay(error_type, retry_count)
                _LOGGER.warning(
                    "Error in %s API call (attempt %d/%d): %s. Classified as %s. Retrying in %.2fs.",
                    self.source_type, retry_count + 1, max_retries + 1, error, error_type, delay,
                )
                await asyncio.sleep(delay)
                retry_count += 1

    def _wrap(self, error: Exception) -> SpotPriceError:
        message = str(error) or error.__class__.__name__
        if issubclass(self.error_class, PriceFetchError):
            return self.error_class(message, self.source_type)
        return self.error_class(message)
