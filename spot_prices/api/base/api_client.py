"""HTTP client used by the provider and rate transports."""
import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from ...const.network import ContentType, Network

_LOGGER = logging.getLogger(__name__)


class ApiClient:
    """Thin aiohttp wrapper with shared headers, timeout and pooling.

    Non-2xx responses raise ``aiohttp.ClientResponseError``; a 204 response
    yields None. Timeouts and connection errors propagate as raised by
    aiohttp so the caller's error handler can classify them.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None, pool_size: int = 10,
                 timeout: int = Network.Defaults.HTTP_TIMEOUT):
        """Initialize the API client.

        Args:
            session: Optional aiohttp ClientSession to use
            pool_size: Maximum number of concurrent requests
            timeout: Total request timeout in seconds
        """
        self.session = session
        self._semaphore = asyncio.Semaphore(pool_size)
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {
            "User-Agent": Network.Defaults.USER_AGENT,
            "Accept": ContentType.JSON,
        }

    async def fetch(self, url: str, params: Optional[Dict[str, Any]] = None,
                    headers: Optional[Dict[str, str]] = None,
                    response_format: str = "json") -> Any:
        """Fetch a URL and decode the body.

        Args:
            url: The URL to request
            params: Optional query parameters
            headers: Optional request headers
            response_format: "json" or "text"/"xml"

        Returns:
            Decoded JSON, response text, or None for 204 No Content
        """
        merged_headers = {**self._headers, **(headers or {})}
        if response_format == "xml":
            merged_headers["Accept"] = f"{ContentType.XML}, text/xml"

        async with self._semaphore:
            if self.session is not None:
                return await self._get(self.session, url, params, merged_headers, response_format)
            # Create temporary session if none exists
            async with aiohttp.ClientSession() as session:
                return await self._get(session, url, params, merged_headers, response_format)

    async def _get(self, session: aiohttp.ClientSession, url: str, params, headers,
                   response_format: str) -> Any:
        _LOGGER.debug("GET %s", url)
        async with session.get(url, params=params, headers=headers, timeout=self._timeout) as response:
            if response.status == 204:
                _LOGGER.debug("No content (204) from %s", url)
                return None
            if response.status >= 400:
                body = await response.text()
                _LOGGER.debug("Error response %s (first 500 chars): %s", response.status, body[:500])
                # Keep the body in the message, providers explain failures there
                raise aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=response.status,
                    message=f"{response.reason}: {body[:200]}" if body else str(response.reason),
                    headers=response.headers,
                )

            if response_format == "json":
                return await response.json(content_type=None)
            return await response.text()
