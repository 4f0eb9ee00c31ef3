"""Base price API interface for standardizing price source implementations."""
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from .api_client import ApiClient
from .data_structure import ProviderResponse
from .error_handler import ErrorHandler
from ...const.network import Network
from ...const.sources import Source

_LOGGER = logging.getLogger(__name__)


class BasePriceAPI(ABC):
    """Abstract base class for all price APIs.

    Subclasses implement ``_fetch_day`` for one delivery day; ``fetch`` wraps
    it in the shared retry policy so every transport fails with
    ``PriceFetchError``.
    """

    def __init__(self, region: str, session=None, base_url: Optional[str] = None,
                 max_retries: int = Network.Defaults.RETRY_COUNT):
        """Initialize the API.

        Args:
            region: Market region code, e.g. "SE3"
            session: Optional aiohttp session for API requests
            base_url: Override for the source's endpoint
            max_retries: Retries per request on retryable errors
        """
        self.region = region
        self.session = session
        self.source_type = self._get_source_type()
        self.base_url = base_url or self._get_base_url()
        self.max_retries = max_retries
        self.client = ApiClient(session=session)
        self.error_handler = ErrorHandler(self.source_type)

    @abstractmethod
    def _get_source_type(self) -> str:
        """Get the source type identifier.

        Returns:
            Source type identifier
        """

    @abstractmethod
    def _get_base_url(self) -> str:
        """Get the base URL for the API.

        Returns:
            Base URL as string
        """

    @abstractmethod
    async def _fetch_day(self, target_date: date) -> ProviderResponse:
        """Fetch and parse prices for one delivery day."""

    @property
    def display_name(self) -> str:
        """Provider name reported in results."""
        return Source.get_display_name(self.source_type)

    async def fetch(self, target_date: date) -> ProviderResponse:
        """Fetch day-ahead prices for the configured region.

        Args:
            target_date: Delivery day

        Returns:
            ProviderResponse with raw points in currency per kWh

        Raises:
            PriceFetchError: Prices not published, credentials missing,
                region unmapped, HTTP failure or malformed payload
        """
        _LOGGER.debug(f"{self.source_type}: Fetching day-ahead prices for area {self.region} on {target_date}")
        response = await self.error_handler.run_with_retry(
            self._fetch_day, target_date, max_retries=self.max_retries
        )
        response.source = self.source_type
        _LOGGER.debug(
            f"{self.source_type}: Received {len(response.points)} points at resolution {response.resolution}"
        )
        return response
