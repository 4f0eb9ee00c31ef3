"""API handler for Nordpool."""

import logging
from datetime import date
from typing import Optional
from urllib.parse import urlencode

from .base.base_price_api import BasePriceAPI
from .base.data_structure import ProviderResponse
from .parsers.nordpool_parser import NordpoolParser
from ..const.api import Nordpool
from ..const.areas import AreaMapping
from ..const.currencies import CurrencyInfo
from ..const.errors import PriceFetchError
from ..const.network import Network
from ..const.sources import Source
from ..const.time import TimeFormat, TimeInterval

_LOGGER = logging.getLogger(__name__)


class NordpoolAPI(BasePriceAPI):
    """Nordpool day-ahead API implementation."""

    SOURCE_TYPE = Source.NORDPOOL

    def __init__(self, region: str, currency: Optional[str] = None, session=None,
                 base_url: Optional[str] = None, max_retries: int = Network.Defaults.RETRY_COUNT):
        """Initialize the API.

        Args:
            region: Market region code
            currency: Currency to request prices in, the region's own by default
            session: Optional aiohttp session for API requests
            base_url: Override for the endpoint
            max_retries: Retries per request on retryable errors
        """
        super().__init__(region, session=session, base_url=base_url, max_retries=max_retries)
        self.currency = (currency or CurrencyInfo.get_default_currency(region)).upper()
        self.delivery_area = AreaMapping.NORDPOOL_DELIVERY.get(region, region)
        self.parser = NordpoolParser(self.delivery_area, self.currency)

    def _get_source_type(self) -> str:
        return self.SOURCE_TYPE

    def _get_base_url(self) -> str:
        """Get the base URL for the API.

        Returns:
            Base URL as string
        """
        return Network.URLs.NORDPOOL

    def build_params(self, target_date: date) -> dict:
        """Query parameters for one delivery day."""
        return {
            "market": Nordpool.MARKET_DAYAHEAD,
            "deliveryArea": self.delivery_area,
            "currency": self.currency,
            "date": target_date.strftime(TimeFormat.DATE_ONLY),
        }

    async def _fetch_day(self, target_date: date) -> ProviderResponse:
        params = self.build_params(target_date)
        url = f"{self.base_url}?{urlencode(params)}"
        _LOGGER.debug(f"Fetching Nordpool data for area: {self.region}, delivery area: {self.delivery_area}")

        data = await self.client.fetch(self.base_url, params=params)
        if not data:
            raise PriceFetchError(
                f"Nord Pool: Day ahead prices are not ready for {params['date']}", self.source_type
            )

        points = self.parser.parse(data)
        if not points:
            raise PriceFetchError(
                f"Nord Pool: Day ahead prices are not ready for {params['date']}", self.source_type
            )

        resolution = (
            TimeInterval.ISO_QUARTER_HOURLY
            if len(points) == Nordpool.QUARTER_HOUR_ENTRIES
            else TimeInterval.ISO_HOURLY
        )
        return ProviderResponse(
            provider=self.display_name,
            provider_url=url,
            resolution=resolution,
            points=points,
        )
