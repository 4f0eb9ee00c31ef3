"""Long-lived client owning the HTTP session and the rate cache."""
import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

import aiohttp

from .api.ecb import EcbRateProvider
from .config.fetch_config import FetchConfig
from .const.config import Config
from .coordinator.data_models import PriceResult
from .coordinator.price_fetcher import fetch_day_ahead_prices
from .price.currency_converter import RateLookup
from .price.rate_cache import RateCache

_LOGGER = logging.getLogger(__name__)


class SpotPriceClient:
    """Fetch day-ahead prices with one session and one rate cache.

    The rate cache lives as long as the client, so repeated fetches on the
    same day share one ECB download. Use as an async context manager; only
    a session created by the client is closed on exit.

    Example:
        async with SpotPriceClient(entsoe_token=token) as client:
            result = await client.fetch({"region": "SE3", "currency": "EUR"})
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None,
                 rate_cache: Optional[RateCache] = None, entsoe_token: Optional[str] = None):
        """Initialize the client.

        Args:
            session: Optional aiohttp session to borrow
            rate_cache: Optional rate cache, ECB backed by default
            entsoe_token: ENTSO-E token used when a config does not carry one
        """
        self._session = session
        self._owns_session = session is None
        self.entsoe_token = entsoe_token
        self._rate_cache = rate_cache

    @property
    def session(self) -> aiohttp.ClientSession:
        """The HTTP session, created on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    @property
    def rate_cache(self) -> RateCache:
        """The rate cache, created on first use."""
        if self._rate_cache is None:
            self._rate_cache = RateCache(EcbRateProvider(session=self.session))
        return self._rate_cache

    async def fetch(self, config: Any, rate_lookup: Optional[RateLookup] = None,
                    providers: Optional[Mapping[str, Any]] = None) -> PriceResult:
        """Fetch prices for one region and day.

        Args:
            config: FetchConfig or a mapping of options
            rate_lookup: Overrides the client's rate cache
            providers: Optional transport overrides keyed by source name

        Returns:
            PriceResult
        """
        if not isinstance(config, FetchConfig):
            options = dict(config)
            if self.entsoe_token and not options.get(Config.ENTSOE_TOKEN):
                options[Config.ENTSOE_TOKEN] = self.entsoe_token
            config = FetchConfig.from_dict(options)
        elif self.entsoe_token and not config.entsoe_token:
            config = replace(config, entsoe_token=self.entsoe_token)

        return await fetch_day_ahead_prices(
            config,
            session=self.session,
            rate_lookup=rate_lookup,
            rate_cache=self.rate_cache,
            providers=providers,
        )

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "SpotPriceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
