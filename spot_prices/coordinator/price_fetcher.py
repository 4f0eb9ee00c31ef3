"""Day-ahead price pipeline: provider fallback, conversion, resampling, statistics."""
import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from .data_models import PriceResult
from .fallback_manager import FallbackManager
from ..api import create_api
from ..api.base.data_structure import ProviderResponse
from ..config.fetch_config import FetchConfig
from ..const.errors import PriceFetchError
from ..const.sources import Source
from ..price.currency_converter import RateLookup, prepare_points
from ..price.rate_cache import RateCache
from ..price.series_normalizer import normalize_series
from ..price.statistics import build_daily_stats, build_hourly_entries

_LOGGER = logging.getLogger(__name__)


def resolve_source_order(providers: Optional[Sequence[str]] = None, prefer: Optional[str] = None,
                         entsoe_token: Optional[str] = None) -> List[str]:
    """Order candidate sources for a fetch.

    An explicit ``providers`` list wins (lower-cased, unknown names kept so
    the attempt fails on its own). Otherwise the preferred source comes
    first, followed by the rest of the canonical order; an unknown
    preference yields the canonical order. Sources that need a token are
    dropped when none is configured.

    Args:
        providers: Optional override list
        prefer: Preferred source name
        entsoe_token: ENTSO-E token, if any

    Returns:
        Source names in the order they should be tried
    """
    canonical = list(Source.DEFAULT_PRIORITY)

    if providers:
        order = [str(source).lower() for source in providers]
    else:
        preferred = prefer.lower() if isinstance(prefer, str) else Source.NORDPOOL
        if preferred not in canonical:
            order = canonical
        else:
            order = [preferred] + [source for source in canonical if source != preferred]

    if not entsoe_token:
        order = [source for source in order if source not in Source.REQUIRES_TOKEN]
    return order


async def fetch_day_ahead_prices(
    config: Union[FetchConfig, Mapping[str, Any]],
    *,
    session=None,
    rate_lookup: Optional[RateLookup] = None,
    rate_cache: Optional[RateCache] = None,
    providers: Optional[Mapping[str, Any]] = None,
) -> PriceResult:
    """Fetch, reconcile and summarize day-ahead prices for one region.

    Args:
        config: FetchConfig, or a mapping validated through FetchConfig.from_dict
        session: Optional aiohttp session shared by the built-in transports
        rate_lookup: Currency rate lookup, ``code -> units per EUR`` (sync or
            async); takes precedence over ``rate_cache``
        rate_cache: RateCache whose ``get_rate`` is used when no lookup is
            given. No rate source is created here: with neither argument a
            provider reporting another currency fails with
            NoRateProviderError. SpotPriceClient passes its ECB backed cache.
        providers: Optional mapping of source name to an object with
            ``async fetch(target_date)``, replacing the built-in transports

    Returns:
        PriceResult from the first source that succeeded

    Raises:
        InvalidInputError: The configuration is invalid
        NoProvidersAvailableError: No candidate source is left
        PriceFetchError: Every source failed; carries the last failure
        CurrencyError: A needed rate could not be obtained
    """
    if not isinstance(config, FetchConfig):
        config = FetchConfig.from_dict(config)
    if rate_lookup is None and rate_cache is not None:
        rate_lookup = rate_cache.get_rate

    candidates = resolve_source_order(config.providers, config.prefer, config.entsoe_token)
    _LOGGER.debug(
        f"[{config.region}] Fetching {config.iso_date} at {config.interval} in {config.currency}, "
        f"sources: {candidates}"
    )

    async def attempt(source: str) -> PriceResult:
        transport = _get_transport(source, config, session, providers)
        response = await transport.fetch(config.target_date)
        return await _build_result(response, config, rate_lookup)

    manager = FallbackManager(label=config.region)
    return await manager.fetch(candidates, attempt)


def _get_transport(source: str, config: FetchConfig, session, providers: Optional[Mapping[str, Any]]):
    if providers is not None:
        if source not in providers:
            raise PriceFetchError(f"Unknown price source: {source}", source)
        return providers[source]
    return create_api(source, config, session=session)


async def _build_result(response: ProviderResponse, config: FetchConfig,
                        rate_lookup: Optional[RateLookup]) -> PriceResult:
    points = await prepare_points(response.points, config.currency, rate_lookup)
    normalized = normalize_series(points, config.interval)
    hourly = build_hourly_entries(normalized)
    daily = build_daily_stats(hourly, config.peak_start_hour, config.peak_end_hour)

    _LOGGER.debug(
        f"[{config.region}] {response.provider}: {len(response.points)} raw points "
        f"({response.resolution}) -> {len(hourly)} entries"
    )
    return PriceResult(
        price_date=config.iso_date,
        provider=response.provider,
        provider_url=response.provider_url,
        region_code=config.region,
        currency=config.currency,
        hourly=tuple(hourly),
        daily=daily,
    )
