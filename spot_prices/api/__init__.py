"""Provider transports for spot-prices."""
import logging

from ..const.errors import PriceFetchError
from ..const.sources import Source

_LOGGER = logging.getLogger(__name__)


def create_api(source_type: str, config, session=None):
    """Create an API instance for the specified source type.

    Args:
        source_type: Source type identifier
        config: FetchConfig supplying region, currency, token and URL overrides
        session: Optional session for API requests

    Returns:
        API instance for the specified source type

    Raises:
        PriceFetchError: If the source is unknown
    """
    base_url = (config.base_urls or {}).get(source_type)
    if source_type == Source.NORDPOOL:
        from .nordpool import NordpoolAPI
        return NordpoolAPI(
            config.region,
            currency=config.currency,
            session=session,
            base_url=base_url,
            max_retries=config.max_retries,
        )
    elif source_type == Source.ENTSOE:
        from .entsoe import EntsoeAPI
        return EntsoeAPI(
            config.region,
            token=config.entsoe_token,
            session=session,
            base_url=base_url,
            max_retries=config.max_retries,
        )
    else:
        raise PriceFetchError(f"Unknown price source: {source_type}", source_type)
