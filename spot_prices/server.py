"""Minimal HTTP endpoint serving day-ahead prices.

Run with ``python -m aiohttp.web -H localhost -P 3000 spot_prices.server:init_app``.
"""
import logging
import os
from typing import Optional

from aiohttp import web

from .client import SpotPriceClient
from .const.config import Config
from .const.errors import InvalidInputError, SpotPriceError

_LOGGER = logging.getLogger(__name__)

CLIENT_KEY = web.AppKey("client", SpotPriceClient)

# Query parameters passed through to the fetch options
QUERY_OPTIONS = (
    Config.AREA,
    Config.DATE,
    Config.INTERVAL,
    Config.PREFER,
    Config.CURRENCY,
    Config.PROVIDERS,
)


async def get_prices(request: web.Request) -> web.Response:
    """Handle ``GET /api/prices``."""
    options = {key: request.query[key] for key in QUERY_OPTIONS if request.query.get(key)}
    client = request.app[CLIENT_KEY]

    try:
        result = await client.fetch(options)
    except InvalidInputError as e:
        return web.json_response({"error": str(e)}, status=400)
    except SpotPriceError as e:
        _LOGGER.warning("Price fetch failed for %s: %s", options.get(Config.AREA), e)
        return web.json_response({"error": str(e)}, status=502)

    return web.json_response(result.to_dict())


def create_app(client: Optional[SpotPriceClient] = None) -> web.Application:
    """Create the application.

    Args:
        client: Optional client; by default one is created reading the
            ENTSO-E token from ENTSOE_TOKEN and closed on shutdown

    Returns:
        aiohttp application with ``GET /api/prices``
    """
    app = web.Application()
    app[CLIENT_KEY] = client or SpotPriceClient(entsoe_token=os.environ.get("ENTSOE_TOKEN"))
    app.router.add_get("/api/prices", get_prices)

    async def close_client(app: web.Application) -> None:
        await app[CLIENT_KEY].close()

    app.on_cleanup.append(close_client)
    return app


def init_app(argv=None) -> web.Application:
    """Factory for ``python -m aiohttp.web``."""
    return create_app()
