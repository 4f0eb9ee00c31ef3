"""Command line entry point: print day-ahead prices as JSON.

Usage:
    python -m spot_prices SE3 EUR 15m 2025-01-15 --prefer entsoe

The ENTSO-E token is read from the ENTSOE_TOKEN environment variable.
"""
import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

from .client import SpotPriceClient
from .const.config import Config
from .const.errors import SpotPriceError

_LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(prog="spot_prices", description="Fetch day-ahead electricity spot prices")

    parser.add_argument("region", help="Market region (e.g. NO1, SE3, DK1)")
    parser.add_argument("currency", nargs="?", help="Output currency, the region's own by default")
    parser.add_argument("interval", nargs="?", help="Output resolution: 1h or 15m")
    parser.add_argument("date", nargs="?", help="Delivery day as YYYY-MM-DD, today by default")

    # Source selection
    parser.add_argument("--prefer", help="Source to try first (nordpool or entsoe)")
    parser.add_argument("--providers", help="Comma separated source order, overrides --prefer")

    # Daily statistics
    parser.add_argument("--peak-start", type=int, help="First hour of the peak window")
    parser.add_argument("--peak-end", type=int, help="Hour the peak window ends")

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def setup_logging(debug: bool) -> None:
    """Set up logging with the specified level.

    Args:
        debug: Whether to enable debug logging
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_options(args: argparse.Namespace) -> dict:
    """Turn parsed arguments into fetch options, leaving unset ones out."""
    options = {
        Config.AREA: args.region,
        Config.CURRENCY: args.currency,
        Config.INTERVAL: args.interval,
        Config.DATE: args.date,
        Config.PREFER: args.prefer,
        Config.PROVIDERS: args.providers,
        Config.PEAK_START_HOUR: args.peak_start,
        Config.PEAK_END_HOUR: args.peak_end,
        Config.ENTSOE_TOKEN: os.environ.get("ENTSOE_TOKEN"),
    }
    return {key: value for key, value in options.items() if value is not None}


async def run(args: argparse.Namespace) -> dict:
    """Fetch prices for the parsed arguments."""
    async with SpotPriceClient() as client:
        result = await client.fetch(build_options(args))
    return result.to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        prices = asyncio.run(run(args))
    except SpotPriceError as e:
        _LOGGER.debug("Fetch failed", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(prices, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
