"""Open Exchange Rates provider.

API docs: https://docs.openexchangerates.org/reference/latest-json
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .base.api_client import ApiClient
from .base.error_handler import ErrorHandler
from ..const.api import OpenExchangeRates
from ..const.errors import RateFetchError
from ..const.network import Network
from ..price.currency import CurrencySnapshot

_LOGGER = logging.getLogger(__name__)


class OpenExchangeRatesProvider:
    """Fetch the latest rates from Open Exchange Rates.

    The free plan only serves a USD base, so snapshots from this provider
    are rebased onto the pivot by the rate cache.
    """

    SOURCE_TYPE = "open_exchange_rates"

    def __init__(self, app_id: str, session=None, base_url: Optional[str] = None,
                 base: str = OpenExchangeRates.BASE_CURRENCY,
                 max_retries: int = Network.Defaults.RETRY_COUNT):
        """Initialize the provider.

        Args:
            app_id: Open Exchange Rates application id
            session: Optional aiohttp session
            base_url: Override for the API root
            base: Base currency to request
            max_retries: Retries per request on retryable errors

        Raises:
            RateFetchError: If no app_id is given
        """
        if not app_id:
            raise RateFetchError("Open Exchange Rates requires an app_id")
        self.app_id = app_id
        self.base_url = (base_url or Network.URLs.OPEN_EXCHANGE_RATES).rstrip("/")
        self.base = base.upper()
        self.max_retries = max_retries
        self.client = ApiClient(session=session)
        self.error_handler = ErrorHandler(self.SOURCE_TYPE, error_class=RateFetchError)

    async def fetch_snapshot(self, base: Optional[str] = None) -> CurrencySnapshot:
        """Fetch the latest rates.

        Args:
            base: Ignored, the provider's configured base is requested

        Returns:
            Snapshot in the provider's base currency, not yet harmonized

        Raises:
            RateFetchError: On HTTP failure or a payload missing fields
        """
        url = f"{self.base_url}{OpenExchangeRates.LATEST_PATH}"
        params = {"app_id": self.app_id, "base": self.base}
        payload = await self.error_handler.run_with_retry(
            self.client.fetch, url, params=params, max_retries=self.max_retries
        )
        return self.parse(payload, source=url)

    @staticmethod
    def parse(payload: Dict[str, Any], source: Optional[str] = None) -> CurrencySnapshot:
        """Convert a ``latest.json`` payload into a snapshot.

        Raises:
            RateFetchError: If timestamp, base or rates are missing
        """
        if not isinstance(payload, dict):
            raise RateFetchError("Open Exchange Rates payload missing required fields")

        timestamp_raw = payload.get("timestamp")
        base_currency = payload.get("base")
        rates_raw = payload.get("rates")
        if timestamp_raw is None or base_currency is None or not isinstance(rates_raw, dict):
            raise RateFetchError("Open Exchange Rates payload missing required fields")

        try:
            timestamp = datetime.fromtimestamp(int(timestamp_raw), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError) as e:
            raise RateFetchError(f"Open Exchange Rates timestamp is invalid: {timestamp_raw!r}") from e

        rates = {str(code).upper(): rate for code, rate in rates_raw.items()}
        _LOGGER.debug("Fetched %d Open Exchange Rates quotes (base %s)", len(rates), base_currency)
        return CurrencySnapshot(
            base=str(base_currency).upper(),
            rates=rates,
            fetched_at=timestamp.isoformat(),
            date=timestamp.date().isoformat(),
            source=source,
        )
