"""European Central Bank reference rate provider."""
import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Optional

from .base.api_client import ApiClient
from .base.error_handler import ErrorHandler
from ..const.api import ECB
from ..const.currencies import Currency
from ..const.errors import RateFetchError
from ..const.network import Network
from ..price.currency import CurrencySnapshot

_LOGGER = logging.getLogger(__name__)


class EcbRateProvider:
    """Fetch the ECB daily euro foreign exchange reference rates.

    The feed is EUR based; ``rates[code]`` is ``code`` units per euro.
    """

    SOURCE_TYPE = "ecb"

    def __init__(self, session=None, url: Optional[str] = None,
                 max_retries: int = Network.Defaults.RETRY_COUNT):
        """Initialize the provider.

        Args:
            session: Optional aiohttp session
            url: Override for the daily XML feed
            max_retries: Retries per request on retryable errors
        """
        self.url = url or Network.URLs.ECB
        self.max_retries = max_retries
        self.client = ApiClient(session=session)
        self.error_handler = ErrorHandler(self.SOURCE_TYPE, error_class=RateFetchError)

    async def fetch_snapshot(self, base: str = Currency.PIVOT) -> CurrencySnapshot:
        """Fetch today's reference rates.

        Args:
            base: Requested base; the feed is always EUR based and callers
                harmonize the result

        Returns:
            EUR based CurrencySnapshot

        Raises:
            RateFetchError: On HTTP failure or a malformed document
        """
        xml_data = await self.error_handler.run_with_retry(
            self.client.fetch, self.url, response_format="xml", max_retries=self.max_retries
        )
        if not xml_data:
            raise RateFetchError("ECB: Empty currency feed")
        return self.parse(xml_data, source=self.url)

    @staticmethod
    def parse(xml_data: str, source: Optional[str] = None) -> CurrencySnapshot:
        """Parse ECB exchange rate XML data.

        Raises:
            RateFetchError: If the document has no dated rate cube
        """
        try:
            root = ET.fromstring(xml_data)
        except ET.ParseError as e:
            raise RateFetchError(f"Unexpected currency XML structure: {e}") from e

        ns = {
            "gesmes": ECB.XML_NAMESPACE_GESMES,
            "ecb": ECB.XML_NAMESPACE_ECB,
        }

        day_cube = root.find(".//ecb:Cube[@time]", ns)
        if day_cube is None:
            raise RateFetchError("Currency feed missing date attribute")

        # ECB always uses EUR as the base currency
        rates = {Currency.EUR: 1.0}
        for cube in day_cube.findall("ecb:Cube[@currency]", ns):
            currency = cube.attrib.get("currency", "").upper()
            rate = cube.attrib.get("rate")
            if not currency or rate is None:
                continue
            try:
                rates[currency] = float(rate)
            except ValueError:
                _LOGGER.debug("Skipping malformed ECB rate %s=%r", currency, rate)

        _LOGGER.info("Fetched %d exchange rates", len(rates) - 1)
        return CurrencySnapshot(
            base=ECB.BASE_CURRENCY,
            rates=rates,
            fetched_at=datetime.now(timezone.utc).isoformat(),
            date=day_cube.attrib["time"],
            source=source,
        )
