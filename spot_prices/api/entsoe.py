"""API handler for ENTSO-E Transparency Platform."""
import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Optional, Tuple

import aiohttp

from .base.base_price_api import BasePriceAPI
from .base.data_structure import ProviderResponse
from .parsers.entsoe_parser import EntsoeParser
from ..const.api import EntsoE
from ..const.areas import AreaMapping
from ..const.errors import PriceFetchError
from ..const.network import Network
from ..const.sources import Source
from ..const.time import TimeFormat
from ..timezone.timezone_utils import get_timezone_for_area
from ..utils.debug_utils import build_masked_url, sanitize_sensitive_data

_LOGGER = logging.getLogger(__name__)


class EntsoeAPI(BasePriceAPI):
    """ENTSO-E day-ahead (A44) API implementation."""

    SOURCE_TYPE = Source.ENTSOE

    def __init__(self, region: str, token: Optional[str] = None, session=None,
                 base_url: Optional[str] = None, max_retries: int = Network.Defaults.RETRY_COUNT):
        """Initialize the API.

        Args:
            region: Market region code
            token: ENTSO-E security token
            session: Optional aiohttp session for API requests
            base_url: Override for the endpoint
            max_retries: Retries per request on retryable errors
        """
        super().__init__(region, session=session, base_url=base_url, max_retries=max_retries)
        self.api_key = token
        self.parser = EntsoeParser()

    def _get_source_type(self) -> str:
        return self.SOURCE_TYPE

    def _get_base_url(self) -> str:
        return Network.URLs.ENTSOE

    def _resolve_area_code(self) -> str:
        code = AreaMapping.ENTSOE_MAPPING.get(self.region)
        if not code:
            raise PriceFetchError(f"ENTSO-E region mapping missing for {self.region}", self.source_type)
        return code

    def get_period(self, target_date: date) -> Tuple[str, str]:
        """UTC period covering the delivery day in the area's local time.

        Returns:
            (periodStart, periodEnd) formatted as yyyyMMddHHmm
        """
        area_tz = get_timezone_for_area(self.region)
        local_start = datetime.combine(target_date, time.min, tzinfo=area_tz)
        local_end = datetime.combine(target_date + timedelta(days=1), time.min, tzinfo=area_tz)
        return (
            local_start.astimezone(timezone.utc).strftime(TimeFormat.ENTSOE_DATE_HOUR),
            local_end.astimezone(timezone.utc).strftime(TimeFormat.ENTSOE_DATE_HOUR),
        )

    def build_params(self, target_date: date) -> Dict[str, str]:
        """Query parameters for one delivery day."""
        area_code = self._resolve_area_code()
        period_start, period_end = self.get_period(target_date)
        return {
            "documentType": EntsoE.DOC_TYPE_A44,
            "securityToken": self.api_key,
            "in_Domain": area_code,
            "out_Domain": area_code,
            "periodStart": period_start,
            "periodEnd": period_end,
        }

    def _check_markers(self, text: str, target_date: date) -> None:
        if EntsoE.UNAUTHORIZED_MARKER in text:
            raise PriceFetchError(
                "ENTSO-E API authentication failed: 'Not authorized' string found", self.source_type
            )
        if EntsoE.NO_DATA_MARKER in text:
            raise PriceFetchError(
                f"ENTSO-E: No matching data found for {self.region} on {target_date}", self.source_type
            )

    async def _fetch_day(self, target_date: date) -> ProviderResponse:
        if not self.api_key:
            raise PriceFetchError("ENTSO-E API requires an access token", self.source_type)

        params = self.build_params(target_date)
        _LOGGER.debug(f"ENTSO-E fetch: area={self.region}, params={sanitize_sensitive_data(params)}")

        try:
            response_text = await self.client.fetch(self.base_url, params=params, response_format="xml")
        except aiohttp.ClientResponseError as e:
            # The error URL carries the token, only the status and body text are kept
            self._check_markers(e.message or "", target_date)
            kind = "server error" if e.status >= 500 else "request format rejected"
            raise PriceFetchError(f"ENTSO-E: HTTP {e.status} {kind}", self.source_type) from None

        if not response_text:
            raise PriceFetchError(
                f"ENTSO-E: No matching data found for {self.region} on {target_date}", self.source_type
            )
        self._check_markers(response_text, target_date)

        points, resolution = self.parser.parse(response_text)
        return ProviderResponse(
            provider=self.display_name,
            provider_url=build_masked_url(
                self.base_url,
                {**params, "periodStart": "*****", "periodEnd": "*****"},
            ),
            resolution=resolution,
            points=points,
        )
