"""Parser for Nordpool API responses."""

import logging
from typing import Any, Dict, List

from ..base.data_structure import RawPricePoint
from ...const.energy import EnergyUnit
from ...const.errors import PriceFetchError
from ...const.sources import Source

_LOGGER = logging.getLogger(__name__)


class NordpoolParser:
    """Parser for Nordpool day-ahead JSON.

    The payload lists ``multiAreaEntries``, each with ``deliveryStart``,
    ``deliveryEnd`` and an ``entryPerArea`` mapping of area code to price in
    currency per MWh.
    """

    def __init__(self, area: str, currency: str):
        """Initialize the parser.

        Args:
            area: Delivery area whose prices are extracted
            currency: Currency the prices were requested in
        """
        self.area = area
        self.currency = currency

    def parse(self, data: Dict[str, Any]) -> List[RawPricePoint]:
        """Extract the area's price points.

        Args:
            data: Decoded Nordpool response

        Returns:
            Raw points in currency per kWh, in payload order

        Raises:
            PriceFetchError: If the payload is not a Nordpool price document
        """
        if not isinstance(data, dict):
            raise PriceFetchError(
                f"Nord Pool: Unexpected response format ({type(data).__name__})", Source.NORDPOOL
            )

        multi_area_entries = data.get("multiAreaEntries") or []
        if not isinstance(multi_area_entries, list):
            raise PriceFetchError("Nord Pool: Unexpected response format (multiAreaEntries)", Source.NORDPOOL)

        points = []
        for entry in multi_area_entries:
            if not isinstance(entry, dict):
                continue

            entry_per_area = entry.get("entryPerArea")
            if not isinstance(entry_per_area, dict) or self.area not in entry_per_area:
                continue

            price = entry_per_area[self.area]
            try:
                value = float(str(price).replace(",", ".")) / EnergyUnit.CONVERSION[EnergyUnit.MWH]
            except (TypeError, ValueError):
                # Leave unparseable values for the normalizer to drop
                _LOGGER.debug("[NordpoolParser] Unparseable price %r at %s", price, entry.get("deliveryStart"))
                value = price

            points.append(
                RawPricePoint(
                    start=entry.get("deliveryStart"),
                    end=entry.get("deliveryEnd"),
                    value=value,
                    currency=self.currency,
                )
            )

        _LOGGER.debug(f"[NordpoolParser] Parsed {len(points)} prices for {self.area}")
        return points
