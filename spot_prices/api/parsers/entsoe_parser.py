"""Parser for ENTSO-E API responses."""
import logging
import xml.etree.ElementTree as ET
from datetime import timedelta
from typing import List, Optional, Tuple

from ..base.data_structure import RawPricePoint
from ...const.api import EntsoE
from ...const.energy import EnergyUnit
from ...const.errors import PriceFetchError
from ...const.sources import Source
from ...const.time import TimeInterval
from ...timezone.parser import parse_timestamp

_LOGGER = logging.getLogger(__name__)


class EntsoeParser:
    """Parser for ENTSO-E day-ahead (A44) publication documents."""

    def parse(self, xml_data: str) -> Tuple[List[RawPricePoint], str]:
        """Parse an ENTSO-E XML response.

        Every ``TimeSeries/Period`` contributes its points; a point at
        ``position`` n covers ``start + (n-1)*resolution`` to
        ``start + n*resolution``.

        Args:
            xml_data: XML response from ENTSO-E

        Returns:
            Tuple of (raw points sorted by start, ISO resolution of the last
            period that declared one)

        Raises:
            PriceFetchError: If the document is not a publication document or
                holds no priced periods
        """
        try:
            root = ET.fromstring(xml_data)
        except ET.ParseError as e:
            raise PriceFetchError(f"ENTSO-E: Failed to parse XML response: {e}", Source.ENTSOE) from e

        ns = {"ns": self._namespace(root)}
        if not root.tag.endswith(EntsoE.ROOT_ELEMENT):
            raise PriceFetchError("ENTSO-E: Unexpected document structure", Source.ENTSOE)

        time_series = root.findall("ns:TimeSeries", ns)
        _LOGGER.debug(f"ENTSOE Parser: Found {len(time_series)} TimeSeries elements")

        points: List[RawPricePoint] = []
        resolution = TimeInterval.ISO_HOURLY
        found_period = False

        for series in time_series:
            currency_el = series.find("ns:currency_Unit.name", ns)
            currency = currency_el.text.strip() if currency_el is not None and currency_el.text else EntsoE.DEFAULT_CURRENCY

            for period in series.findall("ns:Period", ns):
                found_period = True
                res_el = period.find("ns:resolution", ns)
                period_resolution = res_el.text.strip() if res_el is not None and res_el.text else TimeInterval.ISO_HOURLY
                if res_el is not None and res_el.text:
                    resolution = period_resolution
                points.extend(self._extract_points(period, period_resolution, currency, ns))

        if not found_period:
            raise PriceFetchError("ENTSO-E: Prices are not available in the response", Source.ENTSOE)

        points.sort(key=lambda p: p.start)
        _LOGGER.debug(f"ENTSOE Parser: Parsed {len(points)} points, resolution {resolution}")
        return points, resolution

    @staticmethod
    def _namespace(root: ET.Element) -> str:
        if root.tag.startswith("{"):
            return root.tag[1:root.tag.index("}")]
        return EntsoE.XML_NAMESPACE

    def _extract_points(self, period: ET.Element, resolution: str, currency: str,
                        ns: dict) -> List[RawPricePoint]:
        start_el = period.find("ns:timeInterval/ns:start", ns)
        period_start = parse_timestamp(start_el.text.strip()) if start_el is not None and start_el.text else None
        if period_start is None:
            raise PriceFetchError("ENTSO-E: Missing time interval start value", Source.ENTSOE)

        step = timedelta(minutes=TimeInterval.from_iso_duration(resolution))
        points = []

        for point in period.findall("ns:Point", ns):
            position = self._read_number(point.find("ns:position", ns))
            amount = self._read_number(point.find("ns:price.amount", ns))
            if position is None or amount is None:
                _LOGGER.debug("ENTSOE Parser: Skipping point without position or price.amount")
                continue

            start = period_start + step * (int(position) - 1)
            points.append(
                RawPricePoint(
                    start=start.isoformat(),
                    end=(start + step).isoformat(),
                    value=amount / EnergyUnit.CONVERSION[EnergyUnit.MWH],
                    currency=currency,
                )
            )

        return points

    @staticmethod
    def _read_number(element: Optional[ET.Element]) -> Optional[float]:
        if element is None or element.text is None:
            return None
        try:
            return float(element.text.strip())
        except ValueError:
            return None
