"""Currency conversion of prices through the pivot currency."""

import inspect
import logging
import math
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union

from ..api.base.data_structure import RawPricePoint
from ..const.currencies import Currency
from ..const.errors import NoRateProviderError, RateUnavailableError

_LOGGER = logging.getLogger(__name__)

RateLookup = Callable[[str], Union[float, Awaitable[float]]]


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


async def _lookup(rate_lookup: RateLookup, code: str) -> Any:
    rate = rate_lookup(code)
    if inspect.isawaitable(rate):
        rate = await rate
    return rate


async def convert_currency(
    value: float,
    from_currency: str,
    to_currency: str,
    rate_lookup: RateLookup,
    pivot: str = Currency.PIVOT,
) -> float:
    """Convert an amount from one currency to another via the pivot.

    Args:
        value: Amount in ``from_currency``
        from_currency: Source currency code
        to_currency: Target currency code
        rate_lookup: Returns units of a currency per pivot unit; may be sync
            or async
        pivot: Pivot currency code

    Returns:
        Amount in ``to_currency``

    Raises:
        RateUnavailableError: A required rate was missing or zero
    """
    source = from_currency.upper()
    target = to_currency.upper()
    pivot = pivot.upper()

    if source == target:
        return value

    amount_in_pivot = value
    if source != pivot:
        from_rate = await _lookup(rate_lookup, source)
        if not from_rate:
            raise RateUnavailableError(f"Missing currency rate for {source}")
        amount_in_pivot = value / from_rate

    if target == pivot:
        return amount_in_pivot

    to_rate = await _lookup(rate_lookup, target)
    if not to_rate:
        raise RateUnavailableError(f"Missing currency rate for {target}")
    return amount_in_pivot * to_rate


class _MemoizedLookup:
    """Wraps a rate lookup so each code is resolved once per batch."""

    def __init__(self, rate_lookup: RateLookup):
        self._rate_lookup = rate_lookup
        self._rates: Dict[str, Any] = {}

    async def __call__(self, code: str) -> Any:
        if code not in self._rates:
            self._rates[code] = await _lookup(self._rate_lookup, code)
        return self._rates[code]


async def prepare_points(
    points: Iterable[RawPricePoint],
    target_currency: str,
    rate_lookup: Optional[RateLookup] = None,
    pivot: str = Currency.PIVOT,
) -> List[RawPricePoint]:
    """Convert every point of a series into the target currency.

    Points without a currency are taken to be in the target currency. Rates
    are only looked up when at least one point needs converting.

    Raises:
        NoRateProviderError: Conversion is needed but ``rate_lookup`` is None
    """
    if points is None:
        return []
    points = list(points)
    target = target_currency.upper()

    def source_of(point: RawPricePoint) -> str:
        return (point.currency or target).upper()

    needs_conversion = any(source_of(point) != target for point in points)
    if needs_conversion and rate_lookup is None:
        raise NoRateProviderError(
            "Currency conversion required but no currency rate provider is available"
        )

    lookup = _MemoizedLookup(rate_lookup) if needs_conversion else None
    if needs_conversion:
        _LOGGER.debug(
            "Converting %d prices from %s to %s",
            len(points),
            sorted({source_of(point) for point in points}),
            target,
        )

    prepared = []
    for point in points:
        source = source_of(point)
        value = point.value
        if source != target:
            number = _as_number(value)
            # Unparseable values are left for the normalizer to discard
            if math.isfinite(number):
                value = await convert_currency(number, source, target, lookup, pivot)
        prepared.append(RawPricePoint(start=point.start, end=point.end, value=value, currency=target))

    return prepared
