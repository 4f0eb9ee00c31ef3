"""Currency rate snapshots and rebasing onto the pivot currency."""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from ..const.currencies import Currency
from ..const.defaults import Defaults
from ..const.errors import MissingPivotRateError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrencySnapshot:
    """Exchange rates as published by a rate provider.

    ``rates[code]`` is the number of ``code`` units per one ``base`` unit.
    After :func:`harmonize_snapshot` the base is always the pivot currency
    and ``rates[pivot] == 1``.
    """

    base: str
    rates: Mapping[str, float] = field(default_factory=dict)
    fetched_at: Optional[str] = None
    date: Optional[str] = None
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "base": self.base,
            "rates": dict(self.rates),
            "fetchedAt": self.fetched_at,
            "date": self.date,
            "source": self.source,
        }


def _to_finite_float(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def harmonize_snapshot(snapshot: CurrencySnapshot, pivot: str = Currency.PIVOT) -> CurrencySnapshot:
    """Rebase a snapshot onto the pivot currency.

    Args:
        snapshot: Raw snapshot from a rate transport
        pivot: Currency every rate should be expressed against

    Returns:
        Snapshot with ``base == pivot`` and ``rates[pivot] == 1``

    Raises:
        MissingPivotRateError: The snapshot is declared against another base
            and carries no usable pivot rate
    """
    pivot = pivot.upper()
    declared_base = (snapshot.base or pivot).upper()

    if declared_base == pivot:
        rates = {}
        for code, value in (snapshot.rates or {}).items():
            number = _to_finite_float(value)
            if number is None:
                _LOGGER.debug("Dropping malformed rate %s=%r", code, value)
                continue
            rates[code.upper()] = number
        rates[pivot] = 1
        return replace(snapshot, base=pivot, rates=rates)

    raw_rates = snapshot.rates or {}
    pivot_per_base = _to_finite_float(raw_rates.get(pivot))
    if pivot_per_base is None:
        # Codes may arrive in lower case
        for code, value in raw_rates.items():
            if code.upper() == pivot:
                pivot_per_base = _to_finite_float(value)
                break
    if not pivot_per_base:
        raise MissingPivotRateError(
            f"Rate snapshot based on {declared_base} has no usable {pivot} rate"
        )

    converted: Dict[str, float] = {}
    for code, value in raw_rates.items():
        number = _to_finite_float(value)
        if number is None:
            _LOGGER.debug("Dropping malformed rate %s=%r", code, value)
            continue
        converted[code.upper()] = round(number / pivot_per_base, Defaults.RATE_PRECISION)

    converted[declared_base] = round(1 / pivot_per_base, Defaults.RATE_PRECISION)
    converted[pivot] = 1

    _LOGGER.debug(
        "Rebased %d rates from %s onto %s (1 %s = %s %s)",
        len(converted), declared_base, pivot, declared_base, pivot_per_base, pivot,
    )
    return replace(snapshot, base=pivot, rates=converted)
