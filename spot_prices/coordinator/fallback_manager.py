"""Sequential provider fallback as an explicit state machine."""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union

from ..const.errors import NoProvidersAvailableError, PriceFetchError, SpotPriceError

_LOGGER = logging.getLogger(__name__)


class FetchState(Enum):
    """States of one fallback run."""

    TRY_NEXT_PROVIDER = "try_next_provider"
    SUCCESS = "success"
    ALL_EXHAUSTED = "all_exhausted"


@dataclass(frozen=True)
class FetchSuccess:
    """A candidate produced a result."""

    result: Any
    provider: str
    attempted: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FetchExhausted:
    """Every candidate failed; ``last_error`` is the most recent failure."""

    last_error: Optional[PriceFetchError]
    attempted: List[str] = field(default_factory=list)


FetchOutcome = Union[FetchSuccess, FetchExhausted]


class FallbackManager:
    """Try candidate sources in order until one succeeds.

    Attempts are strictly sequential and the first success wins. A provider
    failure is recorded and replaced by the next one, earlier failures are
    not aggregated. Library errors other than ``PriceFetchError`` (rate
    lookups, configuration) are not provider failures and propagate.
    """

    def __init__(self, label: str = ""):
        """Initialize the manager.

        Args:
            label: Prefix for log messages, typically the region
        """
        self.label = label
        self.state: Optional[FetchState] = None

    async def run(self, candidates: Sequence[str],
                  attempt: Callable[[str], Awaitable[Any]]) -> FetchOutcome:
        """Run the state machine over ``candidates``.

        Args:
            candidates: Source names in priority order
            attempt: Coroutine function producing a result for one source

        Returns:
            FetchSuccess or FetchExhausted
        """
        attempted: List[str] = []
        last_error: Optional[PriceFetchError] = None
        pending = list(candidates)
        self.state = FetchState.TRY_NEXT_PROVIDER

        while self.state is FetchState.TRY_NEXT_PROVIDER:
            if not pending:
                self.state = FetchState.ALL_EXHAUSTED
                break

            source = pending.pop(0)
            attempted.append(source)
            _LOGGER.debug(f"[{self.label}] Trying '{source}' ({len(attempted)}/{len(candidates)})")

            try:
                result = await attempt(source)
            except PriceFetchError as e:
                last_error = e
            except SpotPriceError:
                raise
            except Exception as e:
                last_error = PriceFetchError(str(e), source)
                last_error.__cause__ = e
            else:
                _LOGGER.info(f"[{self.label}] '{source}' succeeded")
                self.state = FetchState.SUCCESS
                return FetchSuccess(result=result, provider=source, attempted=attempted)

            _LOGGER.warning(f"[{self.label}] '{source}' failed: {last_error}")

        _LOGGER.error(
            f"[{self.label}] All sources failed to provide data. "
            f"Attempted: {', '.join(attempted) or 'none'}. Last error: {last_error}"
        )
        return FetchExhausted(last_error=last_error, attempted=attempted)

    async def fetch(self, candidates: Sequence[str], attempt: Callable[[str], Awaitable[Any]]) -> Any:
        """Run the fallback and unwrap the outcome.

        Raises:
            NoProvidersAvailableError: If ``candidates`` is empty
            PriceFetchError: The last provider failure when all failed
        """
        if not candidates:
            raise NoProvidersAvailableError("No valid price sources available for the given configuration")

        outcome = await self.run(candidates, attempt)
        if isinstance(outcome, FetchSuccess):
            return outcome.result
        raise outcome.last_error
