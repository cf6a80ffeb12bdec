"""
StaleCache — stale-while-revalidate on top of a FutureEngine.
"""

from __future__ import annotations

import copy
import logging

from kungfu import Result, Ok, Error

from stalecache.engine import FutureEngine, Pending, Complete, Reloading
from stalecache.cell._types import FutureState, StartupGuard, OutdatedMarker

logger = logging.getLogger(__name__)


def _payload[T, E](result: Result[T, E] | None) -> T | None:
    match result:
        case Ok(value):
            return value
        case _:
            return None


class StaleCache[T, E]:
    """
    Cache cell scoped to one component instance.

    Composes the engine's raw state with an outdated flag owned here.
    Only the engine writes the raw state; only this cell (or whoever
    holds the marker) writes the flag.

    Example:
        profile = (
            future_hook(load_profile)
            .depends_on(user_id)
            .startup(StartupGuard.ENABLE)
            .build()
        )

        profile.fetch()                  # refresh only if stale
        match profile.check_state():
            case FutureState.READY:
                render(profile.read())
            case FutureState.OUTDATED:
                render_dimmed(profile.read(allow_cache_while_reloading=True))
    """

    __slots__ = ("_engine", "_outdated")

    def __init__(
        self,
        engine: FutureEngine[T, E],
        startup: StartupGuard = StartupGuard.DISABLE,
        marker: OutdatedMarker | None = None,
    ) -> None:
        self._engine = engine
        if marker is None:
            marker = OutdatedMarker(startup is StartupGuard.ENABLE)
        elif startup is StartupGuard.ENABLE:
            marker.mark()
        self._outdated = marker

    @property
    def engine(self) -> FutureEngine[T, E]:
        return self._engine

    @property
    def outdated_marker(self) -> OutdatedMarker:
        """Shareable handle to the outdated flag."""
        return self._outdated

    def check_state(self) -> FutureState:
        """Derive the logical state. EMPTY and RELOADING are never OUTDATED."""
        match self._engine.state:
            case Pending():
                return FutureState.EMPTY
            case Reloading():
                return FutureState.RELOADING
            case Complete(Ok()):
                state = FutureState.READY
            case Complete(Error()):
                state = FutureState.ERROR
            case _:
                # Not a RawState: nothing usable has completed.
                return FutureState.EMPTY

        if self.is_outdated():
            return FutureState.OUTDATED
        return state

    def read(self, allow_cache_while_reloading: bool = False) -> T | None:
        """
        Read the cached value under a policy.

        Strict (default): a value only in READY. The flag hides
        everything.

        Lenient: the last Ok payload in READY and RELOADING. In OUTDATED
        the raw state is consulted directly and a Complete(Ok) payload is
        returned anyway. EMPTY and ERROR give None.
        """
        state = self.check_state()

        if not allow_cache_while_reloading:
            if self.is_outdated() or state is not FutureState.READY:
                return None
            return _payload(self._engine.value())

        match state:
            case FutureState.EMPTY | FutureState.ERROR:
                return None
            case FutureState.READY | FutureState.RELOADING:
                return _payload(self._engine.value())
            case FutureState.OUTDATED:
                match self._engine.state:
                    case Complete(Ok(value)):
                        return value
                    case _:
                        return None

    def read_clone(self, allow_cache_while_reloading: bool = False) -> T | None:
        """Same as read(), but the caller owns the returned copy."""
        return copy.deepcopy(self.read(allow_cache_while_reloading))

    def read_unchecked(self) -> Result[T, E] | None:
        """Raw result from the engine, no staleness applied."""
        return self._engine.value()

    def restart(self) -> bool:
        """
        Re-run the producer.

        Suppressed while EMPTY or RELOADING. Returns whether it restarted.
        """
        state = self.check_state()
        if state in (FutureState.EMPTY, FutureState.RELOADING):
            logger.debug("restart suppressed in %s", state.name)
            return False

        # Flag first: no query after this call may see OUTDATED.
        self._outdated.clear()
        self._engine.restart()
        logger.debug("restart issued from %s", state.name)
        return True

    def fetch(self) -> bool:
        """Restart only if outdated."""
        if self.is_outdated():
            return self.restart()
        return False

    def is_outdated(self) -> bool:
        return self._outdated.get()

    def set_outdated(self) -> None:
        """Mark the cached value stale without refetching."""
        logger.debug("marked outdated")
        self._outdated.mark()

    def __repr__(self) -> str:
        return f"StaleCache({self.check_state().name}, outdated={self.is_outdated()})"


__all__ = ("StaleCache",)
