"""
Cell types.
"""

from __future__ import annotations

from enum import Enum, auto

from stalecache._types import Listener

# ═══════════════════════════════════════════════════════════════════════════════
# FutureState — Logical State Exposed to Consumers
# ═══════════════════════════════════════════════════════════════════════════════


class FutureState(Enum):
    """
    Logical state of a stale cache.

    Derived on every query from the engine's raw state and the
    outdated flag, never stored.

        Pending              → EMPTY
        Complete(Ok)         → READY      (OUTDATED if flag set)
        Complete(Error)      → ERROR      (OUTDATED if flag set)
        Reloading            → RELOADING
    """

    EMPTY = auto()
    READY = auto()
    ERROR = auto()
    OUTDATED = auto()
    RELOADING = auto()


class StartupGuard(Enum):
    """Whether a new cache starts out marked outdated."""

    DISABLE = auto()
    ENABLE = auto()


# ═══════════════════════════════════════════════════════════════════════════════
# OutdatedMarker — Shared Flag Handle
# ═══════════════════════════════════════════════════════════════════════════════


class OutdatedMarker:
    """
    Shared mutable outdated flag.

    Hand it to callbacks elsewhere in the component tree so they can
    invalidate a cache without holding the cache itself.

    Example:
        marker = profile.outdated_marker

        async def on_profile_saved() -> None:
            marker.mark()
    """

    __slots__ = ("_value", "_listeners")

    def __init__(self, value: bool = False) -> None:
        self._value = value
        self._listeners: list[Listener] = []

    def get(self) -> bool:
        return self._value

    def set(self, value: bool) -> None:
        """Set the flag. Listeners fire only when it actually changes."""
        if value == self._value:
            return
        self._value = value
        for listener in tuple(self._listeners):
            listener()

    def mark(self) -> None:
        self.set(True)

    def clear(self) -> None:
        self.set(False)

    def subscribe(self, listener: Listener) -> Listener:
        """Register a change listener. Returns the unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __bool__(self) -> bool:
        return self._value

    def __repr__(self) -> str:
        return f"OutdatedMarker({self._value})"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "FutureState",
    "StartupGuard",
    "OutdatedMarker",
)
