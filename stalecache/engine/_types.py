"""
Engine types — raw execution state and the engine protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from kungfu import Result

# ═══════════════════════════════════════════════════════════════════════════════
# Raw State — What the Engine Reports
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Pending:
    """Nothing has completed yet."""


@dataclass(frozen=True, slots=True)
class Complete[T, E]:
    """Last execution finished, nothing in flight."""

    result: Result[T, E]


@dataclass(frozen=True, slots=True)
class Reloading[T, E]:
    """
    A new execution is in flight.

    previous is the result it will replace.
    """

    previous: Result[T, E]


type RawState[T, E] = Pending | Complete[T, E] | Reloading[T, E]

# ═══════════════════════════════════════════════════════════════════════════════
# Engine Error — Producer Misbehaved
# ═══════════════════════════════════════════════════════════════════════════════


class EngineErrorKind(Enum):
    """Engine error kinds."""
    PRODUCER_RAISED = auto()


@dataclass(frozen=True, slots=True)
class EngineError:
    """A producer raised instead of returning Error."""
    kind: EngineErrorKind
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# FutureEngine Protocol — What StaleCache Consumes
# ═══════════════════════════════════════════════════════════════════════════════


class FutureEngine[T, E](Protocol):
    """
    Async execution cell protocol.

    Holds at most one in-flight or completed computation.
    TaskFuture is the asyncio implementation; anything with the same
    surface (a test double, a framework adapter) works too.

    Example:
        class ScriptedEngine[T, E]:
            def __init__(self) -> None:
                self.state: RawState[T, E] = Pending()

            def value(self) -> Result[T, E] | None:
                match self.state:
                    case Complete(result) | Reloading(result):
                        return result
                    case _:
                        return None

            def restart(self) -> None:
                if (prev := self.value()) is not None:
                    self.state = Reloading(prev)
    """

    @property
    def state(self) -> RawState[T, E]:
        """Current raw execution state."""
        ...

    def value(self) -> Result[T, E] | None:
        """Last completed result, kept while reloading."""
        ...

    def restart(self) -> None:
        """Begin a new execution with the registered deps."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Pending",
    "Complete",
    "Reloading",
    "RawState",
    "EngineErrorKind",
    "EngineError",
    "FutureEngine",
)
