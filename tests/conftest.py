"""Shared fixtures: a hand-driven engine for exercising the state machine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from kungfu import Result, Ok, Error

from stalecache.engine import Pending, Complete, Reloading, RawState
from stalecache.cell import StaleCache, StartupGuard


class ScriptedEngine:
    """FutureEngine whose raw state the test sets directly."""

    def __init__(self) -> None:
        self.state: RawState[Any, Any] = Pending()
        self.restarts = 0

    def value(self) -> Result[Any, Any] | None:
        match self.state:
            case Complete(result) | Reloading(result):
                return result
            case _:
                return None

    def restart(self) -> None:
        self.restarts += 1
        previous = self.value()
        if previous is not None:
            self.state = Reloading(previous)

    def complete(self, result: Result[Any, Any]) -> None:
        self.state = Complete(result)

    def reload(self, previous: Result[Any, Any]) -> None:
        self.state = Reloading(previous)


RAW_STATES: dict[str, Callable[[], RawState[Any, Any]]] = {
    "pending": Pending,
    "ok": lambda: Complete(Ok(5)),
    "err": lambda: Complete(Error("boom")),
    "reloading-ok": lambda: Reloading(Ok(5)),
    "reloading-err": lambda: Reloading(Error("boom")),
}


@pytest.fixture
def engine() -> ScriptedEngine:
    return ScriptedEngine()


@pytest.fixture
def make_cache(engine: ScriptedEngine) -> Callable[..., StaleCache[Any, Any]]:
    """Build a cache over the scripted engine in a given raw state."""

    def make(
        raw: str = "pending",
        outdated: bool = False,
        startup: StartupGuard = StartupGuard.DISABLE,
    ) -> StaleCache[Any, Any]:
        engine.state = RAW_STATES[raw]()
        cache: StaleCache[Any, Any] = StaleCache(engine, startup)
        if outdated:
            cache.set_outdated()
        return cache

    return make
