"""
Hook builder — fluent API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from stalecache._types import Producer, Listener
from stalecache.engine import TaskFuture, EngineError
from stalecache.cell import StaleCache, StartupGuard

if TYPE_CHECKING:
    from stalecache.scope import Scope


# ═══════════════════════════════════════════════════════════════════════════════
# FutureHook Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class FutureHook[D, T, E]:
    """
    Fluent stale cache builder.

    Type parameters:
        D: Dependency values handed to the producer
        T: Value type
        E: Error type from the producer

    Example:
        profile = (
            future_hook(load_profile)
            .depends_on(user_id)
            .startup(StartupGuard.ENABLE)
            .build()
        )
    """

    _producer: Producer[D, T, E]
    _deps: D
    _startup: StartupGuard
    _on_update: Listener | None
    _scope: Scope | None = None

    def depends_on(self, deps: D) -> FutureHook[D, T, E]:
        """Set the dependency values the producer runs against."""
        return FutureHook(
            _producer=self._producer,
            _deps=deps,
            _startup=self._startup,
            _on_update=self._on_update,
            _scope=self._scope,
        )

    def startup(self, guard: StartupGuard) -> FutureHook[D, T, E]:
        """Choose whether the cache starts out outdated."""
        return FutureHook(
            _producer=self._producer,
            _deps=self._deps,
            _startup=guard,
            _on_update=self._on_update,
            _scope=self._scope,
        )

    def on_update(self, listener: Listener) -> FutureHook[D, T, E]:
        """Call listener whenever an execution completes."""
        return FutureHook(
            _producer=self._producer,
            _deps=self._deps,
            _startup=self._startup,
            _on_update=listener,
            _scope=self._scope,
        )

    def build(self, scope: Scope | None = None) -> StaleCache[T, E | EngineError]:
        """
        Start the engine and wrap it.

        Must be called with a running event loop.
        """
        scope = scope if scope is not None else self._scope
        listener = self._on_update

        if scope is not None:
            bound = scope

            def notify() -> None:
                try:
                    if self._on_update is not None:
                        self._on_update()
                finally:
                    bound.request_render()

            listener = notify

        engine = TaskFuture(self._producer, self._deps, listener)
        if scope is not None:
            scope.register(engine)
        engine.start()
        stale = StaleCache(engine, self._startup)

        if scope is not None:
            stale.outdated_marker.subscribe(scope.request_render)

        return stale


# ═══════════════════════════════════════════════════════════════════════════════
# future_hook() — Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def future_hook[D, T, E](producer: Producer[D, T, E]) -> FutureHook[D, T, E]:
    """
    Create a stale cache builder for a producer.

    Deps default to an empty tuple, so a producer that ignores them
    works without .depends_on().

    Example:
        from stalecache import future_hook, StartupGuard
        from stalecache import lift as L

        load_profile = L.producer(
            api.get_profile,
            on_error=lambda e: ProfileError(str(e)),
        )

        profile = future_hook(load_profile).depends_on(user_id).build()
    """
    return FutureHook(
        _producer=producer,
        _deps=cast(D, ()),
        _startup=StartupGuard.DISABLE,
        _on_update=None,
    )


__all__ = ("FutureHook", "future_hook")
