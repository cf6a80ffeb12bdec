"""
Scope — one component instance.

Owns the engines created for it and cancels them when it closes.
Nothing outlives the scope.
"""

from __future__ import annotations

import logging
from typing import Any, cast

from stalecache._types import Producer, Listener
from stalecache.engine import TaskFuture
from stalecache.cell import StartupGuard
from stalecache.hook import FutureHook

logger = logging.getLogger(__name__)


class Scope:
    """
    Component instance scope.

    Example:
        async with Scope(on_render=schedule_render) as cx:
            profile = cx.hook(load_profile).depends_on(user_id).build()
            ...
        # engines cancelled here
    """

    __slots__ = ("_on_render", "_engines", "_render_count", "_closed")

    def __init__(self, on_render: Listener | None = None) -> None:
        self._on_render = on_render
        self._engines: list[TaskFuture[Any, Any, Any]] = []
        self._render_count = 0
        self._closed = False

    @property
    def render_count(self) -> int:
        """How many re-renders have been requested."""
        return self._render_count

    @property
    def closed(self) -> bool:
        return self._closed

    def hook[D, T, E](self, producer: Producer[D, T, E]) -> FutureHook[D, T, E]:
        """Builder whose build() registers with this scope."""
        return FutureHook(
            _producer=producer,
            _deps=cast(D, ()),
            _startup=StartupGuard.DISABLE,
            _on_update=None,
            _scope=self,
        )

    def register(self, engine: TaskFuture[Any, Any, Any]) -> None:
        if self._closed:
            engine.close()
            raise RuntimeError("scope is closed")
        self._engines.append(engine)

    def request_render(self) -> None:
        if self._closed:
            return
        self._render_count += 1
        if self._on_render is not None:
            self._on_render()

    def close(self) -> None:
        """Cancel every engine. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        cancelled = sum(engine.close() for engine in self._engines)
        logger.debug(
            "scope closed: %d engines, %d cancelled in flight",
            len(self._engines),
            cancelled,
        )
        self._engines.clear()

    async def __aenter__(self) -> Scope:
        return self

    async def __aexit__(self, *args: object) -> None:
        self.close()


__all__ = ("Scope",)
