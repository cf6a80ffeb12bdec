"""
TaskFuture — asyncio-backed FutureEngine.

One task at a time. A restart cancels whatever is in flight and
the newest execution is the only one allowed to publish.
"""

from __future__ import annotations

import asyncio
import logging

from kungfu import Result, Error

from stalecache._types import Producer, Listener
from stalecache.engine._types import (
    Pending,
    Complete,
    Reloading,
    RawState,
    EngineError,
    EngineErrorKind,
)

logger = logging.getLogger(__name__)


class TaskFuture[D, T, E]:
    """
    Async execution cell driven by asyncio tasks.

    Example:
        engine = TaskFuture(load_user, UserId(1), on_update=rerender)
        engine.start()
        await engine.settled()
        match engine.state:
            case Complete(Ok(user)):
                ...
    """

    __slots__ = (
        "_producer",
        "_deps",
        "_on_update",
        "_result",
        "_task",
        "_in_flight",
        "_generation",
        "_closed",
    )

    def __init__(
        self,
        producer: Producer[D, T, E],
        deps: D,
        on_update: Listener | None = None,
    ) -> None:
        self._producer = producer
        self._deps = deps
        self._on_update = on_update
        self._result: Result[T, E | EngineError] | None = None
        self._task: asyncio.Task[None] | None = None
        self._in_flight = False
        self._generation = 0
        self._closed = False

    @property
    def deps(self) -> D:
        return self._deps

    @property
    def state(self) -> RawState[T, E | EngineError]:
        if self._result is None:
            return Pending()
        if self._in_flight:
            return Reloading(self._result)
        return Complete(self._result)

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def closed(self) -> bool:
        return self._closed

    def value(self) -> Result[T, E | EngineError] | None:
        return self._result

    def start(self) -> None:
        """Spawn the first execution. Later calls do nothing."""
        if self._generation or self._closed:
            return
        self._spawn()

    def restart(self) -> None:
        """Cancel anything in flight and execute again with current deps."""
        if self._closed:
            logger.debug("restart ignored, engine closed")
            return
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._spawn()

    def update(self, deps: D) -> bool:
        """
        Feed fresh dependency values.

        Restarts only when they differ from the registered ones.
        """
        if self._closed or deps == self._deps:
            return False
        logger.debug("deps changed, restarting: %r -> %r", self._deps, deps)
        self._deps = deps
        self.restart()
        return True

    def cancel(self) -> bool:
        """Drop the in-flight execution. Returns True if one was running."""
        # Bumping the generation stops a cancelled task from publishing.
        self._generation += 1
        if not self._in_flight:
            return False
        self._in_flight = False
        if self._task is not None:
            self._task.cancel()
        return True

    def close(self) -> bool:
        """
        Cancel and refuse any further work.

        start(), restart() and update() do nothing afterwards. The last
        completed value stays readable.
        """
        self._closed = True
        return self.cancel()

    async def settled(self) -> None:
        """Wait until nothing is in flight."""
        while self._in_flight and self._task is not None:
            task = self._task
            await asyncio.wait((task,))
            if task is self._task and task.cancelled():
                self._in_flight = False

    def _spawn(self) -> None:
        self._generation += 1
        generation = self._generation
        self._in_flight = True
        self._task = asyncio.get_running_loop().create_task(
            self._execute(generation, self._deps),
            name=f"stalecache:{generation}",
        )

    async def _execute(self, generation: int, deps: D) -> None:
        result: Result[T, E | EngineError]
        try:
            result = await self._producer(deps)
        except Exception as e:
            logger.warning("producer raised for deps %r", deps, exc_info=True)
            result = Error(EngineError(EngineErrorKind.PRODUCER_RAISED, str(e)))

        if generation != self._generation:
            logger.debug("discarding superseded result (generation %d)", generation)
            return

        self._result = result
        self._in_flight = False
        logger.debug("execution %d complete", generation)
        if self._on_update is not None:
            try:
                self._on_update()
            except Exception:
                logger.exception("on_update listener raised")


__all__ = ("TaskFuture",)
