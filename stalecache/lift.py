"""
Lift — turning plain async functions into producers.

Re-exports from combinators.lift with producer-shaped wrappers.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from kungfu import LazyCoroResult, Result

# Re-export the combinators.lift primitives producers are built from
from combinators.lift import (
    pure,
    fail,
    catching_async,
)

from stalecache._types import Producer


# ═══════════════════════════════════════════════════════════════════════════════
# Producer helpers
# ═══════════════════════════════════════════════════════════════════════════════

def producer[D, T, E](
    fn: Callable[[D], Awaitable[T]],
    on_error: Callable[[Exception], E],
) -> Producer[D, T, E]:
    """
    Lift an async function of the deps into a producer.

    Exceptions become Error(on_error(exc)).

    Example:
        load_profile = L.producer(
            api.get_profile,
            on_error=lambda e: ProfileError(str(e)),
        )
    """
    def make(deps: D) -> LazyCoroResult[T, E]:
        async def call() -> T:
            return await fn(deps)
        return catching_async(call, on_error=on_error)
    return make


def from_result[D, T, E](result: Result[T, E]) -> Producer[D, T, E]:
    """Producer that always yields the same result, whatever the deps."""
    def make(deps: D) -> LazyCoroResult[T, E]:
        async def _run() -> Result[T, E]:
            return result
        return LazyCoroResult(_run)
    return make


__all__ = (
    # From combinators.lift
    "pure",
    "fail",
    "catching_async",
    # Producer helpers
    "producer",
    "from_result",
)
