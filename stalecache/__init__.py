"""
stalecache — stale-while-revalidate cache cells for async UI data.

    from stalecache import future_hook, FutureState, StartupGuard

    profile = future_hook(load_profile).depends_on(user_id).build()
    profile.set_outdated()                        # after a related write
    profile.fetch()                               # refresh if stale
    value = profile.read(allow_cache_while_reloading=True)

    from stalecache import engine as X   # Async execution cells
    from stalecache import cell as S     # Staleness state machine
    from stalecache import lift as L     # Producer helpers
"""

from stalecache import engine
from stalecache import cell
from stalecache import lift
from stalecache._types import (
    Result,
    Ok,
    Error,
    LazyCoroResult,
    Producer,
    Listener,
)
from stalecache.cell import FutureState, StartupGuard, OutdatedMarker, StaleCache
from stalecache.engine import TaskFuture, FutureEngine, EngineError
from stalecache.hook import FutureHook, future_hook
from stalecache.scope import Scope

__version__ = "0.1.0"

__all__ = (
    "engine",
    "cell",
    "lift",
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Producer",
    "Listener",
    # Cache
    "FutureState",
    "StartupGuard",
    "OutdatedMarker",
    "StaleCache",
    "FutureHook",
    "future_hook",
    "Scope",
    # Engine
    "TaskFuture",
    "FutureEngine",
    "EngineError",
)
