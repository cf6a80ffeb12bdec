"""
Cell — stale-while-revalidate cache over a FutureEngine.

    from stalecache import cell as S

    profile = S.StaleCache(engine, S.StartupGuard.ENABLE)
    profile.fetch()
    value = profile.read(allow_cache_while_reloading=True)
"""

from __future__ import annotations

from stalecache.cell._types import FutureState, StartupGuard, OutdatedMarker
from stalecache.cell._cell import StaleCache

__all__ = (
    "FutureState",
    "StartupGuard",
    "OutdatedMarker",
    "StaleCache",
)
