"""
Engine — async execution cells.

    from stalecache import engine as X

    fut = X.TaskFuture(load_user, user_id)
    fut.start()
    await fut.settled()
"""

from __future__ import annotations

from stalecache.engine._types import (
    Pending,
    Complete,
    Reloading,
    RawState,
    EngineError,
    EngineErrorKind,
    FutureEngine,
)
from stalecache.engine._task import TaskFuture

__all__ = (
    "Pending",
    "Complete",
    "Reloading",
    "RawState",
    "EngineError",
    "EngineErrorKind",
    "FutureEngine",
    "TaskFuture",
)
