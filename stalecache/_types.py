"""
Core types for stalecache.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Producer — the async computation behind a cache cell
# ═══════════════════════════════════════════════════════════════════════════════

type Producer[D, T, E] = Callable[[D], LazyCoroResult[T, E]]
"""Builds a lazy computation from the current dependency values."""

# ═══════════════════════════════════════════════════════════════════════════════
# Listener — re-render notification
# ═══════════════════════════════════════════════════════════════════════════════

type Listener = Callable[[], None]
"""Called when something a component renders from has changed."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Producer",
    "Listener",
)
