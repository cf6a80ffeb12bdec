"""Restart, fetch and invalidation transitions."""

from __future__ import annotations

import pytest
from kungfu import Ok

from stalecache.cell import FutureState, StartupGuard, OutdatedMarker, StaleCache


@pytest.mark.parametrize("raw", ["pending", "reloading-ok", "reloading-err"])
@pytest.mark.parametrize("outdated", [False, True])
def test_restart_suppressed(make_cache, engine, raw, outdated):
    cache = make_cache(raw, outdated)
    before = engine.state

    assert cache.restart() is False
    assert engine.restarts == 0
    assert engine.state is before
    assert cache.is_outdated() is outdated


@pytest.mark.parametrize("raw", ["ok", "err"])
@pytest.mark.parametrize("outdated", [False, True])
def test_restart_clears_flag_and_reloads(make_cache, engine, raw, outdated):
    cache = make_cache(raw, outdated)

    assert cache.restart() is True
    assert engine.restarts == 1
    assert not cache.is_outdated()
    assert cache.check_state() is FutureState.RELOADING


def test_flag_cleared_before_engine_restart(engine):
    seen: list[bool] = []
    cache = StaleCache(engine, StartupGuard.ENABLE)
    engine.complete(Ok(1))

    original = engine.restart

    def observing_restart() -> None:
        seen.append(cache.is_outdated())
        original()

    engine.restart = observing_restart
    cache.restart()

    assert seen == [False]


def test_fetch_restarts_only_when_outdated(make_cache, engine):
    cache = make_cache("ok")
    assert cache.fetch() is False
    assert engine.restarts == 0

    cache.set_outdated()
    assert cache.fetch() is True
    assert engine.restarts == 1
    assert not cache.is_outdated()


def test_fetch_when_outdated_but_empty_is_noop(make_cache, engine):
    cache = make_cache("pending", startup=StartupGuard.ENABLE)
    assert cache.fetch() is False
    assert engine.restarts == 0
    assert cache.is_outdated()


def test_startup_enable_stays_outdated_until_restart(make_cache, engine):
    cache = make_cache("pending", startup=StartupGuard.ENABLE)
    engine.complete(Ok(7))
    assert cache.check_state() is FutureState.OUTDATED
    assert cache.read() is None

    cache.fetch()
    assert not cache.is_outdated()
    engine.complete(Ok(8))
    assert cache.check_state() is FutureState.READY
    assert cache.read() == 8


def test_set_outdated_leaves_engine_alone(make_cache, engine):
    cache = make_cache("ok")
    cache.set_outdated()
    assert engine.restarts == 0
    assert cache.check_state() is FutureState.OUTDATED


def test_full_cycle(make_cache, engine):
    cache = make_cache("pending")
    engine.complete(Ok(1))
    assert cache.check_state() is FutureState.READY

    cache.set_outdated()
    assert cache.check_state() is FutureState.OUTDATED

    cache.fetch()
    assert cache.check_state() is FutureState.RELOADING
    assert cache.read(True) == 1

    engine.complete(Ok(2))
    assert cache.check_state() is FutureState.READY
    assert cache.read() == 2


def test_marker_handle_invalidates_cache(make_cache):
    cache = make_cache("ok")
    marker = cache.outdated_marker

    def on_related_write() -> None:
        marker.mark()

    on_related_write()
    assert cache.is_outdated()
    assert cache.check_state() is FutureState.OUTDATED


def test_shared_marker_is_used(engine):
    marker = OutdatedMarker()
    cache = StaleCache(engine, marker=marker)
    engine.complete(Ok(1))

    marker.mark()
    assert cache.check_state() is FutureState.OUTDATED
    assert cache.outdated_marker is marker


def test_shared_marker_with_startup_enable(engine):
    marker = OutdatedMarker()
    StaleCache(engine, StartupGuard.ENABLE, marker)
    assert marker.get()
