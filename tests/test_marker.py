"""OutdatedMarker handle."""

from __future__ import annotations

from stalecache.cell import OutdatedMarker


def test_defaults_to_clear():
    marker = OutdatedMarker()
    assert not marker
    assert marker.get() is False


def test_mark_and_clear():
    marker = OutdatedMarker()
    marker.mark()
    assert marker
    marker.clear()
    assert not marker


def test_listeners_fire_on_change_only():
    calls: list[bool] = []
    marker = OutdatedMarker()
    marker.subscribe(lambda: calls.append(marker.get()))

    marker.mark()
    marker.mark()
    marker.clear()
    marker.set(False)

    assert calls == [True, False]


def test_unsubscribe():
    calls: list[int] = []
    marker = OutdatedMarker()
    unsubscribe = marker.subscribe(lambda: calls.append(1))

    marker.mark()
    unsubscribe()
    unsubscribe()
    marker.clear()

    assert calls == [1]


def test_repr():
    assert repr(OutdatedMarker(True)) == "OutdatedMarker(True)"
