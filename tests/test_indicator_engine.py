from __future__ import annotations

from clickoverlay.indicators.engine import IndicatorEngine
from clickoverlay.indicators.events import ButtonDown, ButtonId, ButtonUp, PointerMoved
from clickoverlay.indicators.queue import EventQueue

PRIMARY = ButtonId.PRIMARY
SECONDARY = ButtonId.SECONDARY


def _engine() -> tuple[EventQueue, IndicatorEngine]:
    queue = EventQueue()
    return queue, IndicatorEngine(queue)


def test_press_then_release_across_ticks() -> None:
    queue, engine = _engine()
    queue.enqueue(ButtonDown(PRIMARY))
    result = engine.tick()
    assert result.snapshot.primary_visible
    assert result.changed
    assert result.processed == 1

    queue.enqueue(ButtonUp(PRIMARY))
    result = engine.tick()
    assert not result.snapshot.primary_visible


def test_single_drain_mixed_buttons() -> None:
    queue, engine = _engine()
    queue.enqueue(ButtonDown(PRIMARY))
    queue.enqueue(ButtonDown(SECONDARY))
    queue.enqueue(ButtonUp(PRIMARY))
    result = engine.tick()
    assert not result.snapshot.primary_visible
    assert result.snapshot.secondary_visible
    assert result.processed == 3


def test_motion_then_press_tracks_position() -> None:
    queue, engine = _engine()
    queue.enqueue(PointerMoved(100, 200))
    queue.enqueue(ButtonDown(PRIMARY))
    result = engine.tick()
    assert result.snapshot.primary_visible
    assert result.snapshot.position == (100, 200)


def test_empty_tick_keeps_state() -> None:
    queue, engine = _engine()
    queue.enqueue(ButtonDown(PRIMARY))
    engine.tick()
    result = engine.tick()
    assert result.snapshot.primary_visible
    assert not result.changed
    assert result.processed == 0


def test_stray_release_is_harmless() -> None:
    queue, engine = _engine()
    queue.enqueue(ButtonUp(PRIMARY))
    result = engine.tick()
    assert not result.snapshot.primary_visible
    assert not result.changed


def test_health_counts_ticks() -> None:
    queue, engine = _engine()
    queue.enqueue(ButtonDown(PRIMARY))
    queue.enqueue(PointerMoved(1, 2))
    engine.tick()
    engine.tick()
    health = engine.health()
    assert health["ticks"] == 2
    assert health["events_processed"] == 2
    assert health["last_batch"] == 0
    assert health["queue"]["queue_depth"] == 0
