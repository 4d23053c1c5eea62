from __future__ import annotations

import threading

import pytest

from clickoverlay.indicators.events import ButtonDown, ButtonId, ButtonUp, PointerMoved
from clickoverlay.indicators.queue import EventQueue


def test_drain_empty_returns_empty_list() -> None:
    queue = EventQueue()
    assert queue.drain_all() == []
    assert queue.drain_all() == []


def test_drain_returns_fifo_and_empties() -> None:
    queue = EventQueue()
    events = [
        PointerMoved(1, 1),
        ButtonDown(ButtonId.PRIMARY),
        ButtonUp(ButtonId.PRIMARY),
    ]
    for event in events:
        queue.enqueue(event)
    assert len(queue) == 3
    assert queue.drain_all() == events
    assert len(queue) == 0
    assert queue.drain_all() == []


def test_events_seen_by_exactly_one_drain() -> None:
    queue = EventQueue()
    queue.enqueue(ButtonDown(ButtonId.PRIMARY))
    first = queue.drain_all()
    queue.enqueue(ButtonUp(ButtonId.PRIMARY))
    second = queue.drain_all()
    assert first == [ButtonDown(ButtonId.PRIMARY)]
    assert second == [ButtonUp(ButtonId.PRIMARY)]
    health = queue.health()
    assert health["enqueued_total"] == 2
    assert health["drained_total"] == 2
    assert health["queue_depth"] == 0


def test_concurrent_producers_keep_their_order() -> None:
    queue = EventQueue()
    producers = 4
    per_producer = 250
    barrier = threading.Barrier(producers)

    def produce(producer_id: int) -> None:
        barrier.wait()
        for seq in range(per_producer):
            queue.enqueue(PointerMoved(producer_id, seq))

    threads = [threading.Thread(target=produce, args=(i,)) for i in range(producers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    drained = queue.drain_all()
    assert len(drained) == producers * per_producer
    for producer_id in range(producers):
        seqs = [event.y for event in drained if event.x == producer_id]
        assert seqs == list(range(per_producer))
    assert queue.drain_all() == []


def test_drain_concurrent_with_producers_loses_nothing() -> None:
    queue = EventQueue()
    total = 2000
    done = threading.Event()

    def produce() -> None:
        for seq in range(total):
            queue.enqueue(PointerMoved(0, seq))
        done.set()

    thread = threading.Thread(target=produce)
    thread.start()
    collected: list = []
    while not done.is_set():
        collected.extend(queue.drain_all())
    thread.join(timeout=10)
    collected.extend(queue.drain_all())
    assert [event.y for event in collected] == list(range(total))


def test_busy_lock_skips_drain_without_losing_events() -> None:
    queue = EventQueue(drain_timeout_s=0.01)
    queue.enqueue(ButtonDown(ButtonId.SECONDARY))
    queue._lock.acquire()
    try:
        assert queue.drain_all() == []
    finally:
        queue._lock.release()
    assert queue.health()["skipped_drains"] == 1
    assert queue.drain_all() == [ButtonDown(ButtonId.SECONDARY)]


def test_capacity_drops_oldest() -> None:
    queue = EventQueue(max_events=2)
    queue.enqueue(PointerMoved(0, 0))
    queue.enqueue(PointerMoved(1, 1))
    queue.enqueue(PointerMoved(2, 2))
    assert queue.drain_all() == [PointerMoved(1, 1), PointerMoved(2, 2)]
    assert queue.health()["dropped_events"] == 1


def test_invalid_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        EventQueue(max_events=0)


def test_clear_discards_pending() -> None:
    queue = EventQueue()
    queue.enqueue(ButtonDown(ButtonId.PRIMARY))
    queue.enqueue(ButtonDown(ButtonId.SECONDARY))
    assert queue.clear() == 2
    assert queue.drain_all() == []
