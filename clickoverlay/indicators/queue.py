"""Lock-guarded FIFO bridging hook threads and the tick loop."""

from __future__ import annotations

import threading
import time
from collections import deque

from ..logging_utils import get_logger
from .events import IndicatorEvent

_LOG_INTERVAL_S = 5.0


class EventQueue:
    """Ordered event buffer with two operations: ``enqueue`` and ``drain_all``.

    ``enqueue`` may be called from any number of producer threads. Each call is
    a single append under one lock, so events from one thread keep their order
    and the global order is exactly the append order.

    ``drain_all`` belongs to the single consumer. It swaps the whole buffer out
    in one critical section: every event is returned by exactly one drain.

    The buffer is unbounded unless ``max_events`` is given, in which case an
    overflowing enqueue evicts the oldest queued event and counts the drop.
    """

    def __init__(
        self,
        max_events: int | None = None,
        *,
        drain_timeout_s: float = 0.05,
    ) -> None:
        if max_events is not None and max_events < 1:
            raise ValueError("max_events must be positive or None")
        self._max_events = max_events
        self._drain_timeout_s = drain_timeout_s
        self._lock = threading.Lock()
        self._events: deque[IndicatorEvent] = deque()
        self._log = get_logger("indicators.queue")
        self._enqueued = 0
        self._drained = 0
        self._dropped = 0
        self._skipped_drains = 0
        self._last_drop_log = 0.0
        self._last_skip_log = 0.0

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def enqueue(self, event: IndicatorEvent) -> None:
        dropped = False
        with self._lock:
            if self._max_events is not None and len(self._events) >= self._max_events:
                self._events.popleft()
                self._dropped += 1
                dropped = True
            self._events.append(event)
            self._enqueued += 1
        if dropped:
            self._log_drop()

    def drain_all(self) -> list[IndicatorEvent]:
        if not self._lock.acquire(timeout=self._drain_timeout_s):
            self._skipped_drains += 1
            now = time.monotonic()
            if now - self._last_skip_log > _LOG_INTERVAL_S:
                self._last_skip_log = now
                self._log.warning(
                    "Event queue lock busy; skipping drain (total skipped={})",
                    self._skipped_drains,
                )
            return []
        try:
            if not self._events:
                return []
            events = self._events
            self._events = deque()
            self._drained += len(events)
        finally:
            self._lock.release()
        return list(events)

    def clear(self) -> int:
        """Discard everything still queued and return how many were dropped."""

        with self._lock:
            count = len(self._events)
            self._events.clear()
        return count

    def health(self) -> dict[str, object]:
        with self._lock:
            depth = len(self._events)
            enqueued = self._enqueued
            drained = self._drained
            dropped = self._dropped
        return {
            "queue_depth": depth,
            "max_events": self._max_events,
            "enqueued_total": enqueued,
            "drained_total": drained,
            "dropped_events": dropped,
            "skipped_drains": self._skipped_drains,
        }

    def _log_drop(self) -> None:
        now = time.monotonic()
        if now - self._last_drop_log > _LOG_INTERVAL_S:
            self._last_drop_log = now
            self._log.warning(
                "Event queue full (max={}); dropping oldest events (total={})",
                self._max_events,
                self._dropped,
            )
