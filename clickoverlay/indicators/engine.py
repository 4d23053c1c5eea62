"""Per-tick consumer: drain the event queue and fold it into indicator state."""

from __future__ import annotations

from dataclasses import dataclass

from ..logging_utils import get_logger
from .events import ButtonDown, ButtonUp, PointerMoved
from .queue import EventQueue
from .state import IndicatorSnapshot, IndicatorState


@dataclass(frozen=True, slots=True)
class TickResult:
    snapshot: IndicatorSnapshot
    processed: int
    changed: bool


class IndicatorEngine:
    def __init__(self, queue: EventQueue, state: IndicatorState | None = None) -> None:
        self._queue = queue
        self._state = state or IndicatorState()
        self._log = get_logger("indicators.engine")
        self._ticks = 0
        self._processed = 0
        self._last_batch = 0

    @property
    def snapshot(self) -> IndicatorSnapshot:
        return self._state.snapshot()

    def tick(self) -> TickResult:
        events = self._queue.drain_all()
        changed = False
        for event in events:
            if self._state.apply(event):
                changed = True
                self._trace(event)
        self._ticks += 1
        self._processed += len(events)
        self._last_batch = len(events)
        return TickResult(
            snapshot=self._state.snapshot(),
            processed=len(events),
            changed=changed,
        )

    def health(self) -> dict[str, object]:
        return {
            "ticks": self._ticks,
            "events_processed": self._processed,
            "last_batch": self._last_batch,
            "queue": self._queue.health(),
        }

    def _trace(self, event) -> None:
        if isinstance(event, ButtonDown):
            self._log.trace("Showing {} indicator", event.button.value)
        elif isinstance(event, ButtonUp):
            self._log.trace("Hiding {} indicator", event.button.value)
        elif isinstance(event, PointerMoved):
            self._log.trace("Moving indicators to {}, {}", event.x, event.y)
