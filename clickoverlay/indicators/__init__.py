"""Mouse button indicator overlay."""

from .engine import IndicatorEngine, TickResult
from .events import ButtonDown, ButtonId, ButtonUp, IndicatorEvent, PointerMoved
from .hook import MouseHookAdapter
from .queue import EventQueue
from .service import OverlayService
from .state import IndicatorSnapshot, IndicatorState

__all__ = [
    "ButtonDown",
    "ButtonId",
    "ButtonUp",
    "EventQueue",
    "IndicatorEngine",
    "IndicatorEvent",
    "IndicatorSnapshot",
    "IndicatorState",
    "MouseHookAdapter",
    "OverlayService",
    "PointerMoved",
    "TickResult",
]
