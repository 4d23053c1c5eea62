"""Global mouse hook adapter translating pynput callbacks into queued events."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Optional

from ..errors import HookStartError
from ..logging_utils import get_logger
from .events import ButtonDown, ButtonUp, PointerMoved, button_from_name
from .queue import EventQueue

ListenerFactory = Callable[..., Any]

_POLL_S = 0.01


def _pynput_listener_factory(**callbacks: Any) -> Any:
    # pynput picks an OS backend at import time and fails without a display.
    from pynput import mouse

    return mouse.Listener(**callbacks)


class MouseHookAdapter:
    """Feed global mouse button and motion callbacks into an ``EventQueue``.

    The callbacks run on the hook library's own thread. They only build one
    event and enqueue it, and they never raise.
    """

    def __init__(
        self,
        queue: EventQueue,
        *,
        track_motion: bool = True,
        start_timeout_s: float = 5.0,
        listener_factory: Optional[ListenerFactory] = None,
    ) -> None:
        self._queue = queue
        self._track_motion = track_motion
        self._start_timeout_s = start_timeout_s
        self._listener_factory = listener_factory or _pynput_listener_factory
        self._listener: Any = None
        self._lock = threading.Lock()
        self._status = "idle"
        self._log = get_logger("indicators.hook")

    @property
    def status(self) -> str:
        return self._status

    @property
    def track_motion(self) -> bool:
        return self._track_motion

    def on_click(self, x, y, button, pressed: bool) -> None:
        tracked = button_from_name(getattr(button, "name", None))
        if tracked is None:
            return None
        if pressed:
            self._queue.enqueue(ButtonDown(tracked))
        else:
            self._queue.enqueue(ButtonUp(tracked))
        return None

    def on_move(self, x, y) -> None:
        if not self._track_motion:
            return None
        self._queue.enqueue(PointerMoved(int(x), int(y)))
        return None

    def start(self) -> None:
        with self._lock:
            if self._listener is not None and self._status == "ok":
                return
            callbacks: dict[str, Any] = {"on_click": self.on_click}
            if self._track_motion:
                callbacks["on_move"] = self.on_move
            try:
                listener = self._listener_factory(**callbacks)
                listener.start()
                self._wait_ready(listener)
            except HookStartError:
                self._status = "failed"
                raise
            except Exception as exc:
                self._status = "failed"
                raise HookStartError(f"Global mouse hook unavailable: {exc}") from exc
            self._listener = listener
            self._status = "ok"
        self._log.info("Global mouse hook started (track_motion={})", self._track_motion)

    def stop(self) -> None:
        with self._lock:
            listener = self._listener
            self._listener = None
            if listener is None:
                return
            self._status = "stopped"
        listener.stop()
        try:
            listener.join(timeout=1.0)
        except Exception as exc:  # pragma: no cover - backend teardown
            self._log.warning("Mouse hook teardown failed: {}", exc)
        self._log.info("Global mouse hook stopped")

    def _wait_ready(self, listener: Any) -> None:
        # pynput flips ``running`` before the backend installs its hook; only
        # ``wait()`` returning means the hook is really in place.
        ready = threading.Event()

        def _await_ready() -> None:
            listener.wait()
            ready.set()

        threading.Thread(target=_await_ready, name="mouse-hook-ready", daemon=True).start()
        deadline = time.monotonic() + self._start_timeout_s
        while time.monotonic() < deadline:
            if ready.is_set() or not listener.is_alive():
                break
            time.sleep(_POLL_S)
        if ready.is_set() and listener.is_alive():
            return
        try:
            listener.stop()
        except Exception as exc:  # pragma: no cover - already dead
            self._log.debug("Stopping unready hook failed: {}", exc)
        try:
            # Re-raises whatever the backend thread died with.
            listener.join(timeout=0)
        except Exception as exc:
            raise HookStartError(f"Global mouse hook failed to install: {exc}") from exc
        raise HookStartError("Global mouse hook did not become ready")
