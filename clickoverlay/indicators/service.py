"""Overlay service wiring (global hook + event queue + tick engine + UI)."""

from __future__ import annotations

from typing import Any

from ..config import AppConfig
from ..logging_utils import get_logger
from .engine import IndicatorEngine
from .hook import ListenerFactory, MouseHookAdapter
from .queue import EventQueue


class OverlayService:
    """Lifecycle wrapper created once at startup.

    The event queue is the only object shared between the hook thread and the
    Qt thread; everything else here is touched from the thread that owns the
    service.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        listener_factory: ListenerFactory | None = None,
    ) -> None:
        self._config = config
        self._log = get_logger("indicators")
        self._started = False
        self._queue = EventQueue(
            config.queue.max_events,
            drain_timeout_s=config.queue.drain_timeout_ms / 1000.0,
        )
        self._engine = IndicatorEngine(self._queue)
        self._hook = MouseHookAdapter(
            self._queue,
            track_motion=config.hook.track_motion,
            start_timeout_s=config.hook.start_timeout_s,
            listener_factory=listener_factory,
        )
        self._ui = None

    @property
    def engine(self) -> IndicatorEngine:
        return self._engine

    @property
    def started(self) -> bool:
        return self._started

    @property
    def ui_active(self) -> bool:
        return self._ui is not None

    def start(self) -> None:
        if self._started:
            return
        self._log.info("Overlay service starting")
        self._hook.start()
        self._started = True
        self._start_ui()

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        if self._ui:
            self._ui.stop()
            self._ui = None
        self._hook.stop()
        discarded = self._queue.clear()
        if discarded:
            self._log.debug("Discarded {} queued events at shutdown", discarded)
        self._log.info("Overlay service stopped")

    def health(self) -> dict[str, Any]:
        return {
            "started": self._started,
            "hook_status": self._hook.status,
            "track_motion": self._hook.track_motion,
            "engine": self._engine.health(),
            "ui_enabled": bool(self._ui),
        }

    def _start_ui(self) -> None:
        if not self._config.ui.enabled:
            return
        if self._ui:
            return
        try:
            from PySide6 import QtWidgets
            from .ui.overlay_ui import OverlayUiController
        except Exception as exc:  # pragma: no cover - optional UI dependency
            self._log.warning("Overlay UI unavailable: {}", exc)
            return
        app = QtWidgets.QApplication.instance()
        if app is None:
            self._log.warning("Overlay UI skipped (no Qt application)")
            return
        self._ui = OverlayUiController(
            self._config.ui,
            self._engine,
            track_motion=self._config.hook.track_motion,
        )
        self._ui.start()
