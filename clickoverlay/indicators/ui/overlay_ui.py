"""Full-screen, click-through overlay that paints the indicator state."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from ...config import UiConfig
from ...logging_utils import get_logger
from ..engine import IndicatorEngine
from ..events import ButtonId
from ..state import IndicatorSnapshot

_INDICATOR_COLORS = {
    ButtonId.PRIMARY: (0, 200, 120),
    ButtonId.SECONDARY: (255, 90, 80),
}


class OverlayWindow(QtWidgets.QWidget):
    def __init__(
        self,
        config: UiConfig,
        engine: IndicatorEngine,
        *,
        track_motion: bool,
    ) -> None:
        super().__init__()
        self._config = config
        self._engine = engine
        self._track_motion = track_motion
        self._log = get_logger("indicators.ui")
        self._snapshot: IndicatorSnapshot = engine.snapshot
        self._tick_failures = 0

        self._apply_window_flags()
        self._position_window()

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(config.idle_tick_interval_ms)
        self._timer.timeout.connect(self._on_tick)

    def _apply_window_flags(self) -> None:
        flags = (
            QtCore.Qt.Tool
            | QtCore.Qt.FramelessWindowHint
            | QtCore.Qt.WindowStaysOnTopHint
            | QtCore.Qt.WindowDoesNotAcceptFocus
        )
        if hasattr(QtCore.Qt, "WindowTransparentForInput"):
            flags |= QtCore.Qt.WindowTransparentForInput
        self.setWindowFlags(flags)
        self.setAttribute(QtCore.Qt.WA_TranslucentBackground)
        self.setAttribute(QtCore.Qt.WA_NoSystemBackground)
        self.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents)
        self.setAttribute(QtCore.Qt.WA_ShowWithoutActivating)
        self.setFocusPolicy(QtCore.Qt.NoFocus)

    def _position_window(self) -> None:
        screen = QtGui.QGuiApplication.primaryScreen()
        if not screen:
            self._log.warning("No primary screen; overlay keeps default geometry")
            return
        self.setGeometry(screen.geometry())

    def start_ticking(self) -> None:
        self._timer.start()

    def stop_ticking(self) -> None:
        self._timer.stop()

    @QtCore.Slot()
    def _on_tick(self) -> None:
        try:
            result = self._engine.tick()
        except Exception as exc:  # pragma: no cover - keep the Qt loop alive
            self._tick_failures += 1
            self._log.warning("Indicator tick failed ({}): {}", self._tick_failures, exc)
            return
        self._snapshot = result.snapshot
        interval = (
            self._config.tick_interval_ms
            if result.snapshot.any_visible
            else self._config.idle_tick_interval_ms
        )
        if self._timer.interval() != interval:
            self._timer.setInterval(interval)
        if result.changed:
            self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: N802 - Qt override
        snapshot = self._snapshot
        if not snapshot.any_visible:
            return
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        painter.setPen(QtCore.Qt.NoPen)
        radius = self._config.indicator_radius_px
        anchor = self._anchor(snapshot)
        alpha = int(255 * self._config.opacity)
        for button in ButtonId:
            if not snapshot.is_visible(button):
                continue
            red, green, blue = _INDICATOR_COLORS[button]
            painter.setBrush(QtGui.QColor(red, green, blue, alpha))
            center = _indicator_center(button, anchor, radius)
            painter.drawEllipse(center, radius, radius)
        painter.end()

    def _anchor(self, snapshot: IndicatorSnapshot) -> QtCore.QPointF:
        if not self._track_motion:
            margin = self._config.indicator_radius_px * 3
            return QtCore.QPointF(self.width() - margin, self.height() - margin)
        # Hook coordinates are global; map them into this window.
        origin = self.geometry().topLeft()
        x, y = snapshot.position
        return QtCore.QPointF(x - origin.x(), y - origin.y())


class OverlayUiController(QtCore.QObject):
    def __init__(
        self,
        config: UiConfig,
        engine: IndicatorEngine,
        *,
        track_motion: bool,
    ) -> None:
        super().__init__()
        self._window = OverlayWindow(config, engine, track_motion=track_motion)

    def start(self) -> None:
        self._window.show()
        self._window.start_ticking()

    def stop(self) -> None:
        self._window.stop_ticking()
        self._window.close()


def _indicator_center(
    button: ButtonId,
    anchor: QtCore.QPointF,
    radius: int,
) -> QtCore.QPointF:
    # Primary sits left of the cursor, secondary right, both just below it.
    dx = -radius if button is ButtonId.PRIMARY else radius
    return QtCore.QPointF(anchor.x() + dx, anchor.y() + radius * 2)
