"""Indicator visibility and pointer position, folded from ordered events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .events import ButtonDown, ButtonId, ButtonUp, IndicatorEvent, PointerMoved


@dataclass(slots=True)
class Indicator:
    button: ButtonId
    visible: bool = False


@dataclass(frozen=True, slots=True)
class IndicatorSnapshot:
    primary_visible: bool
    secondary_visible: bool
    position: tuple[int, int]

    def is_visible(self, button: ButtonId) -> bool:
        if button is ButtonId.PRIMARY:
            return self.primary_visible
        return self.secondary_visible

    @property
    def any_visible(self) -> bool:
        return self.primary_visible or self.secondary_visible


class IndicatorState:
    """Fixed-slot indicator state: one toggle per button, one shared position.

    Visibility of a button is true exactly when the latest processed event for
    that button was a press. Duplicate presses, releases without a press and
    events for other buttons leave it untouched.
    """

    def __init__(self, position: tuple[int, int] = (0, 0)) -> None:
        self._indicators = {button: Indicator(button) for button in ButtonId}
        self._position = (int(position[0]), int(position[1]))

    @property
    def position(self) -> tuple[int, int]:
        return self._position

    @property
    def any_visible(self) -> bool:
        return any(indicator.visible for indicator in self._indicators.values())

    def is_visible(self, button: ButtonId) -> bool:
        return self._indicators[button].visible

    def apply(self, event: IndicatorEvent) -> bool:
        """Apply one event; return ``True`` if anything observable changed."""

        if isinstance(event, ButtonDown):
            return self._set_visible(event.button, True)
        if isinstance(event, ButtonUp):
            return self._set_visible(event.button, False)
        if isinstance(event, PointerMoved):
            position = (event.x, event.y)
            if position == self._position:
                return False
            self._position = position
            return True
        return False

    def fold(self, events: Iterable[IndicatorEvent]) -> bool:
        changed = False
        for event in events:
            changed = self.apply(event) or changed
        return changed

    def snapshot(self) -> IndicatorSnapshot:
        return IndicatorSnapshot(
            primary_visible=self._indicators[ButtonId.PRIMARY].visible,
            secondary_visible=self._indicators[ButtonId.SECONDARY].visible,
            position=self._position,
        )

    def _set_visible(self, button: ButtonId, visible: bool) -> bool:
        indicator = self._indicators.get(button)
        if indicator is None or indicator.visible == visible:
            return False
        indicator.visible = visible
        return True
