"""Immutable input events handed from the hook thread to the tick loop."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class ButtonId(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True, slots=True)
class ButtonDown:
    button: ButtonId


@dataclass(frozen=True, slots=True)
class ButtonUp:
    button: ButtonId


@dataclass(frozen=True, slots=True)
class PointerMoved:
    x: int
    y: int


IndicatorEvent = Union[ButtonDown, ButtonUp, PointerMoved]

_BUTTONS_BY_NAME = {
    "left": ButtonId.PRIMARY,
    "right": ButtonId.SECONDARY,
}


def button_from_name(name: str | None) -> ButtonId | None:
    """Map a hook button name (``left``/``right``) to a tracked button."""

    if not name:
        return None
    return _BUTTONS_BY_NAME.get(name.lower())
