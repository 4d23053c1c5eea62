from __future__ import annotations

import dataclasses

import pytest

from clickoverlay.indicators.events import (
    ButtonDown,
    ButtonId,
    ButtonUp,
    PointerMoved,
    button_from_name,
)


def test_events_compare_by_value() -> None:
    assert ButtonDown(ButtonId.PRIMARY) == ButtonDown(ButtonId.PRIMARY)
    assert ButtonDown(ButtonId.PRIMARY) != ButtonUp(ButtonId.PRIMARY)
    assert PointerMoved(1, 2) == PointerMoved(1, 2)
    assert len({PointerMoved(1, 2), PointerMoved(1, 2)}) == 1


def test_events_are_immutable() -> None:
    event = PointerMoved(10, 20)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.x = 11  # type: ignore[misc]


def test_button_names() -> None:
    assert button_from_name("left") is ButtonId.PRIMARY
    assert button_from_name("right") is ButtonId.SECONDARY
    assert button_from_name("middle") is None
    assert button_from_name(None) is None
