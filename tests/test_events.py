import pytest

from retainedui.events import (
    Click,
    DoubleClick,
    Event,
    KeyDown,
    KeyUp,
    MouseDown,
    MouseEnter,
    MouseLeave,
    MouseMove,
    MouseOut,
    MouseOver,
    MouseUp,
    MouseWheel,
)
from retainedui.geometry import Vector2

POS = Vector2(3, 4)


@pytest.mark.parametrize(
    "data, name",
    [
        (MouseDown(POS, 0), "MouseDownEvent"),
        (MouseUp(POS, 0), "MouseUpEvent"),
        (Click(POS, 1), "ClickEvent"),
        (DoubleClick(POS, 1), "DoubleClickEvent"),
        (MouseMove(POS, Vector2(1, 1)), "MouseMoveEvent"),
        (MouseLeave(POS), "MouseLeaveEvent"),
        (MouseEnter(POS), "MouseEnterEvent"),
        (MouseOut(POS), "MouseOutEvent"),
        (MouseOver(POS), "MouseOverEvent"),
        (MouseWheel(POS, Vector2(0, -1)), "MouseWheenEvent"),
        (KeyDown(65), "KeyDownEvent"),
        (KeyUp(65, True), "KeyUpEvent"),
    ],
)
def test_event_names(data, name):
    assert Event(data).name == name


def test_is_of_type():
    event = Event(Click(POS, 0))
    assert event.is_of_type(Click)
    assert not event.is_of_type(MouseDown)


def test_unwrap_returns_payload():
    data = KeyDown(32, repeat=True)
    assert Event(data).unwrap(KeyDown) == data
    assert Event(data).unwrap(KeyDown).repeat is True


def test_unwrap_wrong_type_raises():
    with pytest.raises(TypeError):
        Event(KeyDown(32)).unwrap(KeyUp)


def test_get_if():
    data = MouseMove(POS, Vector2(2, 0))
    event = Event(data)
    assert event.get_if(MouseMove) == data
    assert event.get_if(MouseWheel) is None


def test_rejects_unknown_payload():
    with pytest.raises(TypeError):
        Event("click")


def test_related_target_is_carried():
    target = object()
    event = Event(MouseOver(POS, related_target=target))
    assert event.unwrap(MouseOver).related_target is target