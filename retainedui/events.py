"""Input event payloads and the event wrapper that carries one of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from .geometry import Vector2

D = TypeVar("D")


@dataclass(frozen=True)
class MouseDown:
    position: Vector2
    button: int


@dataclass(frozen=True)
class MouseUp:
    position: Vector2
    button: int


@dataclass(frozen=True)
class Click:
    """A complete press then release."""

    position: Vector2
    button: int


@dataclass(frozen=True)
class DoubleClick:
    position: Vector2
    button: int


@dataclass(frozen=True)
class MouseMove:
    position: Vector2
    movement: Vector2


@dataclass(frozen=True)
class MouseLeave:
    """Fires on the element only and does not bubble; target is where the mouse goes."""

    position: Vector2
    related_target: Any = None


@dataclass(frozen=True)
class MouseEnter:
    """Fires on the element only and does not bubble; target is where the mouse came from."""

    position: Vector2
    related_target: Any = None


@dataclass(frozen=True)
class MouseOut:
    """Bubbles; target is where the mouse goes."""

    position: Vector2
    related_target: Any = None


@dataclass(frozen=True)
class MouseOver:
    """Bubbles; target is where the mouse came from."""

    position: Vector2
    related_target: Any = None


@dataclass(frozen=True)
class MouseWheel:
    position: Vector2
    delta: Vector2


@dataclass(frozen=True)
class KeyDown:
    key: int
    repeat: bool = False


@dataclass(frozen=True)
class KeyUp:
    key: int
    repeat: bool = False


_EVENT_NAMES: dict[type, str] = {
    MouseDown: "MouseDownEvent",
    MouseUp: "MouseUpEvent",
    Click: "ClickEvent",
    DoubleClick: "DoubleClickEvent",
    MouseMove: "MouseMoveEvent",
    MouseLeave: "MouseLeaveEvent",
    MouseEnter: "MouseEnterEvent",
    MouseOut: "MouseOutEvent",
    MouseOver: "MouseOverEvent",
    MouseWheel: "MouseWheenEvent",
    KeyDown: "KeyDownEvent",
    KeyUp: "KeyUpEvent",
}


@dataclass(frozen=True)
class Event:
    """An event carrying exactly one kind of payload."""

    data: Any

    def __post_init__(self) -> None:
        if type(self.data) not in _EVENT_NAMES:
            raise TypeError(f"not an event payload: {type(self.data).__name__}")

    @property
    def name(self) -> str:
        return _EVENT_NAMES[type(self.data)]

    def is_of_type(self, kind: type) -> bool:
        return type(self.data) is kind

    def unwrap(self, kind: type[D]) -> D:
        if type(self.data) is kind:
            return self.data
        raise TypeError(f"[Event] unwrapping wrong type: {self.name} is not {kind.__name__}")

    def get_if(self, kind: type[D]) -> Optional[D]:
        return self.data if type(self.data) is kind else None