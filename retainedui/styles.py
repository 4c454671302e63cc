"""Style and layout descriptions for UI elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, Optional, TypeVar, Union

from .geometry import Auto, Color, Ratio, Value

T = TypeVar("T")

ValueRatioAuto = Union[Value, Ratio, Auto]
ValueRatio = Union[Value, Ratio]


class Theme(Enum):
    DARK = auto()
    LIGHT = auto()


class BoxSizing(Enum):
    BORDER_BOX = auto()
    CONTENT_BOX = auto()


class Display(Enum):
    FLEX = auto()
    NONE = auto()
    CONTENTS = auto()


class Overflow(Enum):
    VISIBLE = auto()
    HIDDEN = auto()
    SCROLL = auto()


class PositionType(Enum):
    RELATIVE = auto()
    ABSOLUTE = auto()
    STATIC = auto()


class FlexDirection(Enum):
    ROW = auto()
    COLUMN = auto()
    ROW_REVERSE = auto()
    COLUMN_REVERSE = auto()


class JustifyContent(Enum):
    FLEX_START = auto()
    CENTER = auto()
    FLEX_END = auto()
    SPACE_BETWEEN = auto()
    SPACE_AROUND = auto()
    SPACE_EVENLY = auto()


class Alignment(Enum):
    FLEX_START = auto()
    CENTER = auto()
    FLEX_END = auto()
    STRETCH = auto()
    BASELINE = auto()
    AUTO = auto()


class ObjectFit(Enum):
    FILL = auto()
    CONTAIN = auto()
    COVER = auto()
    NONE = auto()
    SCALE_DOWN = auto()


class Edge(Enum):
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    CENTER = auto()


@dataclass(frozen=True)
class FlexBasisAuto:
    pass


@dataclass(frozen=True)
class FlexBasisPercent:
    value: float


@dataclass(frozen=True)
class FlexBasisValue:
    value: float


FlexBasis = Union[FlexBasisAuto, FlexBasisPercent, FlexBasisValue]


@dataclass
class Flex:
    flex_direction: Optional[FlexDirection] = None
    justify_content: Optional[JustifyContent] = None
    align_items: Optional[Alignment] = None
    align_self: Optional[Alignment] = None
    flex: Optional[float] = None
    flex_grow: Optional[float] = None
    flex_shrink: Optional[float] = None
    flex_basis: Optional[FlexBasis] = None
    gap: Optional[float] = None
    row_gap: Optional[float] = None
    column_gap: Optional[float] = None
    gap_ratio: Optional[float] = None
    row_gap_ratio: Optional[float] = None
    column_gap_ratio: Optional[float] = None


@dataclass
class Size:
    width: Optional[ValueRatioAuto] = None
    height: Optional[ValueRatioAuto] = None
    min_width: Optional[int] = None
    min_height: Optional[int] = None
    max_width: Optional[int] = None
    max_height: Optional[int] = None
    aspect_ratio: Optional[float] = None


@dataclass
class Spacing:
    margin: Optional[ValueRatioAuto] = None
    margin_left: Optional[ValueRatioAuto] = None
    margin_horizontal: Optional[ValueRatioAuto] = None
    margin_vertical: Optional[ValueRatioAuto] = None
    margin_right: Optional[ValueRatioAuto] = None
    margin_top: Optional[ValueRatioAuto] = None
    margin_bottom: Optional[ValueRatioAuto] = None

    padding: Optional[ValueRatio] = None
    padding_horizontal: Optional[ValueRatio] = None
    padding_vertical: Optional[ValueRatio] = None
    padding_left: Optional[ValueRatio] = None
    padding_right: Optional[ValueRatio] = None
    padding_top: Optional[ValueRatio] = None
    padding_bottom: Optional[ValueRatio] = None

    border: Optional[float] = None
    border_left: Optional[float] = None
    border_right: Optional[float] = None
    border_top: Optional[float] = None
    border_bottom: Optional[float] = None


@dataclass
class Position:
    left: Optional[ValueRatioAuto] = None
    top: Optional[ValueRatioAuto] = None
    right: Optional[ValueRatioAuto] = None
    bottom: Optional[ValueRatioAuto] = None


@dataclass
class Layout:
    size: Optional[Size] = None
    spacing: Optional[Spacing] = None
    flex: Optional[Flex] = None
    position_type: Optional[PositionType] = None
    position: Optional[Position] = None
    display: Optional[Display] = None
    overflow: Optional[Overflow] = None
    box_sizing: Optional[BoxSizing] = None


@dataclass
class BorderColors:
    top: Optional[Color] = None
    bottom: Optional[Color] = None
    left: Optional[Color] = None
    right: Optional[Color] = None


@dataclass(frozen=True)
class ObjectPositionCenter:
    pass


@dataclass(frozen=True)
class ObjectPositionPosition:
    x: float
    y: float


@dataclass(frozen=True)
class ObjectPositionRatio:
    x: float
    y: float


@dataclass(frozen=True)
class ObjectPositionEdge:
    x: Edge
    y: Edge


ObjectPosition = Union[
    ObjectPositionCenter, ObjectPositionPosition, ObjectPositionRatio, ObjectPositionEdge
]


@dataclass
class DrawableContentProps:
    """How drawable content such as an image is fitted into its box."""

    object_position: ObjectPosition = field(default_factory=ObjectPositionCenter)
    object_fit: ObjectFit = ObjectFit.FILL


class InheritedValueError(LookupError):
    """Raised when reading a value that is still inherited."""


class _Inherit(Enum):
    INHERIT = auto()


class MaybeInherited(Generic[T]):
    """A property that either holds its own value or inherits from the parent."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _Inherit.INHERIT) -> None:
        self._value = value

    @classmethod
    def inherited(cls) -> MaybeInherited[T]:
        return cls()

    def is_inherited(self) -> bool:
        return self._value is _Inherit.INHERIT

    def value_or(self, alternative: T) -> T:
        return alternative if self.is_inherited() else self._value

    def unwrap(self) -> T:
        if self.is_inherited():
            raise InheritedValueError("unwrapping an inherited value")
        return self._value

    def set_inherited(self) -> None:
        self._value = _Inherit.INHERIT

    def set(self, value: T) -> None:
        self._value = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MaybeInherited):
            if self.is_inherited() or other.is_inherited():
                return self.is_inherited() and other.is_inherited()
            return self._value == other._value
        if self.is_inherited():
            return False
        return self._value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_inherited():
            return "MaybeInherited(<inherit>)"
        return f"MaybeInherited({self._value!r})"


_INHERITABLE_FIELDS = ("color", "letter_spacing", "font_size", "font_family")


@dataclass
class Inheritables:
    """Style properties that children take from their parent unless set.

    Plain values assigned to a field are wrapped in MaybeInherited.
    """

    color: MaybeInherited[Color] = field(default_factory=MaybeInherited)
    letter_spacing: MaybeInherited[int] = field(default_factory=MaybeInherited)
    font_size: MaybeInherited[int] = field(default_factory=MaybeInherited)
    font_family: MaybeInherited[list] = field(default_factory=MaybeInherited)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _INHERITABLE_FIELDS and not isinstance(value, MaybeInherited):
            value = MaybeInherited(value)
        super().__setattr__(name, value)

    def update_inherited_fields(self, source: Inheritables, new_props: Inheritables) -> None:
        """Take from new_props every field that source leaves inherited and new_props sets."""
        for name in _INHERITABLE_FIELDS:
            own = getattr(source, name)
            incoming = getattr(new_props, name)
            if own.is_inherited() and not incoming.is_inherited():
                getattr(self, name).set(incoming.unwrap())


@dataclass
class Style:
    inheritables: Inheritables = field(default_factory=Inheritables)
    background_color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_colors: Optional[BorderColors] = None
    # only applies when Layout.spacing.border gives an even thickness
    border_radius: Optional[ValueRatio] = None
    drawable_content_props: Optional[DrawableContentProps] = None