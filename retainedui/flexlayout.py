"""A small flexbox layout engine: node tree, style properties and layout pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .geometry import Auto, Ratio, Rectangle, Value, clamp_ratio
from .styles import (
    Alignment,
    BoxSizing,
    Display,
    FlexBasisAuto,
    FlexBasisPercent,
    FlexBasisValue,
    FlexDirection,
    JustifyContent,
    Layout,
    Overflow,
    PositionType,
)


@dataclass(frozen=True)
class _Points:
    value: float


@dataclass(frozen=True)
class _Percent:
    value: float


@dataclass(frozen=True)
class _AutoDim:
    pass


_Dim = Union[_Points, _Percent, _AutoDim]

_SIDE_GROUPS = {
    "left": ("left", "horizontal", "all"),
    "right": ("right", "horizontal", "all"),
    "top": ("top", "vertical", "all"),
    "bottom": ("bottom", "vertical", "all"),
}


def _resolve(dim: Optional[_Dim], reference: Optional[float]) -> Optional[float]:
    if isinstance(dim, _Points):
        return dim.value
    if isinstance(dim, _Percent):
        return dim.value / 100 * reference if reference is not None else None
    return None


def _from_value_ratio_auto(spec: Union[Value, Ratio, Auto]) -> _Dim:
    if isinstance(spec, Value):
        return _Points(float(spec.value))
    if isinstance(spec, Ratio):
        return _Percent(100 * clamp_ratio(spec.ratio))
    return _AutoDim()


def _is_row(direction: FlexDirection) -> bool:
    return direction in (FlexDirection.ROW, FlexDirection.ROW_REVERSE)


def _is_reverse(direction: FlexDirection) -> bool:
    return direction in (FlexDirection.ROW_REVERSE, FlexDirection.COLUMN_REVERSE)


class FlexNode:
    """A layout node. After calculate_layout, ``layout`` holds its box relative to its parent."""

    def __init__(self, use_web_defaults: bool = False) -> None:
        self.use_web_defaults = use_web_defaults
        self.parent: Optional[FlexNode] = None
        self.children: list[FlexNode] = []

        self.flex_direction = FlexDirection.ROW if use_web_defaults else FlexDirection.COLUMN
        self.justify_content = JustifyContent.FLEX_START
        self.align_items = Alignment.STRETCH
        self.align_self = Alignment.AUTO
        self.flex: Optional[float] = None
        self.flex_grow: Optional[float] = None
        self.flex_shrink: Optional[float] = None
        self.flex_basis: Optional[_Dim] = None

        self.width: Optional[_Dim] = None
        self.height: Optional[_Dim] = None
        self.min_width: Optional[float] = None
        self.min_height: Optional[float] = None
        self.max_width: Optional[float] = None
        self.max_height: Optional[float] = None

        self.margin: dict[str, _Dim] = {}
        self.padding: dict[str, _Dim] = {}
        self.border: dict[str, float] = {}
        self.gap: dict[str, _Dim] = {}
        self.position: dict[str, _Dim] = {}

        self.position_type = PositionType.RELATIVE
        self.display = Display.FLEX
        self.overflow = Overflow.VISIBLE
        self.box_sizing = BoxSizing.BORDER_BOX

        self.layout = Rectangle()

    # tree ------------------------------------------------------------------

    def insert_child(self, child: FlexNode, index: int) -> None:
        child.parent = self
        self.children.insert(index, child)

    def remove_child(self, child: FlexNode) -> None:
        if child in self.children:
            self.children.remove(child)
            child.parent = None

    def remove_all_children(self) -> None:
        for child in self.children:
            child.parent = None
        self.children.clear()

    # style -----------------------------------------------------------------

    def apply_layout(self, layout: Layout) -> None:
        """Apply every property the layout sets; unset properties keep their value."""
        if layout.flex is not None:
            self._apply_flex(layout.flex)
        if layout.size is not None:
            self._apply_size(layout.size)
        if layout.spacing is not None:
            self._apply_spacing(layout.spacing)
        if layout.position is not None:
            for edge in ("left", "right", "top", "bottom"):
                spec = getattr(layout.position, edge)
                if isinstance(spec, Value):
                    self.position[edge] = _Points(float(spec.value))
                elif isinstance(spec, Ratio):
                    # a ratio is passed through as points, unscaled
                    self.position[edge] = _Points(float(spec.ratio))
                elif isinstance(spec, Auto):
                    self.position[edge] = _AutoDim()
        if layout.position_type is not None:
            self.position_type = layout.position_type
        if layout.display is not None:
            self.display = layout.display
        if layout.overflow is not None:
            self.overflow = layout.overflow
        if layout.box_sizing is not None:
            self.box_sizing = layout.box_sizing

    def _apply_flex(self, flex) -> None:
        if flex.flex_direction is not None:
            self.flex_direction = flex.flex_direction
        if flex.justify_content is not None:
            self.justify_content = flex.justify_content
        if flex.align_items is not None:
            self.align_items = flex.align_items
        if flex.align_self is not None:
            self.align_self = flex.align_self
        if flex.flex is not None:
            self.flex = flex.flex
        if flex.flex_grow is not None:
            self.flex_grow = flex.flex_grow
        if flex.flex_shrink is not None:
            self.flex_shrink = flex.flex_shrink
        basis = flex.flex_basis
        if isinstance(basis, FlexBasisAuto):
            self.flex_basis = _AutoDim()
        elif isinstance(basis, FlexBasisPercent):
            self.flex_basis = _Percent(basis.value)
        elif isinstance(basis, FlexBasisValue):
            self.flex_basis = _Points(basis.value)
        for key, name in (("all", "gap"), ("row", "row_gap"), ("column", "column_gap")):
            if getattr(flex, name) is not None:
                self.gap[key] = _Points(getattr(flex, name))
        for key, name in (("all", "gap_ratio"), ("row", "row_gap_ratio"), ("column", "column_gap_ratio")):
            if getattr(flex, name) is not None:
                self.gap[key] = _Percent(100 * clamp_ratio(getattr(flex, name)))

    def _apply_size(self, size) -> None:
        if size.width is not None:
            self.width = _from_value_ratio_auto(size.width)
        if size.height is not None:
            self.height = _from_value_ratio_auto(size.height)
        if size.min_width is not None:
            self.min_width = size.min_width
        if size.min_height is not None:
            self.min_height = size.min_height
        # maximum sizes feed the minimum constraints, as the element model defines
        if size.max_width is not None:
            self.min_width = size.max_width
        if size.max_height is not None:
            self.min_height = size.max_height
        if size.aspect_ratio is not None:
            self.width = _Percent(100 * clamp_ratio(size.aspect_ratio))

    def _apply_spacing(self, spacing) -> None:
        margins = {
            "all": spacing.margin, "left": spacing.margin_left, "right": spacing.margin_right,
            "top": spacing.margin_top, "bottom": spacing.margin_bottom,
            "vertical": spacing.margin_vertical, "horizontal": spacing.margin_horizontal,
        }
        for edge, spec in margins.items():
            if spec is not None:
                self.margin[edge] = _from_value_ratio_auto(spec)
        paddings = {
            "all": spacing.padding, "left": spacing.padding_left, "right": spacing.padding_right,
            "top": spacing.padding_top, "bottom": spacing.padding_bottom,
            "horizontal": spacing.padding_horizontal, "vertical": spacing.padding_vertical,
        }
        for edge, spec in paddings.items():
            if spec is not None:
                self.padding[edge] = _from_value_ratio_auto(spec)
        borders = {
            "all": spacing.border, "left": spacing.border_left, "right": spacing.border_right,
            "top": spacing.border_top, "bottom": spacing.border_bottom,
        }
        for edge, value in borders.items():
            if value is not None:
                self.border[edge] = float(value)

    # edge helpers ----------------------------------------------------------

    @staticmethod
    def _lookup(values: dict, side: str):
        for key in _SIDE_GROUPS[side]:
            if key in values:
                return values[key]
        return None

    def _margin(self, side: str, ref_w: Optional[float]) -> float:
        return _resolve(self._lookup(self.margin, side), ref_w) or 0.0

    def _inset(self, side: str, ref_w: Optional[float]) -> float:
        padding = _resolve(self._lookup(self.padding, side), ref_w) or 0.0
        return padding + (self._lookup(self.border, side) or 0.0)

    def _insets(self, row: bool, ref_w: Optional[float]) -> float:
        sides = ("left", "right") if row else ("top", "bottom")
        return sum(self._inset(side, ref_w) for side in sides)

    def _margins(self, row: bool, ref_w: Optional[float]) -> tuple[float, float]:
        sides = ("left", "right") if row else ("top", "bottom")
        return self._margin(sides[0], ref_w), self._margin(sides[1], ref_w)

    def _gap(self, row: bool, ref: Optional[float]) -> float:
        dim = self.gap.get("column" if row else "row", self.gap.get("all"))
        return _resolve(dim, ref) or 0.0

    def _clamp(self, size: float, row: bool) -> float:
        low = self.min_width if row else self.min_height
        high = self.max_width if row else self.max_height
        if high is not None:
            size = min(size, high)
        if low is not None:
            size = max(size, low)
        return max(size, 0.0)

    # sizing ----------------------------------------------------------------

    def _explicit(self, row: bool, ref_w: Optional[float], ref_h: Optional[float]) -> Optional[float]:
        size = _resolve(self.width if row else self.height, ref_w if row else ref_h)
        if size is None:
            return None
        if self.box_sizing is BoxSizing.CONTENT_BOX:
            size += self._insets(row, ref_w)
        return self._clamp(size, row)

    def _flow_children(self) -> list[FlexNode]:
        return [
            c for c in self.children
            if c.display is not Display.NONE and c.position_type is not PositionType.ABSOLUTE
        ]

    def _measure(self, row: bool, ref_w: Optional[float], ref_h: Optional[float]) -> float:
        explicit = self._explicit(row, ref_w, ref_h)
        if explicit is not None:
            return explicit
        children = self._flow_children()
        along_main = _is_row(self.flex_direction) == row
        sizes = [
            c._measure(row, None, None) + sum(c._margins(row, None)) for c in children
        ]
        if along_main:
            content = sum(sizes) + self._gap(row, None) * max(len(sizes) - 1, 0)
        else:
            content = max(sizes, default=0.0)
        return self._clamp(content + self._insets(row, ref_w), row)

    def _grow(self) -> float:
        if self.flex_grow is not None:
            return self.flex_grow
        return self.flex if self.flex is not None and self.flex > 0 else 0.0

    def _shrink(self) -> float:
        if self.flex_shrink is not None:
            return self.flex_shrink
        if self.flex is not None and self.flex < 0:
            return -self.flex
        return 1.0 if self.use_web_defaults else 0.0

    def _basis(self, row: bool, inner_main: Optional[float], ref_w, ref_h) -> float:
        if isinstance(self.flex_basis, (_Points, _Percent)):
            resolved = _resolve(self.flex_basis, inner_main)
            if resolved is not None:
                return resolved
        explicit = self._explicit(row, ref_w, ref_h)
        if explicit is not None:
            return explicit
        if (
            self.flex_basis is None
            and self.flex is not None
            and self.flex > 0
            and not self.use_web_defaults
        ):
            return 0.0
        return self._measure(row, ref_w, ref_h)

    # layout ----------------------------------------------------------------

    def calculate_layout(self, width: Optional[float] = None, height: Optional[float] = None) -> None:
        """Lay out this node and its subtree in the given available space."""
        w = self._explicit(True, width, height)
        if w is None:
            w = width if width is not None else self._measure(True, None, None)
        h = self._explicit(False, width, height)
        if h is None:
            h = height if height is not None else self._measure(False, None, None)
        self.layout = Rectangle(0.0, 0.0, w, h)
        self._layout_children()

    def _layout_children(self) -> None:
        w, h = self.layout.width, self.layout.height
        inner_w = max(w - self._insets(True, w), 0.0)
        inner_h = max(h - self._insets(False, w), 0.0)
        row = _is_row(self.flex_direction)
        inner_main, inner_cross = (inner_w, inner_h) if row else (inner_h, inner_w)
        origin_x, origin_y = self._inset("left", w), self._inset("top", w)

        for child in self.children:
            if child.display is Display.NONE:
                child.layout = Rectangle()
                child._zero_subtree()

        flow = self._flow_children()
        gap = self._gap(row, inner_main)
        bases = [c._basis(row, inner_main, inner_w, inner_h) for c in flow]
        margins = [c._margins(row, inner_w) for c in flow]
        used = sum(bases) + sum(a + b for a, b in margins) + gap * max(len(flow) - 1, 0)
        free = inner_main - used

        sizes = list(bases)
        if free > 0:
            total_grow = sum(c._grow() for c in flow)
            if total_grow > 0:
                sizes = [b + free * c._grow() / total_grow for b, c in zip(bases, flow)]
        elif free < 0:
            total_shrink = sum(c._shrink() * b for c, b in zip(flow, bases))
            if total_shrink > 0:
                sizes = [b + free * c._shrink() * b / total_shrink for b, c in zip(bases, flow)]
        sizes = [c._clamp(s, row) for c, s in zip(flow, sizes)]

        remaining = inner_main - sum(sizes) - sum(a + b for a, b in margins) - gap * max(len(flow) - 1, 0)
        lead, between = self._justify(max(remaining, 0.0) if remaining > 0 else remaining, len(flow))
        cursor = lead

        placed: list[tuple[FlexNode, float, float, float, float]] = []
        for child, size, (m_start, m_end) in zip(flow, sizes, margins):
            c_start, c_end = child._margins(not row, inner_w)
            cross = child._explicit(not row, inner_w, inner_h)
            align = child.align_self if child.align_self is not Alignment.AUTO else self.align_items
            if cross is None:
                if align is Alignment.STRETCH:
                    cross = child._clamp(inner_cross - c_start - c_end, not row)
                else:
                    cross = child._measure(not row, inner_w, inner_h)
            free_cross = inner_cross - cross - c_start - c_end
            if align is Alignment.CENTER:
                cross_pos = c_start + free_cross / 2
            elif align is Alignment.FLEX_END:
                cross_pos = c_start + free_cross
            else:
                cross_pos = c_start
            main_pos = cursor + m_start
            if _is_reverse(self.flex_direction):
                main_pos = inner_main - main_pos - size
            cursor += m_start + size + m_end + gap + between
            placed.append((child, main_pos, cross_pos, size, cross))

        for child, main_pos, cross_pos, size, cross in placed:
            if row:
                x, y, cw, ch = main_pos, cross_pos, size, cross
            else:
                x, y, cw, ch = cross_pos, main_pos, cross, size
            x += origin_x
            y += origin_y
            if child.position_type is PositionType.RELATIVE:
                left = _resolve(child.position.get("left"), inner_w)
                right = _resolve(child.position.get("right"), inner_w)
                top = _resolve(child.position.get("top"), inner_h)
                bottom = _resolve(child.position.get("bottom"), inner_h)
                x += left if left is not None else -(right or 0.0)
                y += top if top is not None else -(bottom or 0.0)
            child.layout = Rectangle(x, y, cw, ch)
            child._layout_children()

        for child in self.children:
            if child.position_type is PositionType.ABSOLUTE and child.display is not Display.NONE:
                self._place_absolute(child, w, h, inner_w, inner_h)

    def _place_absolute(self, child: FlexNode, w: float, h: float, inner_w: float, inner_h: float) -> None:
        cw = child._explicit(True, inner_w, inner_h)
        if cw is None:
            cw = child._measure(True, inner_w, inner_h)
        ch = child._explicit(False, inner_w, inner_h)
        if ch is None:
            ch = child._measure(False, inner_w, inner_h)
        border = self.border
        left = _resolve(child.position.get("left"), inner_w)
        right = _resolve(child.position.get("right"), inner_w)
        top = _resolve(child.position.get("top"), inner_h)
        bottom = _resolve(child.position.get("bottom"), inner_h)
        b_left = self._lookup(border, "left") or 0.0
        b_right = self._lookup(border, "right") or 0.0
        b_top = self._lookup(border, "top") or 0.0
        b_bottom = self._lookup(border, "bottom") or 0.0
        if left is not None:
            x = b_left + left
        elif right is not None:
            x = w - b_right - right - cw
        else:
            x = self._inset("left", w)
        if top is not None:
            y = b_top + top
        elif bottom is not None:
            y = h - b_bottom - bottom - ch
        else:
            y = self._inset("top", w)
        child.layout = Rectangle(x, y, cw, ch)
        child._layout_children()

    def _justify(self, remaining: float, count: int) -> tuple[float, float]:
        mode = self.justify_content
        if mode is JustifyContent.CENTER:
            return remaining / 2, 0.0
        if mode is JustifyContent.FLEX_END:
            return remaining, 0.0
        if count == 0 or remaining <= 0:
            return 0.0, 0.0
        if mode is JustifyContent.SPACE_BETWEEN:
            return 0.0, remaining / (count - 1) if count > 1 else 0.0
        if mode is JustifyContent.SPACE_AROUND:
            return remaining / count / 2, remaining / count
        if mode is JustifyContent.SPACE_EVENLY:
            step = remaining / (count + 1)
            return step, step
        return 0.0, 0.0

    def _zero_subtree(self) -> None:
        for child in self.children:
            child.layout = Rectangle()
            child._zero_subtree()