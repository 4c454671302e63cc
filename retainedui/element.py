"""The element tree: base element with layout, style, inheritance and drawing."""

from __future__ import annotations

import copy
import itertools
import weakref
from typing import ClassVar, Optional

import pygame

from .defaults import button_layout, button_styles, element_layout, element_styles
from .flexlayout import FlexNode
from .geometry import BLANK, Color, Edges, Ratio, Rectangle, Value, Vector2, clamp_ratio, edge_lines
from .styles import Display, Flex, FlexDirection, Inheritables, Layout, Style, Theme


def _pg_rect(rect: Rectangle) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def _line_width(thickness: float) -> int:
    return max(1, int(round(thickness)))


def _roundness(radius, rect: Rectangle) -> float:
    """Border radius as a fraction of half the shorter side, in [0, 1]."""
    if isinstance(radius, Ratio):
        return clamp_ratio(radius.ratio)
    shortest = min(rect.width, rect.height)
    if shortest <= 0:
        return 1.0
    return clamp_ratio(radius.value / shortest)


def _radius_pixels(roundness: float, rect: Rectangle) -> int:
    return int(roundness * min(rect.width, rect.height) / 2)


def _half(thickness: float) -> float:
    return thickness if thickness <= 1.0 else thickness / 2


class Element:
    """A node of the UI tree.

    Rendering of the whole tree is driven by the root; ``render`` draws only
    this element, never its children.
    """

    _ids: ClassVar[itertools.count] = itertools.count()
    _accepts_children: ClassVar[bool] = True

    def __init__(self, name: str = "Element") -> None:
        self._id = next(Element._ids)
        self._name = name
        self._preferred_theme = Theme.DARK
        self._absolute_position = Vector2(0.0, 0.0)
        self._parent: Optional[weakref.ReferenceType[Element]] = None
        self._children: list[Element] = []
        self._dirty_cached_inheritable_props = True
        self._cached_inheritable_props = Inheritables()
        self._layout = Layout()
        self._style = Style()
        self._node = FlexNode()

        self.update_style(element_styles(self._preferred_theme))
        self.update_layout(element_layout())

    def __repr__(self) -> str:
        return f"<{self._name} #{self._id}>"

    # read-only state -------------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional[Element]:
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> list[Element]:
        return list(self._children)

    @property
    def layout(self) -> Layout:
        """A copy of the layout; pass a modified copy to update_layout."""
        return copy.deepcopy(self._layout)

    @property
    def style(self) -> Style:
        """A copy of the style; pass a modified copy to update_style."""
        return copy.deepcopy(self._style)

    @property
    def preferred_theme(self) -> Theme:
        return self._preferred_theme

    @property
    def absolute_position(self) -> Vector2:
        return self._absolute_position

    @property
    def layout_node(self) -> FlexNode:
        return self._node

    @property
    def resolved_inheritables(self) -> Inheritables:
        """Inheritable properties after taking the parent's values into account."""
        return self._cached_inheritable_props

    # tree ------------------------------------------------------------------

    def _append_child(self, child: Optional[Element]) -> None:
        if child is None:
            return
        self._children.append(child)
        self._node.insert_child(child._node, len(self._children) - 1)
        self._on_child_appended(child)

    def _set_parent(self, parent: Element) -> None:
        self._parent = weakref.ref(parent)
        self._set_preferred_theme(parent.preferred_theme)

    def _replace_node(self, node: FlexNode) -> None:
        self._node = node
        for index, child in enumerate(self._children):
            node.insert_child(child._node, index)

    def remove_child(self, child: Element) -> None:
        if child in self._children:
            self._node.remove_child(child._node)
            self._children.remove(child)

    def remove_all_children(self) -> None:
        self._node.remove_all_children()
        self._children.clear()

    def siblings(self) -> list[Element]:
        parent = self.parent
        if parent is None:
            return []
        return [sibling for sibling in parent._children if sibling._id != self._id]

    # hooks -----------------------------------------------------------------

    def _on_child_appended(self, child: Element) -> None:
        """Reject the child when this kind of element must stay a leaf."""
        if not self._accepts_children:
            raise TypeError(
                f"[{self._name}] {self._name} element can only be used as leaf node."
            )

    def _on_layout_dirty(self) -> None:
        pass

    def _on_preferred_theme_changed(self, theme: Theme) -> None:
        pass

    # theme -----------------------------------------------------------------

    def _set_preferred_theme(self, theme: Theme) -> None:
        previous = self._preferred_theme
        self._preferred_theme = theme
        if previous is not theme:
            self.update_style(element_styles(theme))
            self._on_preferred_theme_changed(theme)

    # dirty tracking --------------------------------------------------------

    def _ancestors(self):
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    def _mark_inheritable_styles_dirty(self) -> None:
        for ancestor in self._ancestors():
            ancestor._dirty_cached_inheritable_props = True

        pending = [self]
        while pending:
            element = pending.pop(0)
            if not element._dirty_cached_inheritable_props:
                element._dirty_cached_inheritable_props = True
                pending.extend(element._children)

    def _mark_layout_dirty(self) -> None:
        for ancestor in self._ancestors():
            ancestor._on_layout_dirty()

    def _update_cached_inheritable_props_from(self, element: Optional[Element]) -> None:
        if element is None:
            return
        self._cached_inheritable_props.update_inherited_fields(
            self._style.inheritables, element._cached_inheritable_props
        )

    # updates ---------------------------------------------------------------

    def update_layout(self, layout: Layout) -> None:
        """Apply a new layout; ancestors are told their layout is out of date."""
        if self._layout == layout:
            return
        self._node.apply_layout(layout)
        self._mark_layout_dirty()
        self._layout = copy.deepcopy(layout)

    def update_style(self, style: Style) -> None:
        """Apply a new style; a change of inheritable properties marks the tree dirty."""
        if style.inheritables != self._style.inheritables:
            self._cached_inheritable_props = copy.deepcopy(style.inheritables)
            self._mark_inheritable_styles_dirty()
        self._style = copy.deepcopy(style)

    def is_not_displayed(self) -> bool:
        return self._layout.display is Display.NONE

    def update_absolute_position(self) -> None:
        """Recompute the position relative to the root; call after a layout pass."""
        parent = self.parent
        if parent is not None:
            self._absolute_position = Vector2(
                self._node.layout.x + parent._absolute_position.x,
                self._node.layout.y + parent._absolute_position.y,
            )

    def bounding_rect(self) -> Rectangle:
        return Rectangle(
            self._absolute_position.x,
            self._absolute_position.y,
            self._node.layout.width,
            self._node.layout.height,
        )

    def contains(self, point: Vector2) -> bool:
        return self.bounding_rect().contains(point)

    # drawing ---------------------------------------------------------------

    def render(self, surface: pygame.Surface) -> None:
        bounds = self.bounding_rect()
        self._draw_background(surface, bounds)
        self._draw_border(surface, bounds)

    def _draw_background(self, surface: pygame.Surface, bounds: Rectangle) -> None:
        if bounds.width + bounds.height == 0:
            return
        background = self._style.background_color
        if background is None:
            return
        radius = self._style.border_radius
        if isinstance(radius, (Ratio, Value)):
            roundness = _roundness(radius, bounds)
            pygame.draw.rect(
                surface,
                background.rgba,
                _pg_rect(bounds),
                border_radius=_radius_pixels(roundness, bounds),
            )
        else:
            pygame.draw.rect(surface, background.rgba, _pg_rect(bounds))

    def _draw_border(self, surface: pygame.Surface, bounds: Rectangle) -> None:
        spacing = self._layout.spacing
        if spacing is None:
            return

        even = spacing.border is not None and all(
            side is None
            for side in (
                spacing.border_bottom,
                spacing.border_top,
                spacing.border_left,
                spacing.border_right,
            )
        )

        radius = self._style.border_radius
        border_color = self._style.border_color
        if even and radius is not None and border_color is not None:
            border = spacing.border
            half = _half(border)
            rect = Rectangle(bounds.x - half, bounds.y - half, bounds.width + half, bounds.height + half)
            if border > 0 and border_color.a > 0:
                roundness = _roundness(radius, rect)
                pygame.draw.rect(
                    surface,
                    border_color.rgba,
                    _pg_rect(rect),
                    width=_line_width(border),
                    border_radius=_radius_pixels(roundness, rect),
                )
            return

        colors: Edges[Color] = Edges(BLANK, BLANK, BLANK, BLANK)
        if border_color is not None:
            colors = Edges(border_color, border_color, border_color, border_color)
        if self._style.border_colors is not None:
            for side in ("top", "bottom", "left", "right"):
                value = getattr(self._style.border_colors, side)
                if value is not None:
                    setattr(colors, side, value)

        borders: Edges[float] = Edges(0.0, 0.0, 0.0, 0.0)
        if spacing.border is not None:
            borders = Edges(spacing.border, spacing.border, spacing.border, spacing.border)
        for side in ("left", "top", "bottom", "right"):
            value = getattr(spacing, f"border_{side}")
            if value is not None:
                setattr(borders, side, value)

        uniform = (
            borders.top == borders.bottom == borders.left == borders.right
            and colors.top == colors.bottom == colors.left == colors.right
        )
        if uniform:
            border = borders.left
            half = _half(border)
            rect = Rectangle(bounds.x - half, bounds.y - half, bounds.width + half, bounds.height + half)
            if border > 0 and colors.top.a > 0:
                pygame.draw.rect(surface, colors.top.rgba, _pg_rect(rect), width=_line_width(border))
            return

        for line in edge_lines(
            bounds,
            borders.top,
            borders.bottom,
            borders.left,
            borders.right,
            colors.top,
            colors.bottom,
            colors.left,
            colors.right,
        ):
            pygame.draw.line(
                surface,
                line.color.rgba,
                (line.start.x, line.start.y),
                (line.end.x, line.end.y),
                _line_width(line.thickness),
            )


class View(Element):
    def __init__(self) -> None:
        super().__init__("View")


class Row(Element):
    def __init__(self) -> None:
        super().__init__("Row")


class Stack(Element):
    """An element laying out its children in a column."""

    def __init__(self) -> None:
        super().__init__("Stack")
        layout = self.layout
        layout.flex = Flex(flex_direction=FlexDirection.COLUMN)
        self.update_layout(layout)


class Button(Element):
    def __init__(self) -> None:
        super().__init__("Button")
        self.update_layout(button_layout())
        self.update_style(button_styles(self._preferred_theme))

    def _on_preferred_theme_changed(self, theme: Theme) -> None:
        self.update_style(button_styles(theme))


def append_child(parent: Optional[Element], child: Optional[Element]) -> Optional[Element]:
    """Append child to parent and set the child's parent; returns parent."""
    if parent is None or child is None:
        return parent
    parent._append_child(child)
    child._set_parent(parent)
    return parent


def append_children(parent: Optional[Element], *args: Element) -> Optional[Element]:
    """Append each child in turn; returns parent."""
    for child in args:
        append_child(parent, child)
    return parent