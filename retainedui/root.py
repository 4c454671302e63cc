"""The root element: owns the layout pass, style propagation and tree rendering."""

from __future__ import annotations

from collections import deque
from typing import Iterator

import pygame

from .defaults import root_layout, root_styles
from .element import Element
from .flexlayout import FlexNode
from .geometry import BLACK, Vector2
from .styles import Theme


class RenderStateError(RuntimeError):
    """Raised when rendering a tree whose layout or styles are out of date."""


class Root(Element):
    """The top of an element tree, sized to the window."""

    def __init__(self, window_size: Vector2) -> None:
        self._finalized = False
        self._dirty_layout = True
        super().__init__("Root")
        self._replace_node(FlexNode(use_web_defaults=True))
        self.update_layout(root_layout(window_size))

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def layout_dirty(self) -> bool:
        return self._dirty_layout

    def _breadth_first(self) -> Iterator[Element]:
        queue: deque[Element] = deque([self])
        visited: set[int] = set()
        while queue:
            node = queue.popleft()
            if node.id in visited:
                continue
            visited.add(node.id)
            yield node
            queue.extend(node._children)

    def finalize(self) -> None:
        """Apply root styles and push theme and inherited styles down the tree."""
        self.update_style(root_styles(self._preferred_theme))
        self._propagate_preferred_theme()
        self._propagate_styles()
        self._finalized = True

    def _propagate_preferred_theme(self) -> None:
        for node in self._breadth_first():
            if node is not self:
                node._set_preferred_theme(self._preferred_theme)

    def _on_layout_dirty(self) -> None:
        self._dirty_layout = True

    def _on_preferred_theme_changed(self, theme: Theme) -> None:
        self.update_style(root_styles(theme))
        self._propagate_preferred_theme()

    def _calculate_layout(self) -> None:
        self._node.calculate_layout(None, None)
        for node in self._breadth_first():
            node.update_absolute_position()
        self._dirty_layout = False

    def _propagate_styles(self) -> None:
        queue: deque[Element] = deque([self])
        visited: set[int] = set()
        while queue:
            node = queue.popleft()
            if node.id in visited or not node._dirty_cached_inheritable_props:
                continue
            if node is not self:
                node._update_cached_inheritable_props_from(node.parent)
                node._dirty_cached_inheritable_props = False
            visited.add(node.id)
            queue.extend(node._children)
        self._dirty_cached_inheritable_props = False

    def update(self) -> None:
        """Recompute layout and inherited styles if either is out of date."""
        if self._dirty_layout:
            self._calculate_layout()
        if self._dirty_cached_inheritable_props:
            self._propagate_styles()

    def render(self, surface: pygame.Surface) -> None:
        if not self._finalized:
            raise RenderStateError("[Root] Rendering non-finalized root element")
        if self._dirty_layout:
            raise RenderStateError("[Root] Rendering dirty layout")
        if self._dirty_cached_inheritable_props:
            raise RenderStateError("[Root] Rendering with inherited styles not recalculated")

        background = self._style.background_color or BLACK
        surface.fill(background.rgba)

        queue: deque[Element] = deque([self])
        visited: set[int] = set()
        while queue:
            node = queue.popleft()
            if node.id in visited or node.is_not_displayed():
                continue
            if node is not self:
                node.render(surface)
            visited.add(node.id)
            queue.extend(node._children)