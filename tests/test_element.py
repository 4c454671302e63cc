import pygame
import pytest

from retainedui.defaults import button_layout
from retainedui.element import (
    Button,
    Element,
    Row,
    Stack,
    View,
    append_child,
    append_children,
)
from retainedui.geometry import BLACK, DARKPURPLE, WHITE, Color, Rectangle, Value, Vector2
from retainedui.styles import (
    BorderColors,
    BoxSizing,
    Display,
    FlexDirection,
    Layout,
    Size,
    Spacing,
    Style,
    Theme,
)


class LayoutRecorder(View):
    def __init__(self):
        self.layout_events = 0
        super().__init__()

    def _on_layout_dirty(self):
        self.layout_events += 1


def _sized(width, height):
    view = View()
    view.update_layout(Layout(size=Size(width=Value(width), height=Value(height))))
    return view


def _laid_out(element):
    element.layout_node.calculate_layout()
    element.update_absolute_position()
    return element


def test_ids_are_unique_and_increasing():
    first, second = View(), View()
    assert second.id > first.id


def test_names_of_element_kinds():
    assert [e.name for e in (Element(), View(), Row(), Stack(), Button())] == [
        "Element", "View", "Row", "Stack", "Button",
    ]


def test_append_child_links_both_ways():
    parent, child = View(), View()
    assert append_child(parent, child) is parent
    assert parent.children == [child]
    assert child.parent is parent
    assert parent.layout_node.children == [child.layout_node]


def test_append_child_ignores_missing_child():
    parent = View()
    assert append_child(parent, None) is parent
    assert parent.children == []


def test_append_children_keeps_order():
    parent = View()
    kids = [View(), Row(), Stack()]
    assert append_children(parent, *kids) is parent
    assert parent.children == kids


def test_siblings_exclude_self():
    parent = View()
    a, b, c = View(), View(), View()
    append_children(parent, a, b, c)
    assert b.siblings() == [a, c]
    assert parent.siblings() == []


def test_remove_child_and_remove_all():
    parent = View()
    a, b = View(), View()
    append_children(parent, a, b)
    parent.remove_child(a)
    assert parent.children == [b]
    assert parent.layout_node.children == [b.layout_node]
    parent.remove_all_children()
    assert parent.children == []
    assert parent.layout_node.children == []


def test_default_layout_uses_content_box_and_dark_theme():
    element = View()
    assert element.layout.box_sizing is BoxSizing.CONTENT_BOX
    assert element.preferred_theme is Theme.DARK


def test_layout_property_is_a_copy():
    view = View()
    layout = view.layout
    layout.display = Display.NONE
    assert not view.is_not_displayed()
    view.update_layout(layout)
    assert view.is_not_displayed()
    assert view.layout == layout


def test_layout_change_notifies_every_ancestor_once():
    grandparent, parent, child = LayoutRecorder(), LayoutRecorder(), View()
    append_child(grandparent, parent)
    append_child(parent, child)
    layout = child.layout
    layout.display = Display.NONE
    child.update_layout(layout)
    assert (grandparent.layout_events, parent.layout_events) == (1, 1)
    child.update_layout(layout)
    assert (grandparent.layout_events, parent.layout_events) == (1, 1)


def test_update_style_updates_resolved_inheritables():
    view = View()
    style = view.style
    style.inheritables.font_size = 20
    view.update_style(style)
    assert view.resolved_inheritables.font_size.unwrap() == 20
    assert view.style.inheritables.font_size == 20


def test_style_property_is_a_copy():
    view = View()
    style = view.style
    style.background_color = WHITE
    assert view.style.background_color is None


def test_button_defaults():
    button = Button()
    assert button.layout.spacing == button_layout().spacing
    assert button.layout.spacing.border == 2
    assert button.style.background_color == DARKPURPLE


def test_stack_lays_out_as_column():
    stack = Stack()
    assert stack.layout.flex.flex_direction is FlexDirection.COLUMN
    assert stack.layout_node.flex_direction is FlexDirection.COLUMN


def test_bounding_rect_and_contains_after_layout():
    parent = _sized(100, 50)
    child = View()
    child.update_layout(Layout(size=Size(height=Value(20))))
    append_child(parent, child)
    _laid_out(parent)
    child.update_absolute_position()
    assert child.bounding_rect() == Rectangle(0, 0, 100, 20)
    assert child.contains(Vector2(50, 10))
    assert not child.contains(Vector2(100, 10))
    assert not child.contains(Vector2(50, 20))


def test_render_fills_background():
    view = _laid_out(_sized(10, 10))
    style = view.style
    style.background_color = WHITE
    view.update_style(style)
    surface = pygame.Surface((20, 20))
    surface.fill(BLACK.rgba)
    view.render(surface)
    assert surface.get_at((5, 5)) == WHITE.rgba
    assert surface.get_at((15, 15)) == BLACK.rgba


def test_render_without_style_draws_nothing():
    view = _laid_out(_sized(10, 10))
    surface = pygame.Surface((20, 20))
    surface.fill(BLACK.rgba)
    view.render(surface)
    assert surface.get_at((5, 5)) == BLACK.rgba


def test_render_even_border():
    red = Color(255, 0, 0)
    view = View()
    view.update_layout(
        Layout(
            size=Size(width=Value(10), height=Value(10)),
            spacing=Spacing(border=2),
            box_sizing=BoxSizing.BORDER_BOX,
        )
    )
    view.update_style(Style(border_color=red))
    _laid_out(view)
    surface = pygame.Surface((20, 20))
    surface.fill(BLACK.rgba)
    view.render(surface)
    assert surface.get_at((0, 0)) == red.rgba
    assert surface.get_at((5, 5)) == BLACK.rgba


def test_render_single_edge_border():
    blue = Color(0, 0, 255)
    view = View()
    view.update_layout(
        Layout(
            size=Size(width=Value(10), height=Value(10)),
            spacing=Spacing(border_top=3),
            box_sizing=BoxSizing.BORDER_BOX,
        )
    )
    view.update_style(Style(border_colors=BorderColors(top=blue)))
    _laid_out(view)
    surface = pygame.Surface((20, 20))
    surface.fill(BLACK.rgba)
    view.render(surface)
    assert surface.get_at((5, 1)) == blue.rgba
    assert surface.get_at((5, 9)) == BLACK.rgba


@pytest.mark.parametrize("display,hidden", [(None, False), (Display.FLEX, False), (Display.NONE, True)])
def test_is_not_displayed(display, hidden):
    view = View()
    view.update_layout(Layout(display=display))
    assert view.is_not_displayed() is hidden