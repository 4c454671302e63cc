import pytest

from retainedui.flexlayout import FlexNode
from retainedui.geometry import Ratio, Value
from retainedui.styles import (
    Alignment,
    Display,
    Flex,
    FlexDirection,
    JustifyContent,
    Layout,
    Size,
    Spacing,
)


def sized(w, h, **layout_kwargs):
    node = FlexNode()
    node.apply_layout(Layout(size=Size(width=Value(w), height=Value(h)), **layout_kwargs))
    return node


def test_root_takes_explicit_size():
    root = sized(640, 480)
    root.calculate_layout()
    assert (root.layout.width, root.layout.height) == (640, 480)


def test_tree_editing():
    root, a, b = FlexNode(), FlexNode(), FlexNode()
    root.insert_child(a, 0)
    root.insert_child(b, 0)
    assert root.children == [b, a]
    assert a.parent is root
    root.remove_child(b)
    assert root.children == [a]
    root.remove_all_children()
    assert root.children == [] and a.parent is None


def test_centered_child():
    root = FlexNode(use_web_defaults=True)
    root.apply_layout(Layout(
        size=Size(width=Value(640), height=Value(480)),
        flex=Flex(justify_content=JustifyContent.CENTER, align_items=Alignment.CENTER),
    ))
    child = sized(100, 50)
    root.insert_child(child, 0)
    root.calculate_layout()
    r = child.layout
    assert r.width == 100 and r.height == 50
    assert r.x * 2 + r.width == pytest.approx(640)
    assert r.y * 2 + r.height == pytest.approx(480)


def test_column_stacks_children():
    root = sized(200, 300)
    a, b = sized(50, 40), sized(50, 60)
    root.insert_child(a, 0)
    root.insert_child(b, 1)
    root.calculate_layout()
    assert a.layout.y == 0
    assert b.layout.y == a.layout.height
    assert a.layout.width == 50


def test_stretch_fills_cross_axis():
    root = sized(200, 300)
    child = FlexNode()
    child.apply_layout(Layout(size=Size(height=Value(10))))
    root.insert_child(child, 0)
    root.calculate_layout()
    assert child.layout.width == 200


def test_flex_grow_fills_remaining():
    root = sized(200, 300)
    fixed = sized(200, 100)
    grow = FlexNode()
    grow.apply_layout(Layout(flex=Flex(flex=1.0)))
    root.insert_child(fixed, 0)
    root.insert_child(grow, 1)
    root.calculate_layout()
    assert fixed.layout.height + grow.layout.height == pytest.approx(300)


def test_ratio_size_and_border():
    root = sized(400, 200)
    root.apply_layout(Layout(spacing=Spacing(border=5)))
    child = FlexNode()
    child.apply_layout(Layout(size=Size(width=Ratio(1.0), height=Ratio(1.0))))
    root.insert_child(child, 0)
    root.calculate_layout()
    assert child.layout.x == 5 and child.layout.y == 5
    assert child.layout.width == pytest.approx(400 - 10)


def test_display_none_is_skipped():
    root = sized(100, 100)
    hidden = sized(30, 30, display=Display.NONE)
    shown = sized(30, 30)
    root.insert_child(hidden, 0)
    root.insert_child(shown, 1)
    root.calculate_layout()
    assert shown.layout.y == 0
    assert hidden.layout.width == 0


def test_row_reverse_places_from_end():
    root = sized(100, 100)
    root.apply_layout(Layout(flex=Flex(flex_direction=FlexDirection.ROW_REVERSE)))
    child = sized(20, 20)
    root.insert_child(child, 0)
    root.calculate_layout()
    assert child.layout.x + child.layout.width == 100


def test_auto_size_measures_children():
    parent = FlexNode()
    parent.insert_child(sized(30, 10), 0)
    parent.insert_child(sized(20, 15), 1)
    parent.calculate_layout()
    assert parent.layout.height == 25
    assert parent.layout.width == 30