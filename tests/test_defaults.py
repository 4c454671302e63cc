from retainedui import defaults
from retainedui.geometry import BLACK, DARKPURPLE, GRAY, LIGHTGRAY, WHITE, Value, Vector2
from retainedui.styles import BoxSizing, ObjectFit, ObjectPositionCenter, Theme


def test_element_layout_is_content_box():
    assert defaults.element_layout().box_sizing is BoxSizing.CONTENT_BOX


def test_root_layout_uses_window_size():
    layout = defaults.root_layout(Vector2(640, 480))
    assert layout.size.width == Value(640)
    assert layout.size.height == Value(480)


def test_button_layout():
    spacing = defaults.button_layout().spacing
    assert spacing.padding_horizontal == Value(10)
    assert spacing.padding_vertical == Value(5)
    assert spacing.border == 2


def test_image_layout_truncates():
    layout = defaults.image_layout(Vector2(32.7, 16.2))
    assert layout.size.width == Value(32) and layout.size.height == Value(16)


def test_root_styles_by_theme():
    dark = defaults.root_styles(Theme.DARK)
    light = defaults.root_styles(Theme.LIGHT)
    assert dark.background_color == BLACK and dark.inheritables.color == WHITE
    assert light.background_color == WHITE and light.inheritables.color == BLACK
    assert dark.inheritables.font_size == 16
    assert dark.inheritables.font_family.unwrap() == []


def test_button_styles_by_theme():
    assert defaults.button_styles(Theme.DARK).background_color == DARKPURPLE
    light = defaults.button_styles(Theme.LIGHT)
    assert light.background_color == LIGHTGRAY and light.border_color == GRAY


def test_element_and_image_styles():
    assert defaults.element_styles(Theme.DARK).inheritables.color.is_inherited()
    props = defaults.image_styles().drawable_content_props
    assert props.object_fit is ObjectFit.FILL
    assert props.object_position == ObjectPositionCenter()