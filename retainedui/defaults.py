"""Default layouts and styles for each kind of element."""

from __future__ import annotations

from .geometry import BLACK, DARKPURPLE, GRAY, LIGHTGRAY, WHITE, Value, Vector2
from .styles import (
    BoxSizing,
    DrawableContentProps,
    Layout,
    ObjectFit,
    ObjectPositionCenter,
    Size,
    Spacing,
    Style,
    Theme,
)


def element_layout() -> Layout:
    return Layout(box_sizing=BoxSizing.CONTENT_BOX)


def root_layout(window_size: Vector2) -> Layout:
    return Layout(size=Size(width=Value(int(window_size.x)), height=Value(int(window_size.y))))


def button_layout() -> Layout:
    return Layout(spacing=Spacing(padding_horizontal=Value(10), padding_vertical=Value(5), border=2))


def image_layout(image_size: Vector2) -> Layout:
    return Layout(size=Size(width=Value(int(image_size.x)), height=Value(int(image_size.y))))


def element_styles(theme: Theme) -> Style:
    return Style()


def root_styles(theme: Theme) -> Style:
    dark = theme is Theme.DARK
    style = Style(background_color=BLACK if dark else WHITE)
    style.inheritables.color = WHITE if dark else BLACK
    style.inheritables.font_size = 16
    style.inheritables.font_family = []
    style.inheritables.letter_spacing = 0
    return style


def button_styles(theme: Theme) -> Style:
    if theme is Theme.DARK:
        return Style(background_color=DARKPURPLE)
    return Style(background_color=LIGHTGRAY, border_color=GRAY)


def image_styles() -> Style:
    return Style(
        drawable_content_props=DrawableContentProps(
            object_position=ObjectPositionCenter(), object_fit=ObjectFit.FILL
        )
    )