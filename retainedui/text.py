"""A leaf element that draws a single line of text."""

from __future__ import annotations

import functools
from typing import ClassVar, Optional

import pygame

from .element import Element
from .geometry import Value
from .repository import FontRepository
from .styles import Size

_DEFAULT_FONT_SPACING_UNIT = 10


@functools.lru_cache(maxsize=None)
def _font_at(path: Optional[str], size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _advances(font: pygame.font.Font, text: str) -> list[int]:
    return [font.size(char)[0] for char in text]


class Text(Element):
    """A leaf element holding a string; its size is measured from the resolved font."""

    _accepts_children: ClassVar[bool] = False

    def __init__(self, text: str) -> None:
        super().__init__("Text")
        self._text = text
        self._measured = False

    @property
    def text(self) -> str:
        return self._text

    def _typeface(self) -> tuple[pygame.font.Font, int]:
        """The font to draw with and the spacing between glyphs."""
        props = self._cached_inheritable_props
        size = props.font_size.unwrap()
        fonts = FontRepository.shared()
        for name in props.font_family.unwrap():
            if fonts.get(name) is not None:
                path = fonts.path_of(name)
                return _font_at(str(path), size), props.letter_spacing.unwrap()
        # the built-in font ignores letter spacing and scales its own
        spacing = max(size, _DEFAULT_FONT_SPACING_UNIT) // _DEFAULT_FONT_SPACING_UNIT
        return _font_at(None, size), spacing

    def set_text(self, text: str) -> None:
        """Replace the text and resize the element to fit it."""
        self._text = text
        size = self._cached_inheritable_props.font_size.unwrap()
        font, spacing = self._typeface()
        advances = _advances(font, text)
        width = sum(advances) + spacing * max(len(advances) - 1, 0)

        layout = self.layout
        layout.size = Size(width=Value(int(width)), height=Value(int(size)))
        self.update_layout(layout)

    def render(self, surface: pygame.Surface) -> None:
        if not self._measured:
            self._measured = True
            self.set_text(self._text)

        bounds = self.bounding_rect()
        color = self._cached_inheritable_props.color.unwrap()
        font, spacing = self._typeface()
        x = bounds.x
        for char, advance in zip(self._text, _advances(font, self._text)):
            glyph = font.render(char, True, color.rgba)
            surface.blit(glyph, (int(x), int(bounds.y)))
            x += advance + spacing