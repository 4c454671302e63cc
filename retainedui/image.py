"""An element that draws an image texture fitted into its box."""

from __future__ import annotations

import functools
from typing import Optional

import pygame

from .defaults import image_layout, image_styles
from .element import Element
from .geometry import Color, Rectangle, Vector2
from .repository import TextureRepository
from .styles import (
    DrawableContentProps,
    Edge,
    ObjectFit,
    ObjectPosition,
    ObjectPositionCenter,
    ObjectPositionEdge,
    ObjectPositionPosition,
    ObjectPositionRatio,
)

ALT_COLOR = Color(0x8A, 0x8A, 0x8A, 0xFF)
_ALT_MARGIN = 8
_ALT_FONT_SIZE = 16
_ICON_SIZE = 16


def _positioned(width: float, height: float, bounds: Rectangle, position: ObjectPosition) -> Rectangle:
    """Place a box of the given size inside bounds according to the object position."""
    if isinstance(position, ObjectPositionCenter):
        x = bounds.x + 0.5 * (bounds.width - width)
        y = bounds.y + 0.5 * (bounds.height - height)
    elif isinstance(position, ObjectPositionEdge):
        xs = {
            Edge.CENTER: bounds.x + 0.5 * (bounds.width - width),
            Edge.LEFT: bounds.x,
            Edge.RIGHT: bounds.x + bounds.width - width,
        }
        ys = {
            Edge.CENTER: bounds.y + 0.5 * (bounds.height - height),
            Edge.TOP: bounds.y,
            Edge.BOTTOM: bounds.y + bounds.height - height,
        }
        x = xs.get(position.x, 0.0)
        y = ys.get(position.y, 0.0)
    elif isinstance(position, ObjectPositionRatio):
        x = bounds.x + position.x * bounds.width
        y = bounds.y + position.y * bounds.height
    elif isinstance(position, ObjectPositionPosition):
        x = bounds.x + position.x
        y = bounds.y + position.y
    else:
        x = y = 0.0
    return Rectangle(x, y, width, height)


def _reposition(
    width: float, height: float, bounds: Rectangle, position: ObjectPosition, scale: float
) -> tuple[Rectangle, Rectangle]:
    placed = _positioned(width, height, bounds, position)
    dest = placed.intersection(bounds)
    if scale <= 0:
        return Rectangle(), dest
    src = Rectangle(
        (dest.x - placed.x) / scale,
        (dest.y - placed.y) / scale,
        dest.width / scale,
        dest.height / scale,
    )
    return src, dest


def fit_rectangles(
    texture_size: Vector2, bounds: Rectangle, fit: ObjectFit, position: ObjectPosition
) -> tuple[Rectangle, Rectangle]:
    """The texture region to draw and where to draw it, as (source, destination).

    The destination never leaves bounds, except with ObjectFit.FILL where it is
    bounds itself.
    """
    tw, th = texture_size.x, texture_size.y
    if tw <= 0 or th <= 0:
        raise ValueError("texture has no area")
    if fit is ObjectFit.FILL:
        return Rectangle(0.0, 0.0, tw, th), bounds
    if fit is ObjectFit.NONE:
        return _reposition(tw, th, bounds, position, 1.0)

    contain = min(bounds.width / tw, bounds.height / th)
    if fit is ObjectFit.COVER:
        scale = max(bounds.width / tw, bounds.height / th)
    elif fit is ObjectFit.CONTAIN:
        scale = contain
    else:
        if contain >= 1.0:
            return _reposition(tw, th, bounds, position, 1.0)
        scale = contain
    return _reposition(scale * tw, scale * th, bounds, position, scale)


@functools.lru_cache(maxsize=None)
def _alt_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, _ALT_FONT_SIZE)


def _alt_icon() -> pygame.Surface:
    icon = pygame.Surface((_ICON_SIZE, _ICON_SIZE), pygame.SRCALPHA)
    rgba = ALT_COLOR.rgba
    pygame.draw.rect(icon, rgba, icon.get_rect(), width=1)
    pygame.draw.circle(icon, rgba, (11, 5), 2)
    pygame.draw.polygon(icon, rgba, [(2, 13), (6, 7), (9, 11), (11, 9), (14, 13)])
    return icon


def _draw_region(surface: pygame.Surface, texture: pygame.Surface, src: Rectangle, dest: Rectangle) -> None:
    region = pygame.Rect(int(src.x), int(src.y), int(round(src.width)), int(round(src.height)))
    region = region.clip(texture.get_rect())
    width, height = int(round(dest.width)), int(round(dest.height))
    if region.width <= 0 or region.height <= 0 or width <= 0 or height <= 0:
        return
    part = texture.subsurface(region)
    scaled = pygame.transform.scale(part, (width, height))
    surface.blit(scaled, (int(dest.x), int(dest.y)))


class Image(Element):
    """A leaf element showing a texture, or an icon and alternative text if it cannot be loaded."""

    def __init__(self, src: str, alt: str = "") -> None:
        super().__init__("Image")
        self._src = src
        self._alt = alt
        self._icon: Optional[pygame.Surface] = None

        textures = TextureRepository.shared()
        self.update_style(image_styles())
        texture = textures.get(src)
        if texture is None and textures.load(src, src):
            texture = textures.get(src)
        if texture is not None:
            width, height = texture.get_size()
            self.update_layout(image_layout(Vector2(width, height)))

    @property
    def source(self) -> str:
        return self._src

    @source.setter
    def source(self, src: str) -> None:
        self._src = src

    @property
    def alt(self) -> str:
        return self._alt

    @alt.setter
    def alt(self, alt: str) -> None:
        self._alt = alt

    def _on_child_appended(self, child: Element) -> None:
        raise TypeError("[Image] Image element can only be used as leaf node.")

    def _draw_alt(self, surface: pygame.Surface) -> None:
        if self._icon is None:
            self._icon = _alt_icon()
        bounds = self.bounding_rect()
        surface.blit(self._icon, (int(bounds.x), int(bounds.y)))
        if self._alt:
            label = _alt_font().render(self._alt, True, ALT_COLOR.rgba)
            surface.blit(label, (int(bounds.x) + self._icon.get_width() + _ALT_MARGIN, int(bounds.y)))

    def render(self, surface: pygame.Surface) -> None:
        texture = TextureRepository.shared().get(self._src)
        if texture is None:
            self._draw_alt(surface)
            return

        bounds = self.bounding_rect()
        tw, th = texture.get_size()
        if tw == bounds.width and th == bounds.height:
            surface.blit(texture, (int(bounds.x), int(bounds.y)))
            return
        if tw == 0 or th == 0:
            return

        props = self._style.drawable_content_props or DrawableContentProps()
        src, dest = fit_rectangles(Vector2(tw, th), bounds, props.object_fit, props.object_position)
        _draw_region(surface, texture, src, dest)