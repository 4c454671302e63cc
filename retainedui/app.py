"""The demo application: a bordered image box centred in a window."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from .element import Button, View, append_child
from .geometry import BROWN, WHITE, Ratio, Value, Vector2
from .image import Image
from .repository import FontRepository, clear_repositories, init_repositories
from .root import Root
from .styles import (
    Alignment,
    Flex,
    JustifyContent,
    ObjectFit,
    ObjectPositionCenter,
    Size,
    Spacing,
)
from .text import Text

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
TARGET_FPS = 60
FONT_FILE = "Roboto-Regular.ttf"
IMAGE_FILE = "assets/images/cat.png"


def build_demo(window_size: Vector2) -> Root:
    """Build and finalize the demo element tree for a window of the given size."""
    root = Root(window_size)

    view = View()
    append_child(root, view)
    layout = view.layout
    layout.flex = Flex(
        justify_content=JustifyContent.CENTER, align_items=Alignment.CENTER, flex=1.0
    )
    view.update_layout(layout)

    # the button is built but not placed in the tree
    button = Button()
    style = button.style
    style.inheritables.font_size = 24
    style.inheritables.color = BROWN
    style.inheritables.font_family = ["roboto"]
    button.update_style(style)
    append_child(button, Text("This is a button"))

    FontRepository.shared().load("roboto", FONT_FILE)

    container = View()
    append_child(view, container)
    layout = container.layout
    layout.spacing = Spacing(border=3)
    layout.size = Size(width=Value(480), height=Value(300))
    container.update_layout(layout)
    style = container.style
    style.border_color = WHITE
    container.update_style(style)

    image = Image(IMAGE_FILE, "cat")
    append_child(container, image)
    style = image.style
    props = style.drawable_content_props
    props.object_fit = ObjectFit.SCALE_DOWN
    props.object_position = ObjectPositionCenter()
    image.update_style(style)
    layout = image.layout
    layout.size = Size(width=Ratio(1.0), height=Ratio(1.0))
    image.update_layout(layout)

    root.finalize()
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="retainedui", description="Show the retained UI demo window."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Retained UI with pygame")
        clock = pygame.time.Clock()
        repositories = init_repositories()
        try:
            root = build_demo(Vector2(WINDOW_WIDTH, WINDOW_HEIGHT))
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                root.update()
                root.render(screen)
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            clear_repositories(repositories)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())