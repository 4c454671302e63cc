# retainedui

A small retained-mode user interface toolkit for pygame.

You build a tree of elements once. The tree has a `Root` at the top, with
`View`, `Row`, `Stack`, `Button`, `Text` and `Image` elements below it. Each
element is described by a `Layout` and a `Style`. The toolkit lays the tree out
with its own flexbox engine and draws it onto a pygame surface. It recomputes
the layout and the inherited styles only when they are marked out of date.

## Modules

- `retainedui.geometry`: `Color`, `Vector2`, `Rectangle` (with `contains` and
  `intersection`), `Line`, `Edges`, the dimension values `Value`, `Ratio` and
  `Auto`, `clamp_ratio`, and `edge_lines`. `edge_lines` gives the lines that
  draw each edge of a rectangle separately.
- `retainedui.styles`: the layout descriptions `Layout`, `Size`, `Spacing`,
  `Flex` and `Position`, and the style descriptions `Style`, `BorderColors` and
  `DrawableContentProps`. It also holds the enums (`Theme`, `Display`,
  `FlexDirection`, `JustifyContent`, `Alignment`, `ObjectFit`, `Edge`, and
  others) and the inheritable properties `MaybeInherited` and `Inheritables`.
- `retainedui.flexlayout`: `FlexNode`, the layout engine behind every element.
  It handles direction, justification, alignment, grow and shrink, basis,
  gaps, margins, paddings, borders, sizes, relative and absolute positions, and
  `display: none`.
- `retainedui.defaults`: the default layouts and styles for each kind of
  element, for the dark and the light theme.
- `retainedui.repository`: `FontRepository` and `TextureRepository`. Each one
  is a shared store of loaded fonts or images, keyed by handle and reached
  through `shared()`. The module also has `init_repositories` and
  `clear_repositories`.
- `retainedui.element`: `Element` and the containers `View`, `Row`, `Stack` (a
  column) and `Button`, plus `append_child` and `append_children`.
- `retainedui.text`: `Text`, a single line of text. It uses the first font in
  the inherited `font_family` that is loaded in `FontRepository`, and falls
  back to pygame's built-in font if none is.
- `retainedui.image`: `Image` and `fit_rectangles`. `fit_rectangles` computes
  the source and destination rectangles for `object-fit` (fill, contain,
  cover, none, scale-down) and `object-position` (centre, edges, ratios,
  absolute offsets). If the image file cannot be loaded, the element draws an
  icon and its alternative text instead.
- `retainedui.root`: `Root`. It provides `finalize()`, `update()` and
  `render(surface)`.
- `retainedui.events`: the mouse and keyboard event payloads (`MouseDown`,
  `Click`, `MouseMove`, `MouseWheel`, `KeyDown`, and others). `Event` wraps one
  payload and provides `name`, `is_of_type`, `unwrap` and `get_if`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Trying it out

```
retainedui-demo
```

This opens a 640×480 window. The window holds a white-bordered 480×300
container, centred, with the image `assets/images/cat.png` scaled down inside
it. The image path is relative to the working directory. If the file is
missing, the container shows an icon and the text "cat" instead. Close the
window or press Escape to quit.

## Using the library

```python
import pygame

from retainedui.element import View, append_child
from retainedui.geometry import Value, Vector2
from retainedui.image import Image
from retainedui.root import Root
from retainedui.styles import Alignment, Flex, JustifyContent, ObjectFit, Size, Spacing

pygame.init()
surface = pygame.display.set_mode((640, 480))

root = Root(Vector2(640, 480))
view = View()
append_child(root, view)

layout = view.layout
layout.flex = Flex(justify_content=JustifyContent.CENTER,
                   align_items=Alignment.CENTER, flex=1.0)
view.update_layout(layout)

frame = View()
append_child(view, frame)
layout = frame.layout
layout.spacing = Spacing(border=3)
layout.size = Size(width=Value(480), height=Value(300))
frame.update_layout(layout)

picture = Image("assets/images/cat.png", "cat")
append_child(frame, picture)
style = picture.style
style.drawable_content_props.object_fit = ObjectFit.SCALE_DOWN
picture.update_style(style)

root.finalize()
running = True
while running:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
    root.update()
    root.render(surface)
    pygame.display.flip()
pygame.quit()
```

Change an element only through `update_layout` and `update_style`. The
`layout` and `style` properties return copies, so edit a copy and pass it back.
These two calls mark the layout or the inherited styles as out of date, which
tells `Root.update()` to recompute them. `Root.render()` raises
`RenderStateError` in three cases: the root has not been finalized, the layout
is out of date, or the inherited styles are out of date.

`Text` and `Image` are leaf elements. Appending a child to one of them raises
`TypeError`. A `Text` element measures itself and sets its own size the first
time it is rendered, or whenever `set_text` is called.

## What it does not do

- Input events are not dispatched. `retainedui.events` defines the event
  payloads, but nothing turns pygame input into them or delivers them to
  elements. A `Button` is styled like a button but does not react to clicks.
- Themes cannot be switched through the public API. Every tree uses the dark
  theme. The light-theme defaults exist in `retainedui.defaults`, but no public
  call applies them to a tree.