from retainedui.geometry import Rectangle, Vector2
from retainedui.image import fit_rectangles
from retainedui.styles import Edge, ObjectFit, ObjectPositionCenter, ObjectPositionEdge

TEXTURE = Vector2(100, 50)


def test_fill_stretches_to_bounds():
    bounds = Rectangle(10, 20, 200, 100)
    src, dest = fit_rectangles(TEXTURE, bounds, ObjectFit.FILL, ObjectPositionCenter())
    assert dest == bounds
    assert src == Rectangle(0, 0, 100, 50)


def test_contain_keeps_whole_texture_centered():
    bounds = Rectangle(10, 20, 200, 200)
    src, dest = fit_rectangles(TEXTURE, bounds, ObjectFit.CONTAIN, ObjectPositionCenter())
    assert dest == Rectangle(10, 70, 200, 100)
    assert src == Rectangle(0, 0, 100, 50)


def test_cover_crops_texture():
    bounds = Rectangle(10, 20, 200, 200)
    src, dest = fit_rectangles(TEXTURE, bounds, ObjectFit.COVER, ObjectPositionCenter())
    assert dest == Rectangle(10, 20, 200, 200)
    assert src == Rectangle(25, 0, 50, 50)


def test_none_keeps_natural_size_centered():
    bounds = Rectangle(10, 20, 200, 200)
    src, dest = fit_rectangles(TEXTURE, bounds, ObjectFit.NONE, ObjectPositionCenter())
    assert dest == Rectangle(60, 95, 100, 50)
    assert src == Rectangle(0, 0, 100, 50)


def test_scale_down_without_shrinking_behaves_like_none():
    bounds = Rectangle(10, 20, 200, 200)
    result = fit_rectangles(TEXTURE, bounds, ObjectFit.SCALE_DOWN, ObjectPositionCenter())
    expected = fit_rectangles(TEXTURE, bounds, ObjectFit.NONE, ObjectPositionCenter())
    assert tuple(result) == tuple(expected)


def test_edge_position_top_left():
    bounds = Rectangle(10, 20, 200, 200)
    src, dest = fit_rectangles(
        TEXTURE, bounds, ObjectFit.NONE, ObjectPositionEdge(Edge.LEFT, Edge.TOP)
    )
    assert dest == Rectangle(10, 20, 100, 50)
    assert src == Rectangle(0, 0, 100, 50)