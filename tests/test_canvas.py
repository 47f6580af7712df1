"""Tests for the character-cell drawing surface."""

from proctop.canvas import Canvas


def test_new_canvas_is_blank():
    """A fresh canvas is all spaces."""
    canvas = Canvas(2, 4)
    assert canvas.lines() == ["    ", "    "]


def test_put_writes_at_position():
    """Text lands at the requested row and column."""
    canvas = Canvas(2, 8)
    canvas.put(1, 2, "abc", "bold")
    assert canvas.lines()[1] == "  abc   "
    assert canvas.style_at(1, 2) == "bold"
    assert canvas.style_at(1, 1) is None


def test_put_clips_instead_of_raising():
    """Writes outside the grid are dropped."""
    canvas = Canvas(2, 5)
    canvas.put(0, 3, "overflow")
    canvas.put(5, 0, "nowhere")
    canvas.put(1, -2, "xyz")
    assert canvas.lines() == ["   ov", "z    "]


def test_box_draws_border():
    """box() outlines the grid."""
    canvas = Canvas(3, 4)
    canvas.box()
    assert canvas.lines() == ["┌──┐", "│  │", "└──┘"]


def test_box_on_tiny_canvas_is_noop():
    """A one-row canvas has no room for a border."""
    canvas = Canvas(1, 10)
    canvas.box()
    assert canvas.lines() == [" " * 10]


def test_clear_and_resize():
    """clear() blanks the grid and resize() changes its size."""
    canvas = Canvas(2, 4)
    canvas.put(0, 0, "data")
    canvas.clear()
    assert canvas.lines() == ["    ", "    "]

    canvas.resize(3, 6)
    assert (canvas.height, canvas.width) == (3, 6)
    assert canvas.lines() == ["      "] * 3


def test_render_merges_styled_runs():
    """render() produces rich Text with one span per styled run."""
    canvas = Canvas(2, 6)
    canvas.put(0, 1, "ab", "green")
    canvas.put(1, 0, "xy", "reverse")

    text = canvas.render()

    assert text.plain == " ab   \nxy    "
    styles = [(span.start, span.end, str(span.style)) for span in text.spans]
    assert (1, 3, "green") in styles
    assert (7, 9, "reverse") in styles
