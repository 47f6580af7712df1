"""Character-cell drawing surface for the dashboard panels."""

from rich.text import Text

_BOX = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
}


class Canvas:
    """
    Fixed-size grid of styled character cells.

    Every write is clipped to the grid, so a surface that is too small for
    the layout loses columns instead of raising.
    """

    def __init__(self, height: int, width: int) -> None:
        self._height = 0
        self._width = 0
        self._cells: list[list[tuple[str, str | None]]] = []
        self.resize(height, width)

    @property
    def height(self) -> int:
        """Get the number of rows."""
        return self._height

    @property
    def width(self) -> int:
        """Get the number of columns."""
        return self._width

    def resize(self, height: int, width: int) -> None:
        """Change the grid size; the contents are cleared."""
        self._height = max(0, height)
        self._width = max(0, width)
        self.clear()

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [[(" ", None)] * self._width for _ in range(self._height)]

    def put(self, row: int, col: int, text: str, style: str | None = None) -> None:
        """Write ``text`` starting at (row, col), clipped to the grid."""
        if not 0 <= row < self._height:
            return
        line = self._cells[row]
        for offset, char in enumerate(text):
            x = col + offset
            if x >= self._width:
                break
            if x >= 0:
                line[x] = (char, style)

    def box(self, style: str | None = None) -> None:
        """Draw a single-line border around the edge of the grid."""
        if self._height < 2 or self._width < 2:
            return
        inner = self._width - 2
        self.put(0, 0, _BOX["top_left"] + _BOX["horizontal"] * inner + _BOX["top_right"], style)
        for row in range(1, self._height - 1):
            self.put(row, 0, _BOX["vertical"], style)
            self.put(row, self._width - 1, _BOX["vertical"], style)
        self.put(
            self._height - 1,
            0,
            _BOX["bottom_left"] + _BOX["horizontal"] * inner + _BOX["bottom_right"],
            style,
        )

    def lines(self) -> list[str]:
        """Get the plain text of each row."""
        return ["".join(char for char, _ in line) for line in self._cells]

    def style_at(self, row: int, col: int) -> str | None:
        """Get the style of a single cell."""
        return self._cells[row][col][1]

    def render(self) -> Text:
        """Build a rich Text with runs of equally styled cells merged."""
        text = Text(no_wrap=True, overflow="crop")
        for index, line in enumerate(self._cells):
            if index:
                text.append("\n")
            run: list[str] = []
            run_style: str | None = None
            for char, style in line:
                if style != run_style and run:
                    text.append("".join(run), run_style)
                    run = []
                run_style = style
                run.append(char)
            if run:
                text.append("".join(run), run_style)
        return text
