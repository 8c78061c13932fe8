"""Draw framed rectangles in one of five character styles."""

from __future__ import annotations

import sys
from typing import Callable

Style = Callable[[int, int, int, int], str]

INT_MAX = 2**31 - 1
DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 5


class RectangleError(ValueError):
    """Raised when the requested rectangle dimensions are unusable."""


def _on_border(row: int, col: int, height: int, width: int) -> bool:
    return row in (1, height) or col in (1, width)


def style_00(row: int, col: int, height: int, width: int) -> str:
    """Corners 'o', horizontal edges '-', vertical edges '|'."""
    if (row in (1, height)) and (col in (1, width)):
        return "o"
    if row in (1, height):
        return "-"
    if col in (1, width):
        return "|"
    return " "


def style_01(row: int, col: int, height: int, width: int) -> str:
    """Slash corners with a '*' frame."""
    if row == 1 and col == 1:
        return "/"
    if not (height == 1 or width == 1) and row == height and col == width:
        return "/"
    if (col == width and row == 1) or (col == 1 and row == height):
        return "\\"
    if _on_border(row, col, height, width):
        return "*"
    return " "


def style_02(row: int, col: int, height: int, width: int) -> str:
    """Top corners 'A', bottom corners 'C', frame 'B'."""
    if row == 1 and col in (1, width):
        return "A"
    if row == height and col in (1, width):
        return "C"
    if _on_border(row, col, height, width):
        return "B"
    return " "


def style_03(row: int, col: int, height: int, width: int) -> str:
    """Left corners 'A', right corners 'C', frame 'B'."""
    if col == 1 and row in (1, height):
        return "A"
    if col == width and row in (1, height):
        return "C"
    if _on_border(row, col, height, width):
        return "B"
    return " "


def style_04(row: int, col: int, height: int, width: int) -> str:
    """Diagonal corners 'A' and 'C', frame 'B'."""
    if row == 1 and col == 1:
        return "A"
    if not (height == 1 or width == 1) and row == height and col == width:
        return "A"
    if (col == width and row == 1) or (col == 1 and row == height):
        return "C"
    if _on_border(row, col, height, width):
        return "B"
    return " "


STYLES: dict[str, Style] = {
    "00": style_00,
    "01": style_01,
    "02": style_02,
    "03": style_03,
    "04": style_04,
}


def render(width: int, height: int, style: Style) -> str:
    """Return the rectangle as text, each row ending in a newline."""
    if width < 0 or height < 0:
        raise RectangleError("Error: Input is negative.")
    if width == INT_MAX or height == INT_MAX:
        raise RectangleError("Error: Input too large.")
    return "".join(
        "".join(style(row, col, height, width) for col in range(1, width + 1)) + "\n"
        for row in range(1, height + 1)
    )


def main(argv: list[str] | None = None) -> int:
    """Print a 5x5 rectangle in the style named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write("Bonus: Please specifiy a printing option!\n")
        return 1
    style = STYLES.get(args[0])
    if style is None:
        sys.stdout.write("Error: Not a valid option.\n")
        return 1
    try:
        sys.stdout.write(render(DEFAULT_WIDTH, DEFAULT_HEIGHT, style))
    except RectangleError as exc:
        sys.stdout.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())