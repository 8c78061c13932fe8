"""Solve the 4x4 skyscraper puzzle from its sixteen edge clues."""

from __future__ import annotations

import sys

SIZE = 4

Grid = list[list[int]]


class PuzzleError(ValueError):
    """Raised for malformed clues or a puzzle without a solution."""


def parse_clues(text: str) -> list[int]:
    """Parse sixteen single-digit clues (1..4) separated by single spaces."""
    if len(text) != SIZE * 8 - 1:
        raise PuzzleError("expected sixteen space-separated clues")
    clues = []
    for pos, ch in enumerate(text):
        if pos % 2:
            if ch != " ":
                raise PuzzleError(f"expected a space at position {pos}")
            continue
        if ch not in "0123456789":
            raise PuzzleError(f"expected a digit at position {pos}")
        value = int(ch)
        if not 1 <= value <= SIZE:
            raise PuzzleError(f"clue out of range at position {pos}")
        clues.append(value)
    return clues


def count_visible(line: list[int]) -> int:
    """Count the buildings seen from the start of the line."""
    if not line:
        return 0
    count = 1
    tallest = line[0]
    for height in line[1:]:
        if height > tallest:
            count += 1
            tallest = height
    return count


def _views(grid: Grid):
    """Yield every line in clue order: top, bottom, left, right."""
    columns = [list(col) for col in zip(*grid)]
    yield from columns
    yield from (col[::-1] for col in columns)
    yield from (list(row) for row in grid)
    yield from (row[::-1] for row in grid)


def _satisfies(grid: Grid, clues: list[int]) -> bool:
    return all(count_visible(line) == clue for line, clue in zip(_views(grid), clues))


def solve(clues: list[int]) -> Grid:
    """Return the first grid, in search order, that satisfies all clues."""
    if len(clues) != SIZE * 4:
        raise PuzzleError("expected sixteen clues")
    grid = [[0] * SIZE for _ in range(SIZE)]

    def fill(cell: int) -> bool:
        if cell == SIZE * SIZE:
            return _satisfies(grid, clues)
        row, col = divmod(cell, SIZE)
        for value in range(1, SIZE + 1):
            if value in grid[row] or any(r[col] == value for r in grid):
                continue
            grid[row][col] = value
            if fill(cell + 1):
                return True
            grid[row][col] = 0
        return False

    if not fill(0):
        raise PuzzleError("no solution")
    return grid


def format_grid(grid: Grid) -> str:
    """Render the grid as space-separated rows, each ending in a newline."""
    return "".join(" ".join(str(v) for v in row) + "\n" for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Solve the puzzle given as the single argument and print the grid."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write("Error\n")
        return 1
    try:
        grid = solve(parse_clues(args[0]))
    except PuzzleError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write(format_grid(grid))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())