import pytest

from piscine_rush.skyscraper import (
    PuzzleError,
    count_visible,
    format_grid,
    main,
    parse_clues,
    solve,
)

SIZE = 4
CLASSIC = "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2"


def _parse_grid(output):
    digits = [int(ch) for ch in output if ch.isdigit()]
    assert len(digits) == SIZE * SIZE
    assert all(1 <= d <= SIZE for d in digits)
    return [digits[i * SIZE:(i + 1) * SIZE] for i in range(SIZE)]


def _is_latin(grid):
    rows_ok = all(sorted(row) == [1, 2, 3, 4] for row in grid)
    cols_ok = all(sorted(col) == [1, 2, 3, 4] for col in zip(*grid))
    return rows_ok and cols_ok


def _satisfies(text, grid):
    clues = [int(tok) for tok in text.split(" ")]
    cols = [list(c) for c in zip(*grid)]
    lines = cols + [c[::-1] for c in cols] + [list(r) for r in grid] + [r[::-1] for r in grid]
    return [count_visible(line) for line in lines] == clues


@pytest.mark.parametrize(
    "line,expected",
    [([1, 2, 3, 4], 4), ([4, 3, 2, 1], 1), ([2, 1, 4, 3], 2), ([2, 3, 4, 1], 3), ([3, 2, 1, 4], 2)],
)
def test_count_visible(line, expected):
    assert count_visible(line) == expected


def test_parse_clues_valid():
    assert parse_clues(CLASSIC) == [4, 3, 2, 1, 1, 2, 2, 2, 4, 3, 2, 1, 1, 2, 2, 2]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2",
        "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2 ",
        "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 5",
        "0 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2",
        "4,3,2,1,1,2,2,2,4,3,2,1,1,2,2,2",
        "a 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2",
        "4  3 2 1 1 2 2 2 4 3 2 1 1 2 2 2",
    ],
)
def test_parse_clues_rejects(text):
    with pytest.raises(PuzzleError):
        parse_clues(text)


def test_solve_classic():
    grid = solve(parse_clues(CLASSIC))
    assert grid == [[1, 2, 3, 4], [2, 3, 4, 1], [3, 4, 1, 2], [4, 1, 2, 3]]


@pytest.mark.parametrize(
    "text",
    [
        "4 4 4 4 4 4 4 4 4 4 4 4 4 4 4 4",
        "1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1",
        "4 3 2 1 4 3 2 1 4 3 2 1 4 3 2 1",
    ],
)
def test_solve_unsolvable(text):
    with pytest.raises(PuzzleError):
        solve(parse_clues(text))


def test_solve_wrong_clue_count():
    with pytest.raises(PuzzleError):
        solve([1, 2, 3])


def test_format_grid_roundtrip():
    grid = solve(parse_clues(CLASSIC))
    text = format_grid(grid)
    assert text.count("\n") == SIZE
    assert all(len(line.split(" ")) == SIZE for line in text.splitlines())
    assert _parse_grid(text) == grid


def test_main_valid(capsys):
    assert main([CLASSIC]) == 0
    out = capsys.readouterr().out
    grid = _parse_grid(out)
    assert _is_latin(grid)
    assert _satisfies(CLASSIC, grid)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        [CLASSIC, CLASSIC],
        ["4 3 2 1"],
        ["4 4 4 4 4 4 4 4 4 4 4 4 4 4 4 4"],
        ["hello world"],
    ],
)
def test_main_error(capsys, argv):
    assert main(argv) == 1
    assert capsys.readouterr().out.strip().lower() == "error"