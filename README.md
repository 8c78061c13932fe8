# piscine-rush

Three small command-line puzzles in one package.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## rush-00: rectangles

Draws a 5 by 5 rectangle in one of five border styles, chosen by name
(`00`, `01`, `02`, `03` or `04`):

```
$ rush-00 00
o---o
|   |
|   |
|   |
o---o
```

Without exactly one argument it prints `Bonus: Please specifiy a printing
option!` and exits with status 1; an unknown style prints
`Error: Not a valid option.` and exits with status 1.

From Python, `piscine_rush.rectangle.render(width, height, style)` returns the
drawing for any size, each row ending in a newline, using one of `style_00` to
`style_04` (also available by name in the `STYLES` mapping). Negative or
too-large sizes raise `RectangleError`.

## rush-01: skyscraper puzzle

Solves a 4x4 skyscraper puzzle. Give the sixteen clues, each between 1 and 4,
separated by single spaces, in this order: the four columns seen from the top,
the four columns seen from the bottom, the four rows seen from the left, the
four rows seen from the right.

```
$ rush-01 "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2"
1 2 3 4
2 3 4 1
3 4 1 2
4 1 2 3
```

The solver tries values in increasing order, cell by cell, and prints the
first grid that satisfies every clue. Malformed input, or clues with no
solution, print `Error` and exit with status 1.

From Python, in `piscine_rush.skyscraper`: `parse_clues(text)` turns the clue
string into a list, `solve(clues)` returns the grid as a list of rows,
`format_grid(grid)` renders it and `count_visible(line)` counts the buildings
seen from the start of one line. Errors are raised as `PuzzleError`.

## rush-02: numbers in words

Spells out a non-negative number using a dictionary file whose lines have the
form `number: word`. Spaces are ignored, blank lines are skipped, and only
entries for 0 to 19, the tens, and 1000, 1000000 and 1000000000 are used.
For example, a dictionary holding

```
0: zero
1: one
2: two
3: three
4: four
10: ten
20: twenty
30: thirty
40: forty
100: hundred
1000: thousand
```

gives:

```
$ rush-02 my_numbers.dict 42
forty two
$ rush-02 my_numbers.dict 1234
one thousand two hundred thirty four
```

With one argument the dictionary `numbers.dict` in the current directory is
used. An argument holding anything other than digits and `-` prints `Error`
to standard error and exits with status 1. The argument is read as a 32-bit
signed integer; a negative number prints `Error` and exits with status 0, and
`0` prints `zero`. A malformed dictionary line, an unreadable dictionary, or a
number needing a word the dictionary lacks prints `Dict Error` to standard
error and exits with status 1.

From Python, in `piscine_rush.dictionary`: `load_dictionary(path)` or
`parse_dictionary(text)` give a `Vocabulary` (raising `DictError` on a bad
line), and `Vocabulary.add(number, word)` adds an entry. In
`piscine_rush.numwords`: `number_to_words(n, vocab)` spells out a number,
`atoi(text)` reads the leading integer and `is_valid_number(text)` checks an
argument.

## What the package does not do

It ships no `numbers.dict`; rush-02 needs a dictionary file supplied by you.
Numbers are limited to the 32-bit signed range, so the largest scale word
used is the one for 1000000000.