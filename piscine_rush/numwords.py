"""Spell out non-negative integers in words using a number dictionary."""

from __future__ import annotations

import re
import sys

from .dictionary import DictError, Vocabulary, load_dictionary

DEFAULT_DICTIONARY = "numbers.dict"

_INT_RE = re.compile(r"[ \t\n]*([+-]*)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading integer as a 32-bit signed int.

    Leading spaces, tabs and newlines are skipped; any run of '+' and '-'
    follows, an odd number of '-' making the result negative.
    """
    match = _INT_RE.match(text)
    signs, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if signs.count("-") % 2:
        value = -value
    return (value + 2**31) % 2**32 - 2**31


def is_valid_number(text: str) -> bool:
    """True when ``text`` holds only digits and '-' characters."""
    return all(ch in "0123456789-" for ch in text)


def _chunk_words(value: int, scale: int, vocab: Vocabulary) -> list[str]:
    hundreds, tens, ones = value // 100, value // 10 % 10, value % 10
    words: list[str] = []
    if hundreds:
        words += [vocab[hundreds], "hundred"]
    if tens > 1:
        words.append(vocab[tens * 10])
        if ones:
            words.append(vocab[ones])
    elif tens == 1:
        words.append(vocab[10 + ones])
    elif ones:
        words.append(vocab[ones])
    if scale:
        words.append(vocab[1000**scale])
    return words


def number_to_words(n: int, vocab: Vocabulary) -> str:
    """Return ``n`` in words; raises ValueError for negative numbers."""
    if n < 0:
        raise ValueError("Error")
    if n == 0:
        return "zero"
    chunks: list[list[str]] = []
    scale = 0
    while n > 0:
        n, value = divmod(n, 1000)
        if value:
            chunks.append(_chunk_words(value, scale, vocab))
        scale += 1
    return " ".join(word for chunk in reversed(chunks) for word in chunk)


def main(argv: list[str] | None = None) -> int:
    """Usage: [dictionary] number. Prints the number in words."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 2:
        dict_path, numstring = args
    elif len(args) == 1:
        dict_path, numstring = DEFAULT_DICTIONARY, args[0]
    else:
        return 1
    if not is_valid_number(numstring):
        sys.stderr.write("Error\n")
        return 1
    n = atoi(numstring)
    try:
        vocab = load_dictionary(dict_path)
        text = number_to_words(n, vocab)
    except DictError:
        sys.stderr.write("Dict Error\n")
        return 1
    except ValueError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())