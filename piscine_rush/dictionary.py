"""Number-word dictionaries: parsing the ``number: word`` format and lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

POWERS_OF_THOUSAND = (1000, 1000**2, 1000**3)

_INT_RE = re.compile(r"[ \t\n]*([+-]*)([0-9]*)")


class DictError(ValueError):
    """Raised for a malformed dictionary or a missing entry."""


def _leading_int(text: str) -> int:
    """Read a leading integer the way the dictionary keys are read."""
    match = _INT_RE.match(text)
    signs, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if signs.count("-") % 2:
        value = -value
    return (value + 2**31) % 2**32 - 2**31


def _is_known(n: int) -> bool:
    return 0 <= n < 20 or (20 <= n < 100 and n % 10 == 0) or n in POWERS_OF_THOUSAND


@dataclass
class Vocabulary:
    """Words for 0-19, the tens and the powers of one thousand."""

    entries: dict[int, str] = field(default_factory=dict)

    def add(self, number: str | int, word: str) -> None:
        """Store ``word`` for ``number``; numbers outside the known set are ignored."""
        n = _leading_int(number) if isinstance(number, str) else int(number)
        if _is_known(n):
            self.entries[n] = word

    def __getitem__(self, n: int) -> str:
        try:
            return self.entries[n]
        except KeyError:
            raise DictError(f"no word for {n}") from None

    def __contains__(self, n: object) -> bool:
        return n in self.entries


def parse_dictionary(text: str) -> Vocabulary:
    """Parse dictionary text; spaces are dropped and blank lines skipped.

    Only lines ending in a newline are taken; a line with a number but no
    word, or a word but no number, raises DictError.
    """
    vocab = Vocabulary()
    number: list[str] = []
    word: list[str] = []
    in_word = False
    for ch in text:
        if ch == " ":
            continue
        if ch == ":":
            if in_word:
                word.clear()
            in_word = True
        elif ch == "\n":
            num_text, word_text = "".join(number), "".join(word)
            number.clear()
            word.clear()
            in_word = False
            if not num_text and not word_text:
                continue
            if not num_text or not word_text:
                raise DictError("Dict Error")
            vocab.add(num_text, word_text)
        else:
            (word if in_word else number).append(ch)
    return vocab


def load_dictionary(path: str | PathLike[str]) -> Vocabulary:
    """Read and parse the dictionary file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DictError(f"cannot read dictionary {path}") from exc
    return parse_dictionary(text)