"""Fixed-size letter counts over the 26-letter ASCII alphabet."""

from __future__ import annotations

from string import ascii_lowercase

from models import LetterCounts

ALPHABET_SIZE = 26
_ORD_A = ord("a")
EMPTY: LetterCounts = (0,) * ALPHABET_SIZE


def from_text(text: str) -> LetterCounts:
    """Count ASCII letters case-insensitively; everything else is ignored."""
    counts = [0] * ALPHABET_SIZE
    for char in text:
        if char.isascii() and char.isalpha():
            counts[ord(char.lower()) - _ORD_A] += 1
    return tuple(counts)


def dominates(need: LetterCounts, have: LetterCounts) -> bool:
    """True when every letter in ``need`` is available in ``have``."""
    return all(n <= h for n, h in zip(need, have))


def subtract(have: LetterCounts, need: LetterCounts) -> LetterCounts:
    assert dominates(need, have), "subtracting letters that are not available"
    return tuple(h - n for h, n in zip(have, need))


def total(freq: LetterCounts) -> int:
    return sum(freq)


def is_empty(freq: LetterCounts) -> bool:
    return not any(freq)


def sorted_letters(freq: LetterCounts) -> str:
    """Expand counts back into an alphabetically sorted letter string."""
    return "".join(letter * count for letter, count in zip(ascii_lowercase, freq))
