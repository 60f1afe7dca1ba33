"""Signatures used to skip branches that rebuild an already found word set."""

from __future__ import annotations

from typing import Sequence

SUBSTANTIAL_LENGTH = 4
SIGNATURE_DELIMITER = "|"


def signature(words: Sequence[str]) -> str:
    """
    Canonical key for the substantial words (4+ letters) of a solution.

    Returns an empty string when no word qualifies; an empty signature never
    marks anything as redundant.
    """
    substantial = sorted(word for word in words if len(word) >= SUBSTANTIAL_LENGTH)
    return SIGNATURE_DELIMITER.join(substantial)


def is_redundant(current: Sequence[str], candidate: str, seen: set[str]) -> bool:
    """True when adding ``candidate`` reproduces a word set already emitted."""
    sig = signature([*current, candidate])
    if not sig:
        return False
    return sig in seen


def remember(words: Sequence[str], seen: set[str]) -> None:
    sig = signature(words)
    if sig:
        seen.add(sig)
