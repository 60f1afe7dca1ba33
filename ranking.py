"""Quality scoring, ordering, and de-duplication of found combinations."""

from __future__ import annotations

from typing import Iterable, Sequence

from models import RankedPhrase, ScoredSolution

WORD_COUNT_WEIGHT = 1000
AVERAGE_LENGTH_WEIGHT = 100
VARIANCE_WEIGHT = 10


def quality_score(words: Sequence[str]) -> float:
    """
    Score a word sequence; higher is better.

    The word-count penalty dominates, so a phrase with fewer words always
    ranks above one with more. Longer average words score higher, and uneven
    word lengths cost a little.
    """
    if not words:
        return 0.0

    lengths = [len(word) for word in words]
    count = len(lengths)
    mean = sum(lengths) / count

    score = -WORD_COUNT_WEIGHT * count + AVERAGE_LENGTH_WEIGHT * mean
    if count > 1:
        score -= VARIANCE_WEIGHT * sum(abs(length - mean) for length in lengths)
    return score


def rank_solutions(solutions: Iterable[ScoredSolution], limit: int) -> list[RankedPhrase]:
    """Best-first unique phrases, truncated to ``limit``."""
    ordered = sorted(solutions, key=lambda solution: solution.score, reverse=True)

    ranked: list[RankedPhrase] = []
    seen: set[str] = set()
    for solution in ordered:
        if len(ranked) >= limit:
            break
        phrase = " ".join(solution.words)
        if phrase in seen:
            continue
        seen.add(phrase)
        ranked.append(RankedPhrase(phrase=phrase, score=solution.score, word_count=len(solution.words)))
    return ranked
