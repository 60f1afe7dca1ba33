"""Backtracking enumeration of word combinations that use every letter exactly once."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import letters
from models import CandidateWord, LetterCounts, ScoredSolution, SolveOptions
from ranking import quality_score
from redundancy import is_redundant, remember


@dataclass(slots=True)
class SearchContext:
    """State shared by every frame of one search."""

    candidates: list[CandidateWord]
    options: SolveOptions
    solutions: list[ScoredSolution] = field(default_factory=list)
    seen_signatures: set[str] = field(default_factory=set)
    calls: int = 0

    @property
    def cap_reached(self) -> bool:
        return len(self.solutions) >= self.options.max_results


def min_word_length(remaining: int, depth: int, options: SolveOptions) -> int:
    """Shortest word worth trying at ``depth`` before early exit may kick in."""
    if depth == 0:
        return 0
    ratios = options.depth_ratios
    ratio = ratios[min(depth, len(ratios) - 1)]
    return min(remaining, max(options.min_length_floor, math.floor(remaining * ratio)))


def find_combinations(
    candidates: list[CandidateWord],
    target: LetterCounts,
    options: SolveOptions,
) -> SearchContext:
    """Enumerate combinations of ``candidates`` whose letters equal ``target``."""
    context = SearchContext(candidates=candidates, options=options)
    _search(context, target, letters.total(target), [], 0, 0)
    return context


def _search(
    context: SearchContext,
    available: LetterCounts,
    remaining: int,
    current: list[str],
    start: int,
    depth: int,
) -> None:
    context.calls += 1

    if remaining == 0:
        context.solutions.append(ScoredSolution(score=quality_score(current), words=list(current)))
        remember(current, context.seen_signatures)
        return

    if context.cap_reached:
        return

    options = context.options
    min_len = min_word_length(remaining, depth, options)
    early_exit_after = options.max_results * options.early_exit_fraction

    for index in range(start, len(context.candidates)):
        candidate = context.candidates[index]

        if candidate.length > remaining:
            continue

        # Table is sorted longest first, so every later word is short too.
        if (
            options.early_exit
            and candidate.length < min_len
            and len(context.solutions) > early_exit_after
            and remaining > options.early_exit_min_remaining
        ):
            break

        if not letters.dominates(candidate.letters, available):
            continue

        if is_redundant(current, candidate.text, context.seen_signatures):
            continue

        current.append(candidate.text)
        _search(
            context,
            letters.subtract(available, candidate.letters),
            remaining - candidate.length,
            current,
            index,
            depth + 1,
        )
        current.pop()

        if context.cap_reached:
            return
