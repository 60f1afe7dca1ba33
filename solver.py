"""Multi-word anagram solve engine."""

from __future__ import annotations

import logging
import time
from typing import Iterable

import letters
from dictionary import ProgressCallback, build_candidates, read_wordlist
from models import EmptyInputError, SolveOptions, SolveReport, WordListLoadResult
from ranking import rank_solutions
from search import find_combinations

logger = logging.getLogger(__name__)


class AnagramSolver:
    """Find phrases made of wordlist words that use exactly the letters of an input phrase."""

    def __init__(self, words: Iterable[str] | None = None) -> None:
        self.words: list[str] = list(words) if words is not None else []
        self.wordlist_path: str = ""

    def load_wordlist(
        self,
        wordlist_path: str,
        options: SolveOptions | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> WordListLoadResult:
        """Replace the word source with the contents of a wordlist file."""
        words, result = read_wordlist(wordlist_path, options or SolveOptions(), progress_callback)
        self.words = words
        self.wordlist_path = result.wordlist_path
        return result

    def solve(self, phrase: str, options: SolveOptions | None = None) -> SolveReport:
        """
        Rank every combination of words that spells out ``phrase``.

        Raises EmptyInputError when the phrase has no letters and
        DictionaryEmptyError when the word source has no usable words.
        """
        options = options or SolveOptions()
        target = letters.from_text(phrase)
        letter_count = letters.total(target)
        if letter_count == 0:
            raise EmptyInputError("Phrase contains no letters to rearrange.")

        started = time.perf_counter()
        candidates = build_candidates(self.words, phrase)
        logger.info("Solving %r: %d letters, %d candidate words", phrase, letter_count, len(candidates))

        context = find_combinations(candidates, target, options)
        results = rank_solutions(context.solutions, options.result_limit)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if context.cap_reached:
            logger.info("Result cap of %d reached; output is truncated", options.max_results)
        logger.info(
            "Search finished in %.1f ms: %d calls, %d solutions, %d unique phrases, best=%r",
            elapsed_ms,
            context.calls,
            len(context.solutions),
            len(results),
            results[0].phrase if results else None,
        )

        return SolveReport(
            phrase=phrase,
            letter_count=letter_count,
            candidate_count=len(candidates),
            solutions_found=len(context.solutions),
            cap_reached=context.cap_reached,
            results=results,
            elapsed_ms=elapsed_ms,
            search_calls=context.calls,
        )


def solve(phrase: str, words: Iterable[str], options: SolveOptions | None = None) -> list[str]:
    """Best-first anagram phrases of ``phrase`` built from ``words``."""
    return AnagramSolver(words).solve(phrase, options).phrases
