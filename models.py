"""Data models for anagram search results, solve options, and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

LetterCounts = tuple[int, ...]


class SolveError(ValueError):
    """Base class for errors reported back to the caller of a solve."""


class EmptyInputError(SolveError):
    """The phrase contains no letters to rearrange."""


class DictionaryEmptyError(SolveError):
    """The word source produced no usable entries."""


@dataclass(slots=True)
class SolveOptions:
    """Search limits and pruning policy used for a single solve."""

    max_results: int = 50_000
    result_limit: int = 10_000
    early_exit: bool = True
    depth_ratios: tuple[float, ...] = (0.0, 0.4, 0.5, 0.6)
    min_length_floor: int = 2
    early_exit_fraction: float = 0.1
    early_exit_min_remaining: int = 6
    use_speed_cache: bool = True


@dataclass(frozen=True, slots=True)
class CandidateWord:
    """A dictionary word that fits inside the target phrase."""

    text: str
    letters: LetterCounts
    length: int


@dataclass(slots=True)
class ScoredSolution:
    """One complete combination found by the search."""

    score: float
    words: list[str]


@dataclass(slots=True)
class RankedPhrase:
    """A display phrase with the score it was ranked by."""

    phrase: str
    score: float
    word_count: int


@dataclass(slots=True)
class SolveReport:
    """Ranked output of one solve, plus search diagnostics."""

    phrase: str
    letter_count: int
    candidate_count: int
    solutions_found: int
    cap_reached: bool
    results: list[RankedPhrase]
    elapsed_ms: float = 0.0
    search_calls: int = 0
    generated_at_utc: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def phrases(self) -> list[str]:
        return [row.phrase for row in self.results]

    @property
    def single(self) -> list[str]:
        return [row.phrase for row in self.results if row.word_count == 1]

    @property
    def multi(self) -> list[str]:
        return [row.phrase for row in self.results if row.word_count > 1]

    @property
    def best(self) -> str | None:
        return self.results[0].phrase if self.results else None


@dataclass(slots=True)
class WordListLoadResult:
    """Summary returned after reading or loading a cached wordlist."""

    wordlist_path: str
    total_lines: int
    accepted_words: int
    loaded_from_cache: bool
