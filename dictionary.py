"""Wordlist loading and per-phrase candidate table construction."""

from __future__ import annotations

import logging
import pickle
from pathlib import Path
from typing import Callable, Iterable

import letters
from models import CandidateWord, DictionaryEmptyError, SolveOptions, WordListLoadResult
from utils import CACHE_DIR, cache_key, ensure_app_dirs, normalize_word

ProgressCallback = Callable[[float], None]

logger = logging.getLogger(__name__)


def clean_words(lines: Iterable[str]) -> list[str]:
    """Normalize raw lines, keeping only purely alphabetic ASCII words in source order."""
    cleaned: list[str] = []
    for line in lines:
        word = normalize_word(line)
        if word:
            cleaned.append(word)
    return cleaned


def build_candidates(lines: Iterable[str], phrase: str) -> list[CandidateWord]:
    """
    Build the candidate table for ``phrase``.

    Every kept word fits inside the phrase's letters. The table is sorted by
    length, longest first; words of equal length keep their wordlist order so
    that repeated solves walk the table identically.
    """
    words = clean_words(lines)
    if not words:
        raise DictionaryEmptyError("Wordlist contains no usable words.")

    target = letters.from_text(phrase)
    target_len = letters.total(target)

    candidates: list[CandidateWord] = []
    for word in words:
        freq = letters.from_text(word)
        length = letters.total(freq)
        if length <= target_len and letters.dominates(freq, target):
            candidates.append(CandidateWord(text=word, letters=freq, length=length))

    candidates.sort(key=lambda candidate: candidate.length, reverse=True)
    logger.debug("Candidate table for %r: %d of %d words", phrase, len(candidates), len(words))
    return candidates


def read_wordlist(
    wordlist_path: str,
    options: SolveOptions,
    progress_callback: ProgressCallback | None = None,
) -> tuple[list[str], WordListLoadResult]:
    """
    Read a newline-delimited wordlist, or load it from the speed cache.

    Returns the cleaned words together with a load summary.
    """
    path = Path(wordlist_path)
    if not path.exists():
        raise FileNotFoundError(f"Wordlist file not found: {wordlist_path}")

    ensure_app_dirs()
    file_stat = path.stat()
    cache_file = CACHE_DIR / f"{cache_key(path, file_stat.st_size, file_stat.st_mtime_ns)}.pkl"

    if options.use_speed_cache and cache_file.exists():
        with cache_file.open("rb") as handle:
            cached = pickle.load(handle)
        if progress_callback:
            progress_callback(1.0)
        logger.info("Loaded %d words from cache for %s", len(cached["words"]), path)
        return cached["words"], WordListLoadResult(
            wordlist_path=str(path),
            total_lines=cached["total_lines"],
            accepted_words=len(cached["words"]),
            loaded_from_cache=True,
        )

    total_bytes = max(file_stat.st_size, 1)
    total_lines = 0
    words: list[str] = []

    with path.open("rb") as handle:
        bytes_processed = 0
        for raw_line in handle:
            bytes_processed += len(raw_line)
            total_lines += 1

            word = normalize_word(raw_line.decode("utf-8", errors="ignore"))
            if word:
                words.append(word)

            if progress_callback and total_lines % 5000 == 0:
                progress_callback(min(bytes_processed / total_bytes, 1.0))

    if options.use_speed_cache:
        payload = {"words": words, "total_lines": total_lines}
        try:
            with cache_file.open("wb") as handle:
                pickle.dump(payload, handle, protocol=pickle.HIGHEST_PROTOCOL)
        except Exception:
            logging.exception("Failed writing cache file: %s", cache_file)

    if progress_callback:
        progress_callback(1.0)

    logger.info("Read %d usable words from %d lines in %s", len(words), total_lines, path)
    return words, WordListLoadResult(
        wordlist_path=str(path),
        total_lines=total_lines,
        accepted_words=len(words),
        loaded_from_cache=False,
    )
