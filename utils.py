"""Utility helpers for normalization, config, logging, and exports."""

from __future__ import annotations

import csv
import hashlib
import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from models import SolveOptions, SolveReport


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".anagram_phrase_solver"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".anagram_phrase_solver")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
CACHE_DIR = APP_DIR / "cache"
LOG_PATH = APP_DIR / "app.log"


def ensure_app_dirs() -> None:
    """Create app directories if they do not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)
    CACHE_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config(config_path: Path = CONFIG_PATH) -> dict[str, Any]:
    """Load config from the user home config file."""
    ensure_app_dirs()
    if not config_path.exists():
        return {}
    try:
        return json.loads(config_path.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", config_path)
        return {}


def save_config(config: dict[str, Any], config_path: Path = CONFIG_PATH) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    try:
        config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logging.exception("Failed to save config to %s", config_path)


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}
_AT_LEAST_ONE = {"max_results", "result_limit", "min_length_floor"}
_NON_NEGATIVE = {"early_exit_fraction", "early_exit_min_remaining"}


def _parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_option(name: str, default: Any, raw: Any) -> Any:
    """Coerce one stored option to its field type, raising ValueError when out of range."""
    if isinstance(default, bool):
        return _parse_bool(raw)
    if isinstance(default, tuple):
        ratios = tuple(float(item) for item in raw)
        if not ratios or any(not 0.0 <= ratio <= 1.0 for ratio in ratios):
            raise ValueError(f"ratios must be a non-empty list within [0, 1]: {raw!r}")
        return ratios
    value = type(default)(raw)
    if name in _AT_LEAST_ONE and value < 1:
        raise ValueError(f"{name} must be at least 1: {raw!r}")
    if name in _NON_NEGATIVE and value < 0:
        raise ValueError(f"{name} must not be negative: {raw!r}")
    return value


def options_from_config(config: dict[str, Any]) -> SolveOptions:
    """
    Build solve options from the ``options`` section of a config dict.

    Unknown keys are ignored; a value of the wrong type or out of range
    falls back to the default.
    """
    stored = config.get("options") or {}
    defaults = SolveOptions()
    values: dict[str, Any] = {}
    for option in fields(SolveOptions):
        if option.name not in stored:
            continue
        raw = stored[option.name]
        try:
            values[option.name] = _parse_option(option.name, getattr(defaults, option.name), raw)
        except (TypeError, ValueError):
            logging.warning("Ignoring invalid config value %s=%r", option.name, raw)
    return SolveOptions(**values)


def options_to_config(options: SolveOptions) -> dict[str, Any]:
    payload = asdict(options)
    payload["depth_ratios"] = list(options.depth_ratios)
    return payload


def normalize_word(line: str) -> str:
    """
    Normalize a wordlist line.

    Steps:
    1) Trim leading/trailing whitespace.
    2) Lowercase.
    3) Reject (return "") anything that is not purely ASCII letters.
    """
    out = line.strip().lower()
    if not out or not (out.isascii() and out.isalpha()):
        return ""
    return out


def cache_key(wordlist_path: Path, file_size: int, mtime_ns: int) -> str:
    """Create a deterministic cache key from file identity."""
    key_data = {
        "path": str(wordlist_path.resolve()),
        "size": file_size,
        "mtime_ns": mtime_ns,
    }
    digest = hashlib.sha256(json.dumps(key_data, sort_keys=True).encode("utf-8")).hexdigest()
    return digest


def export_report(json_path: Path, csv_path: Path, report: SolveReport, wordlist_path: str, options: SolveOptions) -> None:
    """Export solve report to both JSON and CSV."""
    payload = {
        "generated_at_utc": report.generated_at_utc,
        "wordlist_path": wordlist_path,
        "phrase": report.phrase,
        "options": options_to_config(options),
        "letter_count": report.letter_count,
        "candidate_count": report.candidate_count,
        "solutions_found": report.solutions_found,
        "cap_reached": report.cap_reached,
        "elapsed_ms": report.elapsed_ms,
        "results": [
            {
                "phrase": r.phrase,
                "word_count": r.word_count,
                "score": r.score,
            }
            for r in report.results
        ],
    }

    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    with csv_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["rank", "phrase", "word_count", "score"])
        for rank, row in enumerate(report.results, start=1):
            writer.writerow([rank, row.phrase, row.word_count, f"{row.score:.2f}"])
