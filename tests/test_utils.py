import csv
import json
from pathlib import Path

from models import RankedPhrase, SolveOptions, SolveReport
from solver import AnagramSolver
from utils import APP_DIR, cache_key, export_report, load_config, normalize_word, options_from_config, options_to_config, save_config


def test_normalize_word_lowercases_and_trims() -> None:
    assert normalize_word("  Listen \n") == "listen"


def test_normalize_word_rejects_non_alphabetic_entries() -> None:
    assert normalize_word("it's") == ""
    assert normalize_word("hello world") == ""
    assert normalize_word("abc1") == ""
    assert normalize_word("café") == ""
    assert normalize_word("   ") == ""


def test_options_from_config_defaults_when_missing() -> None:
    assert options_from_config({}) == SolveOptions()


def test_options_from_config_reads_and_coerces_values() -> None:
    config = {
        "options": {
            "max_results": "1000",
            "result_limit": 25,
            "early_exit": False,
            "depth_ratios": [0, 0.5, 0.75],
            "unknown": 1,
        }
    }
    options = options_from_config(config)
    assert options.max_results == 1000
    assert options.result_limit == 25
    assert options.early_exit is False
    assert options.depth_ratios == (0.0, 0.5, 0.75)
    assert options.min_length_floor == SolveOptions().min_length_floor


def test_options_from_config_ignores_bad_values() -> None:
    options = options_from_config({"options": {"max_results": "lots", "depth_ratios": 3}})
    assert options.max_results == SolveOptions().max_results
    assert options.depth_ratios == SolveOptions().depth_ratios


def test_options_survive_config_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    options = SolveOptions(max_results=500, early_exit=False)
    save_config({"options": options_to_config(options)}, config_path)
    assert options_from_config(load_config(config_path)) == options


def test_load_config_falls_back_on_corrupt_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")
    assert load_config(config_path) == {}


def test_cache_key_is_stable_and_tracks_file_identity(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    assert cache_key(path, 10, 1) == cache_key(path, 10, 1)
    assert cache_key(path, 10, 1) != cache_key(path, 11, 1)
    assert cache_key(path, 10, 1) != cache_key(path, 10, 2)


def test_export_report_writes_json_and_csv(tmp_path: Path) -> None:
    report = SolveReport(
        phrase="dirty room",
        letter_count=9,
        candidate_count=3,
        solutions_found=2,
        cap_reached=False,
        results=[
            RankedPhrase(phrase="dormitory", score=-100.0, word_count=1),
            RankedPhrase(phrase="dirty room", score=-1560.0, word_count=2),
        ],
    )
    json_path = tmp_path / "out.json"
    csv_path = tmp_path / "out.csv"

    export_report(json_path, csv_path, report, "words.txt", SolveOptions())

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload["phrase"] == "dirty room"
    assert payload["options"]["max_results"] == 50_000
    assert [row["phrase"] for row in payload["results"]] == ["dormitory", "dirty room"]

    with csv_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["rank", "phrase", "word_count", "score"]
    assert rows[1] == ["1", "dormitory", "1", "-100.00"]
    assert rows[2] == ["2", "dirty room", "2", "-1560.00"]


def test_options_from_config_keeps_default_ratios_when_empty_or_out_of_range() -> None:
    defaults = SolveOptions().depth_ratios
    assert options_from_config({"options": {"depth_ratios": []}}).depth_ratios == defaults
    assert options_from_config({"options": {"depth_ratios": [0, 1.5]}}).depth_ratios == defaults
    assert options_from_config({"options": {"depth_ratios": [-0.1, 0.4]}}).depth_ratios == defaults


def test_options_with_empty_ratios_in_config_still_solve() -> None:
    options = options_from_config({"options": {"depth_ratios": []}})
    assert AnagramSolver(["ab", "a", "b"]).solve("ab", options).phrases == ["ab", "a b"]


def test_options_from_config_parses_string_booleans() -> None:
    assert options_from_config({"options": {"early_exit": "false"}}).early_exit is False
    assert options_from_config({"options": {"early_exit": "False"}}).early_exit is False
    assert options_from_config({"options": {"use_speed_cache": "no"}}).use_speed_cache is False
    assert options_from_config({"options": {"early_exit": "true"}}).early_exit is True


def test_options_from_config_ignores_unrecognized_booleans() -> None:
    options = options_from_config({"options": {"early_exit": "maybe", "use_speed_cache": 7}})
    assert options.early_exit is SolveOptions().early_exit
    assert options.use_speed_cache is SolveOptions().use_speed_cache


def test_options_from_config_requires_positive_limits() -> None:
    defaults = SolveOptions()
    for name in ("max_results", "result_limit", "min_length_floor"):
        for bad in (0, -5):
            options = options_from_config({"options": {name: bad}})
            assert getattr(options, name) == getattr(defaults, name)
    assert options_from_config({"options": {"max_results": 1}}).max_results == 1


def test_options_from_config_rejects_negative_early_exit_fraction() -> None:
    assert options_from_config({"options": {"early_exit_fraction": -0.5}}).early_exit_fraction == 0.1
    assert options_from_config({"options": {"early_exit_fraction": 0}}).early_exit_fraction == 0.0


def test_app_dir_named_after_project() -> None:
    assert APP_DIR.name == ".anagram_phrase_solver"
