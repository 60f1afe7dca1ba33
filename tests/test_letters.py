import pytest

import letters


def test_from_text_counts_case_insensitively_and_ignores_non_letters() -> None:
    freq = letters.from_text("Aa b-B! 42 é")
    assert freq[0] == 2
    assert freq[1] == 2
    assert letters.total(freq) == 4


def test_from_text_of_blank_is_empty() -> None:
    assert letters.is_empty(letters.from_text("  ?! 123 "))
    assert letters.from_text("") == letters.EMPTY


def test_dominates() -> None:
    have = letters.from_text("listen")
    assert letters.dominates(letters.from_text("tin"), have)
    assert letters.dominates(have, have)
    assert not letters.dominates(letters.from_text("tt"), have)
    assert not letters.dominates(letters.from_text("v"), have)


def test_subtract_leaves_remaining_letters() -> None:
    remaining = letters.subtract(letters.from_text("dormitory"), letters.from_text("dirty"))
    assert letters.sorted_letters(remaining) == "moor"
    assert letters.total(remaining) == 4


def test_subtract_requires_domination() -> None:
    with pytest.raises(AssertionError):
        letters.subtract(letters.from_text("cat"), letters.from_text("dog"))


def test_sorted_letters() -> None:
    assert letters.sorted_letters(letters.from_text("Dirty Room")) == "dimoorrty"
