from models import ScoredSolution
from ranking import quality_score, rank_solutions


def scored(*words: str) -> ScoredSolution:
    return ScoredSolution(score=quality_score(words), words=list(words))


def test_fewer_words_always_rank_higher() -> None:
    assert quality_score(["ab"]) > quality_score(["abcdefghij", "abcdefghij"])
    assert quality_score(["dirty", "room"]) > quality_score(["dry", "riot", "om"])


def test_balanced_lengths_beat_uneven_lengths() -> None:
    assert quality_score(["abc", "def"]) > quality_score(["ab", "cdef"])


def test_single_word_score_has_no_variance_term() -> None:
    assert quality_score(["dormitory"]) == -1000 + 900
    assert quality_score([]) == 0.0


def test_rank_solutions_orders_and_deduplicates() -> None:
    solutions = [scored("ca", "t"), scored("cat"), scored("act"), scored("cat"), scored("a", "t", "c")]
    ranked = rank_solutions(solutions, limit=10)

    assert [row.phrase for row in ranked] == ["cat", "act", "ca t", "a t c"]
    assert [row.word_count for row in ranked] == [1, 1, 2, 3]
    assert ranked[0].score >= ranked[1].score >= ranked[2].score >= ranked[3].score


def test_rank_solutions_truncates_after_dedup() -> None:
    solutions = [scored("cat"), scored("cat"), scored("act"), scored("ca", "t")]
    ranked = rank_solutions(solutions, limit=2)
    assert [row.phrase for row in ranked] == ["cat", "act"]
