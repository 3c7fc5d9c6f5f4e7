"""Tests for score_state and compare_results."""

import math

from evalrun.evaluation.domain.result import ResultRecord
from evalrun.metrics.domain.score_state import compare_results, score_state
from evalrun.scorer.domain.score import ScoreRecord


def _result(*scores: ScoreRecord) -> ResultRecord:
    return ResultRecord(input="x", duration=1, status="success", scores=list(scores))


class TestScoreState:
    def test_no_previous_is_first_run(self) -> None:
        assert score_state(current=0.5, previous=None) == "first_run"

    def test_higher_is_improved(self) -> None:
        assert score_state(current=0.6, previous=0.5) == "improved"

    def test_lower_is_regressed(self) -> None:
        assert score_state(current=0.4, previous=0.5) == "regressed"

    def test_equal_is_unchanged(self) -> None:
        assert score_state(current=0.5, previous=0.5) == "unchanged"

    def test_previous_zero_is_a_real_previous(self) -> None:
        assert score_state(current=0.5, previous=0.0) == "improved"

    def test_difference_within_tolerance_is_unchanged(self) -> None:
        assert score_state(current=0.52, previous=0.5, tolerance=0.05) == "unchanged"
        assert score_state(current=0.48, previous=0.5, tolerance=0.05) == "unchanged"

    def test_difference_beyond_tolerance_is_classified(self) -> None:
        assert score_state(current=0.6, previous=0.5, tolerance=0.05) == "improved"
        assert score_state(current=0.4, previous=0.5, tolerance=0.05) == "regressed"

    def test_nan_is_unchanged(self) -> None:
        assert score_state(current=math.nan, previous=0.5) == "unchanged"
        assert score_state(current=0.5, previous=math.nan) == "unchanged"


class TestCompareResults:
    def test_without_previous_row_everything_is_first_run(self) -> None:
        result = _result(ScoreRecord(name="a", score=1.0))

        comparison = compare_results(result=result, prev_result=None)

        assert comparison.average == "first_run"
        assert comparison.by_scorer == {"a": "first_run"}

    def test_each_scorer_is_compared_by_name(self) -> None:
        result = _result(
            ScoreRecord(name="a", score=1.0), ScoreRecord(name="b", score=0.0)
        )
        prev = _result(
            ScoreRecord(name="b", score=0.5), ScoreRecord(name="a", score=0.5)
        )

        comparison = compare_results(result=result, prev_result=prev)

        assert comparison.by_scorer == {"a": "improved", "b": "regressed"}
        assert comparison.average == "unchanged"

    def test_scorer_new_in_this_run_is_first_run(self) -> None:
        result = _result(ScoreRecord(name="new", score=1.0))
        prev = _result(ScoreRecord(name="old", score=1.0))

        comparison = compare_results(result=result, prev_result=prev)

        assert comparison.by_scorer == {"new": "first_run"}

    def test_null_current_score_counts_as_zero(self) -> None:
        result = _result(ScoreRecord(name="a", score=None, error="boom"))
        prev = _result(ScoreRecord(name="a", score=0.5))

        comparison = compare_results(result=result, prev_result=prev)

        assert comparison.by_scorer == {"a": "regressed"}
        assert comparison.average == "regressed"
