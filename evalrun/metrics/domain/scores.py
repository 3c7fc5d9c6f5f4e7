"""Row-level score helpers."""

import statistics
from collections.abc import Sequence

from evalrun.evaluation.domain.result import ResultRecord
from evalrun.scorer.domain.score import ScoreRecord


def average_score(scores: Sequence[ScoreRecord]) -> float | None:
    """Mean of the non-null scores, or None when there are none."""
    values = [s.score for s in scores if s.score is not None]
    if not values:
        return None
    return statistics.fmean(values)


def previous_score_for(name: str, prev_result: ResultRecord | None) -> float | None:
    """Score named name in the previous run's row, if it was recorded.

    A score that exists but failed (null) counts as 0.
    """
    if prev_result is None:
        return None
    previous = prev_result.score_named(name)
    if previous is None:
        return None
    return previous.score if previous.score is not None else 0.0
