"""Score-state classification of a score against the previous run's score."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from evalrun.evaluation.domain.result import ResultRecord
from evalrun.metrics.domain.scores import average_score, previous_score_for

type ScoreState = Literal["improved", "regressed", "unchanged", "first_run"]


def score_state(
    current: float, previous: float | None, tolerance: float = 0.0
) -> ScoreState:
    """Classify current relative to previous.

    With the default tolerance of 0 the comparison is strict. Differences no
    larger than tolerance count as unchanged. NaN on either side compares as
    unchanged.
    """
    if previous is None:
        return "first_run"
    if current > previous + tolerance:
        return "improved"
    if current < previous - tolerance:
        return "regressed"
    return "unchanged"


class ResultComparison(BaseModel, frozen=True):
    """Score states of one row: its average score and each named scorer."""

    model_config = ConfigDict(frozen=True)

    average: ScoreState
    by_scorer: dict[str, ScoreState]


def compare_results(
    result: ResultRecord,
    prev_result: ResultRecord | None,
    tolerance: float = 0.0,
) -> ResultComparison:
    """Compare a row with the same row of the previous run.

    Null scores are treated as 0, the value a viewer displays for them.
    """
    current_average = average_score(result.scores) or 0.0
    previous_average = None
    if prev_result is not None:
        previous_average = average_score(prev_result.scores) or 0.0

    by_scorer: dict[str, ScoreState] = {}
    for score in result.scores:
        by_scorer[score.name] = score_state(
            current=score.score if score.score is not None else 0.0,
            previous=previous_score_for(score.name, prev_result),
            tolerance=tolerance,
        )

    return ResultComparison(
        average=score_state(
            current=current_average, previous=previous_average, tolerance=tolerance
        ),
        by_scorer=by_scorer,
    )
