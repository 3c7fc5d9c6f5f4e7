"""NumericDifference scorer — relative distance of a number from its target."""

import math
from typing import Any

from evalrun.scorer.domain.score import ScoreRecord
from evalrun.scorer.infrastructure.errors import InvalidScorerInputError

_NAME = "NumericDifference"


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 is ±inf, 0/0 is nan."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def numeric_difference(output: Any, expected: Any) -> ScoreRecord:
    """Score 1 - |output - expected| / expected.

    expected == 0 is not guarded: the score becomes -inf (or nan when output is
    also 0) and is reported as such.

    Raises:
        InvalidScorerInputError: if expected is None.
    """
    if expected is None:
        raise InvalidScorerInputError(
            scorer=_NAME, reason="an expected value is required"
        )

    score = 1 - _divide(abs(output - expected), expected)
    return ScoreRecord(name=_NAME, score=score)
