"""Levenshtein scorer — normalised edit-distance similarity of two strings."""

import math
from typing import Any

from rapidfuzz.distance import Levenshtein

from evalrun.scorer.domain.score import ScoreRecord
from evalrun.scorer.infrastructure.errors import InvalidScorerInputError

_NAME = "Levenshtein"


def _as_text(value: Any) -> str:
    """Render value the way a dataset author writes it.

    Integral floats drop their fractional part ("1.0" becomes "1") and booleans
    and None use their JSON spelling. Everything else goes through str(), so
    containers render as Python reprs.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def levenshtein(output: Any, expected: Any) -> ScoreRecord:
    """Score 1 - distance / longer length over the text forms of both values.

    Two empty strings score 1.

    Raises:
        InvalidScorerInputError: if expected is None.
    """
    if expected is None:
        raise InvalidScorerInputError(
            scorer=_NAME, reason="an expected value is required"
        )

    output_text, expected_text = _as_text(output), _as_text(expected)
    max_len = max(len(output_text), len(expected_text))

    score = 1.0
    if max_len > 0:
        score = 1 - Levenshtein.distance(output_text, expected_text) / max_len

    return ScoreRecord(name=_NAME, score=score)
