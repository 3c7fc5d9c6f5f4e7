"""ScoreRecord — the named score produced by one scorer for one row."""

from pydantic import BaseModel, ConfigDict

from evalrun.core.content import Content


class ScoreRecord(BaseModel, frozen=True):
    """Immutable score for one (row, scorer) pair.

    score is None only when the scorer failed; error then holds the failure
    description. Numeric scores are not clamped, and NaN or infinity are valid
    values when a scorer's arithmetic produces them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: float | None
    description: str | None = None
    metadata: Content = None
    error: str | None = None
