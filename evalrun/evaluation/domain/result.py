"""ResultRecord — the outcome of running and scoring one dataset row."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from evalrun.core.content import Content
from evalrun.scorer.domain.score import ScoreRecord
from evalrun.trace.domain.event import TraceEvent

type ResultStatus = Literal["success", "fail"]


class RenderedColumn(BaseModel, frozen=True):
    """One extra labelled value shown next to a row's input/expected/output."""

    label: str
    value: Content


class ResultRecord(BaseModel, frozen=True):
    """Immutable record of one row: task output, scores and reported traces.

    For a failed row output is None, scores is empty and error describes the
    failure; duration and traces are still recorded.
    """

    model_config = ConfigDict(frozen=True)

    input: Content
    expected: Content = None
    output: Content = None
    duration: int = Field(ge=0)
    scores: list[ScoreRecord] = Field(default_factory=list)
    traces: list[TraceEvent] = Field(default_factory=list)
    status: ResultStatus
    error: str | None = None
    rendered_columns: list[RenderedColumn] = Field(default_factory=list)

    def score_named(self, name: str) -> ScoreRecord | None:
        """Return the first score with the given name, if this row has one."""
        return next((s for s in self.scores if s.name == name), None)
