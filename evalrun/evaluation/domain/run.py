"""RunRecord — one execution of an evaluation over its whole dataset."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from evalrun.evaluation.domain.result import ResultRecord

type RunId = str
type RunStatus = Literal["running", "success", "fail"]


class RunSummary(BaseModel, frozen=True):
    """The identifying fields of a run, without its results."""

    eval_name: str
    run_id: RunId
    status: RunStatus
    created_at: datetime


class RunRecord(BaseModel, frozen=True):
    """Immutable record of a run.

    The orchestrator publishes a "running" record with no results when the run
    starts and a terminal ("success" or "fail") record once every row has
    completed. results is ordered by dataset index.
    """

    model_config = ConfigDict(frozen=True)

    eval_name: str = Field(min_length=1)
    run_id: RunId = Field(min_length=1)
    created_at: datetime
    status: RunStatus
    results: list[ResultRecord] = Field(default_factory=list)
    duration: int = Field(default=0, ge=0)
    source_code_hash: str = Field(min_length=1)

    @property
    def is_terminal(self) -> bool:
        return self.status != "running"

    def summary(self) -> RunSummary:
        return RunSummary(
            eval_name=self.eval_name,
            run_id=self.run_id,
            status=self.status,
            created_at=self.created_at,
        )
