"""ResultQuery — the read surface a results viewer is built on."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from evalrun.evaluation.domain.result import ResultRecord
from evalrun.evaluation.domain.run import RunRecord, RunSummary
from evalrun.history.domain.index import RunHistoryIndex, RunningRegistry
from evalrun.history.infrastructure.errors import ResultNotFoundError, RunNotFoundError


class ResultView(BaseModel, frozen=True):
    """One row of a run, the same row of the run before it, and the run's summary."""

    model_config = ConfigDict(frozen=True)

    result: ResultRecord
    prev_result: ResultRecord | None
    evaluation: RunSummary


def _parse_timestamp(timestamp: datetime | str | None) -> datetime | None:
    if timestamp is None or isinstance(timestamp, datetime):
        return timestamp
    return datetime.fromisoformat(timestamp)


class ResultQuery:
    """Answers "show me row N of this evaluation" against the run history."""

    def __init__(self, history: RunHistoryIndex, registry: RunningRegistry) -> None:
        self._history = history
        self._registry = registry

    def get_run(
        self, eval_name: str, timestamp: datetime | str | None = None
    ) -> RunRecord:
        """Return the run created at timestamp, or the latest run when omitted.

        Raises:
            RunNotFoundError: if no matching run is stored.
        """
        created_at = _parse_timestamp(timestamp)
        if created_at is None:
            run = self._history.latest(eval_name)
        else:
            run = self._history.find(eval_name, created_at)
        if run is None:
            raise RunNotFoundError(eval_name=eval_name, created_at=created_at)
        return run

    def get_result(
        self,
        eval_name: str,
        result_index: int,
        timestamp: datetime | str | None = None,
    ) -> ResultView:
        """Return row result_index of the selected run plus its predecessor's row.

        prev_result comes from the run stored immediately before the selected
        one and is None when there is no such run or it has fewer rows.

        Raises:
            RunNotFoundError: if no matching run is stored.
            ResultNotFoundError: if the run has no row at result_index.
        """
        run = self.get_run(eval_name=eval_name, timestamp=timestamp)
        if not 0 <= result_index < len(run.results):
            raise ResultNotFoundError(
                eval_name=eval_name,
                result_index=result_index,
                total=len(run.results),
            )

        prev_run = self._history.previous(eval_name, run.run_id)
        prev_result = None
        if prev_run is not None and result_index < len(prev_run.results):
            prev_result = prev_run.results[result_index]

        return ResultView(
            result=run.results[result_index],
            prev_result=prev_result,
            evaluation=run.summary(),
        )

    def is_running(self, eval_name: str) -> bool:
        return self._registry.is_running(eval_name)

    def is_live(self, eval_name: str, timestamp: datetime | str | None) -> bool:
        """True when eval_name is running and timestamp identifies that in-flight run."""
        running = self._registry.running(eval_name)
        if running is None:
            return False
        return running.created_at == _parse_timestamp(timestamp)
