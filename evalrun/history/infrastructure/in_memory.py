"""In-process implementations of the RunHistoryIndex and RunningRegistry ports."""

from datetime import datetime

from evalrun.evaluation.domain.run import RunRecord
from evalrun.history.infrastructure.errors import RunNotTerminalError


class InMemoryRunHistoryIndex:
    """Keeps every terminal RunRecord in memory, grouped by evaluation name.

    Satisfies the RunHistoryIndex protocol structurally. Readers get copies of
    the per-name lists; the records themselves are immutable.
    """

    def __init__(self, records: list[RunRecord] | None = None) -> None:
        self._runs: dict[str, list[RunRecord]] = {}
        for record in records or []:
            self.append(record)

    def append(self, record: RunRecord) -> None:
        """Store a finished run.

        Raises:
            RunNotTerminalError: if the record is still marked as running.
        """
        if not record.is_terminal:
            raise RunNotTerminalError(eval_name=record.eval_name, run_id=record.run_id)
        self._runs.setdefault(record.eval_name, []).append(record)

    def runs(self, eval_name: str) -> list[RunRecord]:
        return list(self._runs.get(eval_name, []))

    def latest(self, eval_name: str) -> RunRecord | None:
        runs = self._runs.get(eval_name)
        return runs[-1] if runs else None

    def find(self, eval_name: str, created_at: datetime) -> RunRecord | None:
        """Return the most recently stored run created at created_at.

        Runs started within one clock tick share a created_at; the later one wins,
        matching what latest() returns for the same name.
        """
        for record in reversed(self._runs.get(eval_name, [])):
            if record.created_at == created_at:
                return record
        return None

    def previous(self, eval_name: str, run_id: str) -> RunRecord | None:
        """Return the run stored immediately before the run with run_id."""
        runs = self._runs.get(eval_name, [])
        for index, record in enumerate(runs):
            if record.run_id == run_id:
                return runs[index - 1] if index > 0 else None
        return None

    def eval_names(self) -> list[str]:
        return list(self._runs)


class InMemoryRunningRegistry:
    """Tracks the in-flight run of each evaluation in this process.

    Satisfies the RunningRegistry protocol structurally. The status is
    advisory: nothing here can stop or steer a run.
    """

    def __init__(self) -> None:
        self._running: dict[str, RunRecord] = {}

    def mark_running(self, record: RunRecord) -> None:
        self._running[record.eval_name] = record

    def mark_finished(self, eval_name: str, run_id: str) -> None:
        current = self._running.get(eval_name)
        # A newer run of the same evaluation may have replaced this one.
        if current is not None and current.run_id == run_id:
            del self._running[eval_name]

    def is_running(self, eval_name: str) -> bool:
        return eval_name in self._running

    def running(self, eval_name: str) -> RunRecord | None:
        return self._running.get(eval_name)
