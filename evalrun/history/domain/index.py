"""RunHistoryIndex and RunningRegistry Protocols — run-over-run storage ports."""

from datetime import datetime
from typing import Protocol

from evalrun.evaluation.domain.run import RunRecord


class RunHistoryIndex(Protocol):
    """Append-only log of terminal RunRecords keyed by evaluation name.

    Runs for one name are kept in insertion order, which is chronological.
    """

    def append(self, record: RunRecord) -> None: ...

    def runs(self, eval_name: str) -> list[RunRecord]: ...

    def latest(self, eval_name: str) -> RunRecord | None: ...

    def find(self, eval_name: str, created_at: datetime) -> RunRecord | None: ...

    def previous(self, eval_name: str, run_id: str) -> RunRecord | None: ...

    def eval_names(self) -> list[str]: ...


class RunningRegistry(Protocol):
    """Advisory record of which evaluations have a run in flight."""

    def mark_running(self, record: RunRecord) -> None: ...

    def mark_finished(self, eval_name: str, run_id: str) -> None: ...

    def is_running(self, eval_name: str) -> bool: ...

    def running(self, eval_name: str) -> RunRecord | None: ...
