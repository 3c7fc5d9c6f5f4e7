"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol

from evalrun.evaluation.domain.run import RunStatus


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during an evaluation run.

    Implementations may log to structlog, record for tests, or render progress.
    """

    def evaluation_started(
        self,
        run_id: str,
        eval_name: str,
        total_rows: int,
        max_concurrent: int | None,
    ) -> None: ...

    def evaluation_completed(
        self,
        run_id: str,
        eval_name: str,
        status: RunStatus,
        total_rows: int,
        failed_rows: int,
        elapsed_seconds: float,
    ) -> None: ...

    def evaluation_aborted(self, run_id: str, eval_name: str, reason: str) -> None: ...

    def evaluation_progress(
        self,
        run_id: str,
        eval_name: str,
        completed: int,
        total: int,
    ) -> None: ...

    def row_started(self, run_id: str, eval_name: str, row_idx: int) -> None: ...

    def row_completed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        duration_ms: int,
        trace_count: int,
    ) -> None: ...

    def row_failed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        reason: str,
    ) -> None: ...

    def scorer_failed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        scorer: str,
        reason: str,
    ) -> None: ...
