"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from evalrun.evaluation.domain.observer import EvaluationObserver
from evalrun.evaluation.domain.run import RunStatus


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def evaluation_started(
        self,
        run_id: str,
        eval_name: str,
        total_rows: int,
        max_concurrent: int | None,
    ) -> None:
        for obs in self._observers:
            obs.evaluation_started(
                run_id=run_id,
                eval_name=eval_name,
                total_rows=total_rows,
                max_concurrent=max_concurrent,
            )

    def evaluation_completed(
        self,
        run_id: str,
        eval_name: str,
        status: RunStatus,
        total_rows: int,
        failed_rows: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.evaluation_completed(
                run_id=run_id,
                eval_name=eval_name,
                status=status,
                total_rows=total_rows,
                failed_rows=failed_rows,
                elapsed_seconds=elapsed_seconds,
            )

    def evaluation_aborted(self, run_id: str, eval_name: str, reason: str) -> None:
        for obs in self._observers:
            obs.evaluation_aborted(run_id=run_id, eval_name=eval_name, reason=reason)

    def evaluation_progress(
        self,
        run_id: str,
        eval_name: str,
        completed: int,
        total: int,
    ) -> None:
        for obs in self._observers:
            obs.evaluation_progress(
                run_id=run_id,
                eval_name=eval_name,
                completed=completed,
                total=total,
            )

    def row_started(self, run_id: str, eval_name: str, row_idx: int) -> None:
        for obs in self._observers:
            obs.row_started(run_id=run_id, eval_name=eval_name, row_idx=row_idx)

    def row_completed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        duration_ms: int,
        trace_count: int,
    ) -> None:
        for obs in self._observers:
            obs.row_completed(
                run_id=run_id,
                eval_name=eval_name,
                row_idx=row_idx,
                duration_ms=duration_ms,
                trace_count=trace_count,
            )

    def row_failed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        reason: str,
    ) -> None:
        for obs in self._observers:
            obs.row_failed(
                run_id=run_id,
                eval_name=eval_name,
                row_idx=row_idx,
                reason=reason,
            )

    def scorer_failed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        scorer: str,
        reason: str,
    ) -> None:
        for obs in self._observers:
            obs.scorer_failed(
                run_id=run_id,
                eval_name=eval_name,
                row_idx=row_idx,
                scorer=scorer,
                reason=reason,
            )
