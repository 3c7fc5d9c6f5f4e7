"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog

from evalrun.evaluation.domain.run import RunStatus


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluation_started(
        self,
        run_id: str,
        eval_name: str,
        total_rows: int,
        max_concurrent: int | None,
    ) -> None:
        self._log.info(
            "evaluation.started",
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
        log = self._log.warning if status == "fail" else self._log.info
        log(
            "evaluation.completed",
            run_id=run_id,
            eval_name=eval_name,
            status=status,
            total_rows=total_rows,
            failed_rows=failed_rows,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def evaluation_aborted(self, run_id: str, eval_name: str, reason: str) -> None:
        self._log.error(
            "evaluation.aborted",
            run_id=run_id,
            eval_name=eval_name,
            reason=reason,
        )

    def evaluation_progress(
        self,
        run_id: str,
        eval_name: str,
        completed: int,
        total: int,
    ) -> None:
        self._log.debug(
            "evaluation.progress",
            run_id=run_id,
            eval_name=eval_name,
            completed=completed,
            total=total,
            percent=round(100.0 * completed / total, 1) if total else 0.0,
        )

    def row_started(self, run_id: str, eval_name: str, row_idx: int) -> None:
        self._log.debug(
            "evaluation.row.started",
            run_id=run_id,
            eval_name=eval_name,
            row_idx=row_idx,
        )

    def row_completed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        duration_ms: int,
        trace_count: int,
    ) -> None:
        self._log.info(
            "evaluation.row.completed",
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
        self._log.error(
            "evaluation.row.failed",
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
        self._log.warning(
            "evaluation.scorer.failed",
            run_id=run_id,
            eval_name=eval_name,
            row_idx=row_idx,
            scorer=scorer,
            reason=reason,
        )
