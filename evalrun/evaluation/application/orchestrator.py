"""EvaluationOrchestrator — runs every row of an evaluation and records the run."""

import asyncio
import contextlib
import inspect
import time
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from evalrun.core.errors import EvalrunError
from evalrun.evaluation.application.task_runner import TaskRunner
from evalrun.evaluation.domain.definition import EvaluationDefinition
from evalrun.evaluation.domain.observer import EvaluationObserver
from evalrun.evaluation.domain.result import ResultRecord
from evalrun.evaluation.domain.row import DatasetRow
from evalrun.evaluation.domain.run import RunRecord
from evalrun.evaluation.infrastructure.errors import (
    DatasetLoadError,
    InvalidDatasetRowError,
    NoScorersConfiguredError,
)
from evalrun.history.domain.index import RunHistoryIndex, RunningRegistry


def _utcnow() -> datetime:
    return datetime.now(UTC)


class EvaluationOrchestrator:
    """Runs an EvaluationDefinition end to end and produces its RunRecord.

    The orchestrator receives its history, registry and observer rather than
    reaching for globals, so tests can inject in-memory fakes.
    """

    def __init__(
        self,
        history: RunHistoryIndex,
        registry: RunningRegistry,
        observer: EvaluationObserver,
        task_runner: TaskRunner | None = None,
        max_concurrent: int | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._history = history
        self._registry = registry
        self._observer = observer
        self._task_runner = task_runner or TaskRunner()
        self._max_concurrent = max_concurrent
        self._clock = clock

    async def run(self, definition: EvaluationDefinition) -> RunRecord:
        """Execute every dataset row and return the terminal RunRecord.

        Rows run concurrently (bounded by max_concurrent when set). A failing
        task fails its row and the run, but every other row still runs. The
        finished run is appended to the history index.

        Raises:
            NoScorersConfiguredError: if the definition has no scorers. Raised
                before the data function is called.
            DatasetLoadError: if the data function raises.
            InvalidDatasetRowError: if the data function returns a malformed row.
            ConfigurationError: if any scorer rejects its input; the run is
                aborted and not stored.
        """
        if not definition.scorers:
            raise NoScorersConfiguredError(eval_name=definition.name)

        run_id = str(uuid.uuid4())
        running = RunRecord(
            eval_name=definition.name,
            run_id=run_id,
            created_at=self._clock(),
            status="running",
            source_code_hash=definition.code_hash(),
        )
        self._registry.mark_running(running)

        try:
            rows = await self._load_rows(definition=definition)
            self._observer.evaluation_started(
                run_id=run_id,
                eval_name=definition.name,
                total_rows=len(rows),
                max_concurrent=self._max_concurrent,
            )

            started_at = time.monotonic()
            results = await self._run_rows(
                run_id=run_id, definition=definition, rows=rows
            )
            elapsed_seconds = time.monotonic() - started_at

            failed_rows = sum(1 for r in results if r.status == "fail")
            record = RunRecord(
                eval_name=definition.name,
                run_id=run_id,
                created_at=running.created_at,
                status="fail" if failed_rows else "success",
                results=results,
                duration=round(elapsed_seconds * 1000),
                source_code_hash=running.source_code_hash,
            )
            self._history.append(record)
        except EvalrunError as exc:
            self._observer.evaluation_aborted(
                run_id=run_id, eval_name=definition.name, reason=str(exc)
            )
            raise
        finally:
            self._registry.mark_finished(eval_name=definition.name, run_id=run_id)

        self._observer.evaluation_completed(
            run_id=run_id,
            eval_name=definition.name,
            status=record.status,
            total_rows=len(results),
            failed_rows=failed_rows,
            elapsed_seconds=elapsed_seconds,
        )
        return record

    async def _load_rows(self, definition: EvaluationDefinition) -> list[DatasetRow]:
        """Call the data function exactly once and normalise what it returns."""
        try:
            raw = definition.data()
            if inspect.isawaitable(raw):
                raw = await raw
            items: list[Any] = list(raw)
        except Exception as exc:
            raise DatasetLoadError(eval_name=definition.name, reason=str(exc)) from exc

        rows: list[DatasetRow] = []
        for row_idx, item in enumerate(items):
            if isinstance(item, DatasetRow):
                rows.append(item)
                continue
            try:
                rows.append(DatasetRow.model_validate(item))
            except ValidationError as exc:
                raise InvalidDatasetRowError(
                    eval_name=definition.name, row_idx=row_idx, reason=str(exc)
                ) from exc
        return rows

    async def _run_rows(
        self,
        run_id: str,
        definition: EvaluationDefinition,
        rows: list[DatasetRow],
    ) -> list[ResultRecord]:
        """Run all rows concurrently; results keep dataset order."""
        slots: list[ResultRecord | None] = [None] * len(rows)
        sem: contextlib.AbstractAsyncContextManager[Any] = (
            asyncio.Semaphore(self._max_concurrent)
            if self._max_concurrent
            else contextlib.nullcontext()
        )
        # Mutable counter shared across the row tasks.
        completed_count: list[int] = [0]
        progress_lock = asyncio.Lock()

        async def run_one(row_idx: int, row: DatasetRow) -> None:
            async with sem:
                self._observer.row_started(
                    run_id=run_id, eval_name=definition.name, row_idx=row_idx
                )
                result = await self._task_runner.run(
                    row=row,
                    task=definition.task,
                    scorers=definition.scorers,
                    columns=definition.columns,
                )
            slots[row_idx] = result
            self._report_row(
                run_id=run_id,
                eval_name=definition.name,
                row_idx=row_idx,
                result=result,
            )
            async with progress_lock:
                completed_count[0] += 1
                self._observer.evaluation_progress(
                    run_id=run_id,
                    eval_name=definition.name,
                    completed=completed_count[0],
                    total=len(rows),
                )

        try:
            async with asyncio.TaskGroup() as tg:
                for row_idx, row in enumerate(rows):
                    tg.create_task(run_one(row_idx=row_idx, row=row))
        except* EvalrunError as eg:
            # Surface the first configuration error as a plain exception.
            raise eg.exceptions[0]

        return [result for result in slots if result is not None]

    def _report_row(
        self, run_id: str, eval_name: str, row_idx: int, result: ResultRecord
    ) -> None:
        for score in result.scores:
            if score.error is not None:
                self._observer.scorer_failed(
                    run_id=run_id,
                    eval_name=eval_name,
                    row_idx=row_idx,
                    scorer=score.name,
                    reason=score.error,
                )

        if result.status == "fail":
            self._observer.row_failed(
                run_id=run_id,
                eval_name=eval_name,
                row_idx=row_idx,
                reason=result.error or "unknown error",
            )
            return

        self._observer.row_completed(
            run_id=run_id,
            eval_name=eval_name,
            row_idx=row_idx,
            duration_ms=result.duration,
            trace_count=len(result.traces),
        )
