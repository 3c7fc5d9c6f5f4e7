"""TaskRunner — runs, times and scores the task for a single dataset row."""

import asyncio
import inspect
import time
from collections.abc import Sequence
from typing import Any

from evalrun.core.errors import ConfigurationError
from evalrun.evaluation.domain.definition import ColumnsFn, TaskFn
from evalrun.evaluation.domain.result import RenderedColumn, ResultRecord
from evalrun.evaluation.domain.row import DatasetRow
from evalrun.scorer.domain.score import ScoreRecord
from evalrun.scorer.domain.scorer import Scorer, scorer_name
from evalrun.trace.application.collector import trace_scope


async def _resolve(value: Any) -> Any:
    """Await value if the callable that produced it was async."""
    if inspect.isawaitable(value):
        return await value
    return value


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


def _elapsed_ms(started_at: float) -> int:
    return round((time.monotonic() - started_at) * 1000)


class TaskRunner:
    """Executes one task invocation and produces its ResultRecord.

    The runner holds no state between rows; one instance serves every row of
    every run. Each invocation gets its own trace scope, so traces reported by
    the task are attached to this row only.
    """

    async def run(
        self,
        row: DatasetRow,
        task: TaskFn,
        scorers: Sequence[Scorer],
        columns: ColumnsFn | None = None,
    ) -> ResultRecord:
        """Run task on row.input, then score the output with every scorer.

        duration covers the task invocation only; scoring is excluded. A task
        exception marks the row as failed but still records duration and any
        traces reported before the failure.

        Raises:
            ConfigurationError: if a scorer rejects its input (for example a
                scorer that needs an expected value and the row has none).
        """
        with trace_scope() as collector:
            started_at = time.monotonic()
            try:
                output = await _resolve(task(row.input))
            except ConfigurationError:
                raise
            except Exception as exc:
                return ResultRecord(
                    input=row.input,
                    expected=row.expected,
                    duration=_elapsed_ms(started_at),
                    traces=collector.drain(),
                    status="fail",
                    error=_describe(exc),
                )
            duration = _elapsed_ms(started_at)
            traces = collector.drain()

        scores = await self._score_all(
            scorers=scorers, output=output, expected=row.expected
        )

        try:
            rendered = await self._render_columns(
                columns=columns, row=row, output=output
            )
        except Exception as exc:
            return ResultRecord(
                input=row.input,
                expected=row.expected,
                output=output,
                duration=duration,
                scores=scores,
                traces=traces,
                status="fail",
                error=f"Failed to render columns: {_describe(exc)}",
            )

        return ResultRecord(
            input=row.input,
            expected=row.expected,
            output=output,
            duration=duration,
            scores=scores,
            traces=traces,
            status="success",
            rendered_columns=rendered,
        )

    async def _score_all(
        self, scorers: Sequence[Scorer], output: Any, expected: Any
    ) -> list[ScoreRecord]:
        """Run every scorer concurrently; results keep scorer order.

        A ConfigurationError from one scorer cancels the others before it
        propagates.
        """
        try:
            async with asyncio.TaskGroup() as tg:
                pending = [
                    tg.create_task(
                        self._score(scorer=scorer, output=output, expected=expected)
                    )
                    for scorer in scorers
                ]
        except* ConfigurationError as eg:
            raise eg.exceptions[0]
        return [t.result() for t in pending]

    async def _score(self, scorer: Scorer, output: Any, expected: Any) -> ScoreRecord:
        """Invoke one scorer, turning any non-configuration failure into a null score."""
        try:
            result = await _resolve(scorer(output=output, expected=expected))
            if isinstance(result, ScoreRecord):
                return result
            return ScoreRecord.model_validate(result)
        except ConfigurationError:
            raise
        except Exception as exc:
            return ScoreRecord(
                name=scorer_name(scorer),
                score=None,
                error=_describe(exc),
            )

    async def _render_columns(
        self, columns: ColumnsFn | None, row: DatasetRow, output: Any
    ) -> list[RenderedColumn]:
        if columns is None:
            return []
        raw = await _resolve(
            columns(input=row.input, output=output, expected=row.expected)
        )
        return [
            item
            if isinstance(item, RenderedColumn)
            else RenderedColumn.model_validate(item)
            for item in raw
        ]
