"""ProgressEvaluationObserver — renders a Rich progress bar per run to stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from evalrun.evaluation.domain.run import RunStatus


class _CountsColumn(ProgressColumn):
    """Renders done+inflight/total, plus the failed count once rows fail."""

    def render(self, task: Task) -> Text:
        done = int(task.fields.get("done", 0))
        inflight = int(task.fields.get("inflight", 0))
        failed = int(task.fields.get("failed", 0))
        total = int(task.total or 0)
        text = Text.assemble(
            (str(done), "bright_green"),
            ("+", "dim white"),
            (str(inflight), "grey50"),
            ("/", "dim white"),
            (str(total), "default"),
        )
        if failed:
            text.append(f"  {failed} failed", style="red")
        return text


class _ThreeSegmentBarColumn(ProgressColumn):
    """ProgressColumn that renders three segments: done, in-flight, remaining."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        bar_width = self.bar_width or 40
        total = task.total or 0
        if total > 0:
            done_cells = int(task.completed / total * bar_width)
            inflight = int(task.fields.get("inflight", 0))
            inflight_cells = min(
                int(inflight / total * bar_width),
                bar_width - done_cells,
            )
        else:
            done_cells = 0
            inflight_cells = 0
        remaining_cells = bar_width - done_cells - inflight_cells

        result = Text()
        result.append("█" * done_cells, style="bright_green")
        result.append("▒" * inflight_cells, style="grey50")
        result.append("░" * remaining_cells, style="dim white")
        return result


def _make_progress(console: Console) -> Progress:
    return Progress(
        TextColumn("{task.description}"),
        _ThreeSegmentBarColumn(bar_width=40),
        _CountsColumn(),
        TimeElapsedColumn(),
        console=console,
        refresh_per_second=10,
        transient=False,
    )


class ProgressEvaluationObserver:
    """Renders one progress bar per evaluation run on stderr.

    Row counters are kept even when ``disabled=True``, which suppresses all
    terminal output (useful in tests).

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._done: dict[str, int] = {}
        self._inflight: dict[str, int] = {}
        self._failed: dict[str, int] = {}
        self._task_ids: dict[str, TaskID] = {}
        self._progress: Progress | None = None

    @property
    def done(self) -> dict[str, int]:
        return dict(self._done)

    @property
    def inflight(self) -> dict[str, int]:
        return dict(self._inflight)

    @property
    def failed(self) -> dict[str, int]:
        return dict(self._failed)

    def _update_task(self, run_id: str) -> None:
        if self._progress is None or run_id not in self._task_ids:
            return
        self._progress.update(
            self._task_ids[run_id],
            completed=self._done[run_id],
            done=self._done[run_id],
            inflight=self._inflight[run_id],
            failed=self._failed[run_id],
        )

    def _forget(self, run_id: str) -> None:
        if self._progress is not None and run_id in self._task_ids:
            self._progress.remove_task(self._task_ids[run_id])
        self._task_ids.pop(run_id, None)
        self._done.pop(run_id, None)
        self._inflight.pop(run_id, None)
        self._failed.pop(run_id, None)
        if self._progress is not None and not self._task_ids:
            self._progress.stop()
            self._progress = None

    def evaluation_started(
        self,
        run_id: str,
        eval_name: str,
        total_rows: int,
        max_concurrent: int | None,
    ) -> None:
        self._done[run_id] = 0
        self._inflight[run_id] = 0
        self._failed[run_id] = 0

        if self._disabled:
            return

        if self._progress is None:
            self._progress = _make_progress(console=Console(stderr=True))
            self._progress.start()
        self._task_ids[run_id] = self._progress.add_task(
            description=f"[cyan]{eval_name}[/cyan]",
            total=float(total_rows),
            done=0,
            inflight=0,
            failed=0,
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
        self._forget(run_id=run_id)

    def evaluation_aborted(self, run_id: str, eval_name: str, reason: str) -> None:
        self._forget(run_id=run_id)

    def evaluation_progress(
        self,
        run_id: str,
        eval_name: str,
        completed: int,
        total: int,
    ) -> None:
        if run_id in self._done:
            self._done[run_id] = completed
            self._inflight[run_id] = max(0, self._inflight[run_id] - 1)
        if not self._disabled:
            self._update_task(run_id=run_id)

    def row_started(self, run_id: str, eval_name: str, row_idx: int) -> None:
        if run_id in self._inflight:
            self._inflight[run_id] += 1
        if not self._disabled:
            self._update_task(run_id=run_id)

    def row_completed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        duration_ms: int,
        trace_count: int,
    ) -> None:
        pass

    def row_failed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        reason: str,
    ) -> None:
        if run_id in self._failed:
            self._failed[run_id] += 1

    def scorer_failed(
        self,
        run_id: str,
        eval_name: str,
        row_idx: int,
        scorer: str,
        reason: str,
    ) -> None:
        pass
