"""Error types raised by the run history surfaces."""

from datetime import datetime

from evalrun.core.errors import EvalrunError


class RunNotTerminalError(EvalrunError):
    """Raised when a run that is still in flight is appended to the history."""

    def __init__(self, eval_name: str, run_id: str) -> None:
        super().__init__(
            f"Failed to store run '{run_id}' of '{eval_name}': run has not finished"
        )


class RunNotFoundError(EvalrunError):
    """Raised when no stored run matches the requested evaluation and timestamp."""

    def __init__(self, eval_name: str, created_at: datetime | None = None) -> None:
        self.eval_name = eval_name
        self.created_at = created_at
        if created_at is None:
            detail = f"no runs recorded for '{eval_name}'"
        else:
            detail = f"no run of '{eval_name}' created at {created_at.isoformat()}"
        super().__init__(f"Failed to find run: {detail}")


class ResultNotFoundError(EvalrunError):
    """Raised when a run has no result at the requested row index."""

    def __init__(self, eval_name: str, result_index: int, total: int) -> None:
        self.eval_name = eval_name
        self.result_index = result_index
        super().__init__(
            f"Failed to find result: run of '{eval_name}' has {total} result(s),"
            f" index {result_index} requested"
        )
