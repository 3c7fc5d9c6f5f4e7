"""EvaluationDefinition — a named dataset, task and ordered list of scorers."""

import hashlib
import inspect
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from evalrun.evaluation.domain.row import DatasetRow

type DataFn = Callable[[], Iterable[DatasetRow | dict[str, Any]] | Awaitable[Any]]
type TaskFn = Callable[[Any], Any]
type ColumnsFn = Callable[..., Any]


class EvaluationDefinition(BaseModel, frozen=True):
    """Root definition of an evaluation.

    data is called once per run and may be sync or async; it returns DatasetRow
    objects or ``{"input": ..., "expected": ...}`` mappings. task and every
    scorer may also be sync or async.

    scorers may be empty here; the orchestrator rejects an empty list before
    any row runs so that the failure is reported as part of the run.

    columns, when given, is called as ``columns(input=..., output=...,
    expected=...)`` for each successful row and returns a list of
    ``{"label": ..., "value": ...}`` mappings.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    data: DataFn
    task: TaskFn
    scorers: list[Callable[..., Any]]
    columns: ColumnsFn | None = None
    source_code_hash: str | None = None

    def code_hash(self) -> str:
        """Return the identity of the code behind this definition.

        An explicit source_code_hash wins. Otherwise the SHA-256 of the name
        and the source of data, task and columns is used, so that editing the
        evaluation changes the hash.
        """
        if self.source_code_hash:
            return self.source_code_hash

        digest = hashlib.sha256(self.name.encode("utf-8"))
        for fn in (self.data, self.task, self.columns):
            if fn is not None:
                digest.update(_source_of(fn).encode("utf-8"))
        return digest.hexdigest()


def _source_of(fn: Callable[..., Any]) -> str:
    try:
        return inspect.getsource(fn)
    except (OSError, TypeError):
        return repr(fn)
