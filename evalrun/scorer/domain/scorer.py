"""Scorer Protocol — structural interface for all scorer implementations."""

from collections.abc import Awaitable
from typing import Any, Protocol

from evalrun.scorer.domain.score import ScoreRecord


class Scorer(Protocol):
    """Any callable taking (output, expected) and returning a ScoreRecord.

    Plain functions, async functions and objects defining ``__call__`` all
    satisfy the protocol. Scorers that cannot work without an expected value
    raise InvalidScorerInputError when expected is None.
    """

    def __call__(
        self, output: Any, expected: Any
    ) -> ScoreRecord | Awaitable[ScoreRecord]: ...


def scorer_name(scorer: Scorer) -> str:
    """Best-effort display name used when a scorer fails before naming itself."""
    name = getattr(scorer, "name", None)
    if isinstance(name, str) and name:
        return name
    func_name = getattr(scorer, "__name__", None)
    if isinstance(func_name, str) and func_name:
        return func_name
    return type(scorer).__name__
