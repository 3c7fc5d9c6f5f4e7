"""Harness — wires configuration, observers, history and the orchestrator together."""

import asyncio
from datetime import datetime
from pathlib import Path

from evalrun.config.domain.config import HarnessConfig
from evalrun.config.infrastructure.observer import StructlogConfigObserver
from evalrun.config.infrastructure.yaml_loader import YamlConfigLoader
from evalrun.core.logging import configure_structlog
from evalrun.evaluation.application.orchestrator import EvaluationOrchestrator
from evalrun.evaluation.domain.definition import EvaluationDefinition
from evalrun.evaluation.domain.observer import EvaluationObserver
from evalrun.evaluation.domain.run import RunRecord
from evalrun.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from evalrun.evaluation.infrastructure.observer import StructlogEvaluationObserver
from evalrun.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from evalrun.history.application.result_query import ResultQuery, ResultView
from evalrun.history.domain.index import RunHistoryIndex, RunningRegistry
from evalrun.history.infrastructure.in_memory import (
    InMemoryRunHistoryIndex,
    InMemoryRunningRegistry,
)
from evalrun.metrics.domain.score_state import ResultComparison, compare_results


def _default_observers(config: HarnessConfig) -> list[EvaluationObserver]:
    observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
    if config.show_progress and config.log_format != "json":
        observers.append(ProgressEvaluationObserver())
    return observers


class Harness:
    """Runs evaluations in this process and answers queries about their history."""

    def __init__(
        self,
        config: HarnessConfig | None = None,
        history: RunHistoryIndex | None = None,
        registry: RunningRegistry | None = None,
        observers: list[EvaluationObserver] | None = None,
    ) -> None:
        self._config = config or HarnessConfig()
        self._history = history if history is not None else InMemoryRunHistoryIndex()
        self._registry = (
            registry if registry is not None else InMemoryRunningRegistry()
        )
        if observers is None:
            observers = _default_observers(self._config)
        self._orchestrator = EvaluationOrchestrator(
            history=self._history,
            registry=self._registry,
            observer=CompositeEvaluationObserver(observers=observers),
            max_concurrent=self._config.max_concurrent,
        )
        self._query = ResultQuery(history=self._history, registry=self._registry)

    @classmethod
    def from_config_file(cls, path: Path) -> "Harness":
        """Load a YAML config, configure structlog accordingly, and build a Harness.

        Raises:
            ConfigurationError: if the file is missing, invalid, or references
                unset environment variables.
        """
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=path)
        configure_structlog(
            log_format=config.log_format, log_level=config.log_level
        )
        return cls(config=config)

    @property
    def config(self) -> HarnessConfig:
        return self._config

    @property
    def history(self) -> RunHistoryIndex:
        return self._history

    async def run(self, definition: EvaluationDefinition) -> RunRecord:
        return await self._orchestrator.run(definition=definition)

    def run_sync(self, definition: EvaluationDefinition) -> RunRecord:
        """Run an evaluation from synchronous code with a fresh event loop."""
        return asyncio.run(self.run(definition=definition))

    def get_result(
        self,
        eval_name: str,
        result_index: int,
        timestamp: datetime | str | None = None,
    ) -> ResultView:
        return self._query.get_result(
            eval_name=eval_name, result_index=result_index, timestamp=timestamp
        )

    def compare(
        self,
        eval_name: str,
        result_index: int,
        timestamp: datetime | str | None = None,
    ) -> ResultComparison:
        """Score states of one row against the same row of the preceding run."""
        view = self.get_result(
            eval_name=eval_name, result_index=result_index, timestamp=timestamp
        )
        return compare_results(
            result=view.result,
            prev_result=view.prev_result,
            tolerance=self._config.score_tolerance,
        )

    def is_running(self, eval_name: str) -> bool:
        return self._query.is_running(eval_name)

    def is_live(self, eval_name: str, timestamp: datetime | str | None) -> bool:
        return self._query.is_live(eval_name=eval_name, timestamp=timestamp)
