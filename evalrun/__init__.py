"""evalrun — evaluation harness for non-deterministic tasks with nested traces."""

from evalrun.core.errors import ConfigurationError, EvalrunError
from evalrun.evaluation.domain.definition import EvaluationDefinition
from evalrun.evaluation.domain.result import ResultRecord
from evalrun.evaluation.domain.row import DatasetRow
from evalrun.evaluation.domain.run import RunRecord
from evalrun.harness import Harness
from evalrun.scorer.domain.score import ScoreRecord
from evalrun.scorer.infrastructure.errors import InvalidScorerInputError
from evalrun.scorer.infrastructure.levenshtein import levenshtein
from evalrun.scorer.infrastructure.numeric_difference import numeric_difference
from evalrun.trace.domain.event import TokenUsage, TraceEvent
from evalrun.trace.reporting import report_trace, trace_span

__all__ = [
    "ConfigurationError",
    "DatasetRow",
    "EvalrunError",
    "EvaluationDefinition",
    "Harness",
    "InvalidScorerInputError",
    "ResultRecord",
    "RunRecord",
    "ScoreRecord",
    "TokenUsage",
    "TraceEvent",
    "levenshtein",
    "numeric_difference",
    "report_trace",
    "trace_span",
]
