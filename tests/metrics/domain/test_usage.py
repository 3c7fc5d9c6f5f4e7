"""Tests for sum_token_usage."""

from evalrun.metrics.domain.usage import sum_token_usage
from evalrun.trace.domain.event import TokenUsage, TraceEvent


def _trace(usage: TokenUsage | None) -> TraceEvent:
    return TraceEvent(start=0, end=1, input="in", output="out", usage=usage)


class TestSumTokenUsage:
    def test_sums_every_trace(self) -> None:
        traces = [
            _trace(TokenUsage(prompt_tokens=10, completion_tokens=5)),
            _trace(TokenUsage(prompt_tokens=3, completion_tokens=2)),
        ]

        total = sum_token_usage(traces)

        assert total == TokenUsage(prompt_tokens=13, completion_tokens=7)
        assert total is not None
        assert total.total_tokens == 20

    def test_one_trace_without_usage_yields_none(self) -> None:
        traces = [
            _trace(TokenUsage(prompt_tokens=10, completion_tokens=5)),
            _trace(None),
        ]

        assert sum_token_usage(traces) is None

    def test_no_traces_yields_none(self) -> None:
        assert sum_token_usage([]) is None
