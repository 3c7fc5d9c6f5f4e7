"""Token usage totals across the traces of a row."""

from collections.abc import Sequence

from evalrun.trace.domain.event import TokenUsage, TraceEvent


def sum_token_usage(traces: Sequence[TraceEvent]) -> TokenUsage | None:
    """Return the summed usage of traces, or None unless every trace reports usage.

    A row without traces also yields None: a partial or empty total would read
    as a complete count.
    """
    if not traces or any(trace.usage is None for trace in traces):
        return None
    return TokenUsage(
        prompt_tokens=sum(trace.usage.prompt_tokens for trace in traces if trace.usage),
        completion_tokens=sum(
            trace.usage.completion_tokens for trace in traces if trace.usage
        ),
    )
