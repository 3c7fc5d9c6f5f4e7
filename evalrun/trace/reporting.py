"""Public trace reporting surface used from inside task implementations."""

import time
from collections.abc import Iterator
from contextlib import contextmanager

from evalrun.core.content import Content
from evalrun.trace.application.collector import current_collector
from evalrun.trace.domain.event import TokenUsage, TraceEvent
from evalrun.trace.domain.observer import TraceObserver
from evalrun.trace.infrastructure.observer import StructlogTraceObserver

_observer: TraceObserver = StructlogTraceObserver()


def set_trace_observer(observer: TraceObserver) -> TraceObserver:
    """Replace the observer notified about dropped traces; returns the old one."""
    global _observer
    previous = _observer
    _observer = observer
    return previous


def now_ms() -> float:
    """Wall-clock timestamp in milliseconds, the unit of TraceEvent.start/end."""
    return time.time() * 1000


def report_trace(
    event: TraceEvent | None = None,
    *,
    start: float | None = None,
    end: float | None = None,
    input: Content = None,
    output: Content = None,
    usage: TokenUsage | dict[str, int] | None = None,
) -> None:
    """Attach a trace to the task invocation currently being evaluated.

    Accepts either a ready-made TraceEvent or its fields as keywords. Outside
    an evaluation the trace is dropped and the observer is told about it.

    Raises:
        ValueError: if neither an event nor both start and end are given.
    """
    if event is None:
        if start is None or end is None:
            raise ValueError(
                "Failed to report trace: pass a TraceEvent or both start and end"
            )
        event = TraceEvent.model_validate(
            {
                "start": start,
                "end": end,
                "input": input,
                "output": output,
                "usage": usage,
            }
        )

    collector = current_collector()
    if collector is None:
        _observer.trace_reported_outside_scope(start=event.start, end=event.end)
        return
    collector.report(event)


class Span:
    """Mutable handle yielded by trace_span; set output and usage before exit."""

    def __init__(self, input: Content) -> None:
        self.input = input
        self.output: Content = None
        self.usage: TokenUsage | dict[str, int] | None = None
        self.start = now_ms()


@contextmanager
def trace_span(input: Content = None) -> Iterator[Span]:
    """Time a block and report it as a trace when the block exits.

    Usage::

        with trace_span(input=messages) as span:
            reply = await client.complete(messages)
            span.output = reply.text
            span.usage = {"prompt_tokens": 12, "completion_tokens": 40}
    """
    span = Span(input=input)
    try:
        yield span
    finally:
        report_trace(
            start=span.start,
            end=now_ms(),
            input=span.input,
            output=span.output,
            usage=span.usage,
        )
