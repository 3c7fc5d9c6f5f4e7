"""TraceCollector — per-invocation buffer behind the trace reporting channel.

Each task invocation runs inside its own ``trace_scope()``. The active collector
lives in a ContextVar, and asyncio copies the context into every task it
creates, so rows executing concurrently never see each other's buffers.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from evalrun.trace.domain.event import TraceEvent

_current_collector: ContextVar["TraceCollector | None"] = ContextVar(
    "evalrun_trace_collector", default=None
)


class TraceCollector:
    """Accumulates the trace events reported during one task invocation."""

    def __init__(self) -> None:
        self._events: list[TraceEvent] = []

    def report(self, event: TraceEvent) -> None:
        self._events.append(event)

    def drain(self) -> list[TraceEvent]:
        """Return every event reported since the last drain, in report order."""
        events = self._events
        self._events = []
        return events


def current_collector() -> TraceCollector | None:
    """Return the collector bound to the running invocation, if any."""
    return _current_collector.get()


@contextmanager
def trace_scope() -> Iterator[TraceCollector]:
    """Bind a fresh TraceCollector to the current context for one invocation.

    The previous binding is restored on exit, including when the body raises.
    """
    collector = TraceCollector()
    token = _current_collector.set(collector)
    try:
        yield collector
    finally:
        _current_collector.reset(token)
