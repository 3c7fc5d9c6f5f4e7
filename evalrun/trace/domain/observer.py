"""TraceObserver port — domain events emitted by the trace reporting channel."""

from typing import Protocol


class TraceObserver(Protocol):
    """Observer port for trace domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def trace_reported_outside_scope(self, start: float, end: float) -> None: ...
