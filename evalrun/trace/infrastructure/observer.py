"""Structlog implementation of the TraceObserver port."""

import structlog


class StructlogTraceObserver:
    """Delegates trace domain events to structlog.

    Satisfies the TraceObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def trace_reported_outside_scope(self, start: float, end: float) -> None:
        self._log.warning(
            "trace.report_outside_scope",
            start=start,
            end=end,
            message="report_trace called outside an evaluation task; trace dropped",
        )
