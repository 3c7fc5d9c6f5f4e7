"""Timeline positions of traces within their row's total trace span."""

from collections.abc import Sequence

from evalrun.trace.domain.event import TraceEvent


def row_timeline(traces: Sequence[TraceEvent]) -> tuple[float, float]:
    """Return (row_start, row_total_span): first trace start to last trace end.

    An empty row has a zero span starting at 0.
    """
    if not traces:
        return 0.0, 0.0
    row_start = traces[0].start
    return row_start, traces[-1].end - row_start


def timeline_percent(
    trace: TraceEvent, row_start: float, row_total_span: float
) -> tuple[float, float]:
    """Position of trace as (start_percent, end_percent) of the row span.

    A zero span yields (0, 0), a zero-width segment, instead of NaN.
    """
    if row_total_span == 0:
        return 0.0, 0.0
    start_percent = (trace.start - row_start) / row_total_span * 100
    end_percent = (trace.end - row_start) / row_total_span * 100
    return start_percent, end_percent
