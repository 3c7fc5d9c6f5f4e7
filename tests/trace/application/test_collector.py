"""Tests for TraceCollector and trace_scope."""

import asyncio

from evalrun.trace.application.collector import (
    TraceCollector,
    current_collector,
    trace_scope,
)
from evalrun.trace.domain.event import TraceEvent


def _event(start: float, end: float, output: str = "out") -> TraceEvent:
    return TraceEvent(start=start, end=end, input="in", output=output)


class TestTraceCollector:
    """The collector buffers events in report order and resets on drain."""

    def test_drain_returns_events_in_report_order(self) -> None:
        collector = TraceCollector()
        collector.report(_event(0, 10, output="first"))
        collector.report(_event(5, 20, output="second"))

        drained = collector.drain()

        assert [e.output for e in drained] == ["first", "second"]

    def test_drain_resets_buffer(self) -> None:
        collector = TraceCollector()
        collector.report(_event(0, 10))

        collector.drain()

        assert collector.drain() == []

    def test_drain_with_no_reports_is_empty(self) -> None:
        assert TraceCollector().drain() == []


class TestTraceScope:
    """trace_scope binds a fresh collector for the duration of the block."""

    def test_no_collector_outside_scope(self) -> None:
        assert current_collector() is None

    def test_collector_bound_inside_scope(self) -> None:
        with trace_scope() as collector:
            assert current_collector() is collector

    def test_binding_removed_after_scope(self) -> None:
        with trace_scope():
            pass

        assert current_collector() is None

    def test_binding_removed_when_body_raises(self) -> None:
        try:
            with trace_scope():
                raise ValueError("boom")
        except ValueError:
            pass

        assert current_collector() is None

    def test_nested_scope_restores_outer_collector(self) -> None:
        with trace_scope() as outer:
            with trace_scope() as inner:
                assert current_collector() is inner
            assert current_collector() is outer

    def test_each_scope_gets_a_fresh_collector(self) -> None:
        with trace_scope() as first:
            first.report(_event(0, 1))
        with trace_scope() as second:
            assert second.drain() == []


class TestTraceScopeIsolation:
    """Concurrent tasks each see only their own collector."""

    async def test_concurrent_scopes_do_not_share_events(self) -> None:
        async def invocation(label: str, count: int, delay: float) -> list[TraceEvent]:
            with trace_scope() as collector:
                for i in range(count):
                    current = current_collector()
                    assert current is not None
                    current.report(_event(i, i + 1, output=f"{label}-{i}"))
                    await asyncio.sleep(delay)
                return collector.drain()

        a_events, b_events = await asyncio.gather(
            invocation("a", count=3, delay=0.002),
            invocation("b", count=2, delay=0.001),
        )

        assert [e.output for e in a_events] == ["a-0", "a-1", "a-2"]
        assert [e.output for e in b_events] == ["b-0", "b-1"]
