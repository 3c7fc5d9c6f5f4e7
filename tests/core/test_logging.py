"""Tests for configure_structlog."""

import pytest
import structlog

from evalrun.core.logging import configure_structlog


class TestConfigureStructlog:
    def test_json_events_are_written_to_stderr(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_structlog(log_format="json")

        structlog.get_logger().info("evaluation.started", eval_name="Basics")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "evaluation.started"' in captured.err
        assert '"eval_name": "Basics"' in captured.err

    def test_events_below_level_are_dropped(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_structlog(log_format="json", log_level="warning")

        structlog.get_logger().info("evaluation.started")
        structlog.get_logger().warning("evaluation.completed")

        err = capsys.readouterr().err
        assert "evaluation.started" not in err
        assert "evaluation.completed" in err

    def test_invalid_format_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid log format"):
            configure_structlog(log_format="xml")  # type: ignore[arg-type]

    def test_invalid_level_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_structlog(log_level="loud")  # type: ignore[arg-type]
