"""Tests for the DatasetRow, ResultRecord and RunRecord value objects."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from evalrun.evaluation.domain.result import ResultRecord
from evalrun.evaluation.domain.row import DatasetRow
from evalrun.evaluation.domain.run import RunRecord
from evalrun.scorer.domain.score import ScoreRecord

CREATED_AT = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)


def _run(status: str = "success", **overrides: object) -> RunRecord:
    fields: dict[str, object] = {
        "eval_name": "Basics",
        "run_id": "run-1",
        "created_at": CREATED_AT,
        "status": status,
        "source_code_hash": "abc",
    }
    fields.update(overrides)
    return RunRecord.model_validate(fields)


class TestDatasetRow:
    def test_expected_defaults_to_none(self) -> None:
        row = DatasetRow(input="hello")

        assert row.expected is None

    def test_input_is_required(self) -> None:
        with pytest.raises(ValidationError):
            DatasetRow.model_validate({"expected": "x"})

    def test_structured_content_is_kept_as_is(self) -> None:
        messages = [{"role": "user", "content": "hi"}]

        row = DatasetRow(input=messages, expected={"answer": 42})

        assert row.input == messages
        assert row.expected == {"answer": 42}


class TestResultRecord:
    def test_negative_duration_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ResultRecord(input="x", duration=-1, status="success")

    def test_unknown_status_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ResultRecord.model_validate(
                {"input": "x", "duration": 0, "status": "running"}
            )

    def test_score_named_returns_first_match(self) -> None:
        result = ResultRecord(
            input="x",
            duration=1,
            status="success",
            scores=[
                ScoreRecord(name="Levenshtein", score=0.5),
                ScoreRecord(name="Exact", score=0.0),
            ],
        )

        score = result.score_named("Exact")

        assert score is not None
        assert score.score == 0.0

    def test_score_named_returns_none_when_absent(self) -> None:
        result = ResultRecord(input="x", duration=1, status="success")

        assert result.score_named("Levenshtein") is None


class TestRunRecord:
    def test_running_record_is_not_terminal(self) -> None:
        assert not _run(status="running").is_terminal

    @pytest.mark.parametrize("status", ["success", "fail"])
    def test_finished_record_is_terminal(self, status: str) -> None:
        assert _run(status=status).is_terminal

    def test_unknown_status_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            _run(status="pending")

    def test_summary_omits_results(self) -> None:
        run = _run(
            results=[ResultRecord(input="x", duration=1, status="success")],
        )

        summary = run.summary()

        assert summary.eval_name == "Basics"
        assert summary.run_id == "run-1"
        assert summary.status == "success"
        assert summary.created_at == CREATED_AT
        assert not hasattr(summary, "results")

    def test_empty_source_code_hash_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            _run(source_code_hash="")
