"""Builders for RunRecord and ResultRecord used across history tests."""

from datetime import UTC, datetime, timedelta

from evalrun.evaluation.domain.result import ResultRecord
from evalrun.evaluation.domain.run import RunRecord, RunStatus
from evalrun.scorer.domain.score import ScoreRecord

BASE_TIME = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)


def make_result(output: str, score: float | None = 1.0) -> ResultRecord:
    return ResultRecord(
        input="in",
        expected="in",
        output=output,
        duration=10,
        scores=[ScoreRecord(name="Levenshtein", score=score)],
        status="success",
    )


def make_run(
    eval_name: str = "Basics",
    minutes: int = 0,
    status: RunStatus = "success",
    results: list[ResultRecord] | None = None,
    run_id: str | None = None,
) -> RunRecord:
    return RunRecord(
        eval_name=eval_name,
        run_id=run_id or f"{eval_name}-{minutes}",
        created_at=BASE_TIME + timedelta(minutes=minutes),
        status=status,
        results=results or [],
        source_code_hash="abc",
    )
