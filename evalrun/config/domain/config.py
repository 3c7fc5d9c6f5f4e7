"""HarnessConfig — settings shared by every run a harness executes."""

from typing import Literal

from pydantic import BaseModel, Field


class HarnessConfig(BaseModel, frozen=True):
    """Root configuration for an evaluation harness.

    max_concurrent of None runs every row of a dataset at once.
    score_tolerance is the margin within which a score counts as unchanged
    relative to the previous run.
    """

    max_concurrent: int | None = Field(default=None, ge=1)
    score_tolerance: float = Field(default=0.0, ge=0.0)
    log_format: Literal["console", "json"] = "console"
    log_level: Literal["debug", "info", "warning", "error"] = "info"
    show_progress: bool = True
