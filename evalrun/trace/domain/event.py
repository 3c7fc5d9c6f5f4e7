"""TraceEvent and TokenUsage value objects — one reported sub-span of a task."""

from pydantic import BaseModel, ConfigDict

from evalrun.core.content import Content


class TokenUsage(BaseModel, frozen=True):
    """Immutable value object capturing token usage from one model call."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int
    completion_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


class TraceEvent(BaseModel, frozen=True):
    """Immutable record of one unit of work reported from inside a task.

    start and end are millisecond timestamps. start <= end is expected but not
    validated; consumers degrade gracefully on malformed spans.
    """

    model_config = ConfigDict(frozen=True)

    start: float
    end: float
    input: Content
    output: Content
    usage: TokenUsage | None = None

    @property
    def duration(self) -> float:
        return self.end - self.start
