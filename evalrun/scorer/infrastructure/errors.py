"""Error types raised by scorer implementations."""

from evalrun.core.errors import ConfigurationError


class InvalidScorerInputError(ConfigurationError):
    """Raised when a scorer is given input it structurally cannot score.

    The typical case is a scorer that compares against an expected value being
    run over a dataset row without one.
    """

    def __init__(self, scorer: str, reason: str) -> None:
        self.scorer = scorer
        super().__init__(f"Failed to score with {scorer}: {reason}")
