"""Error types raised while orchestrating an evaluation."""

from evalrun.core.errors import ConfigurationError, EvalrunError


class NoScorersConfiguredError(ConfigurationError):
    """Raised when an evaluation is run without any scorer."""

    def __init__(self, eval_name: str) -> None:
        self.eval_name = eval_name
        super().__init__(
            f"Failed to run evaluation '{eval_name}': at least one scorer is required"
        )


class InvalidDatasetRowError(ConfigurationError):
    """Raised when the data function returns a row that is not a DatasetRow."""

    def __init__(self, eval_name: str, row_idx: int, reason: str) -> None:
        super().__init__(
            f"Failed to load dataset for '{eval_name}': row {row_idx}: {reason}"
        )


class DatasetLoadError(EvalrunError):
    """Raised when the data function itself fails."""

    def __init__(self, eval_name: str, reason: str) -> None:
        super().__init__(f"Failed to load dataset for '{eval_name}': {reason}")
