"""Base exception classes for all evalrun-specific errors."""


class EvalrunError(Exception):
    """Base class for all evalrun errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigurationError(EvalrunError):
    """Base class for caller-configuration errors.

    A ConfigurationError aborts the evaluation. It is never downgraded to a
    failed row or a null score.
    """
