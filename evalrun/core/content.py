"""Structured content carried verbatim through the evaluation pipeline."""

from typing import Any

# Inputs, outputs, expected values and metadata are whatever the caller's task
# produces: usually JSON-like (str | int | float | bool | None | list | dict),
# but arbitrary Python objects pass through untouched and are never coerced.
type Content = Any
