"""DatasetRow domain value object — one input/expected pair from a dataset."""

from pydantic import BaseModel, ConfigDict

from evalrun.core.content import Content


class DatasetRow(BaseModel, frozen=True):
    """Immutable value object representing a single dataset entry.

    expected is None when the row carries no reference value.
    """

    model_config = ConfigDict(frozen=True)

    input: Content
    expected: Content = None
