from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any configure_structlog call so it cannot leak into later tests."""
    yield
    structlog.reset_defaults()
