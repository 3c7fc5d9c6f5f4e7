"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str) -> None:
        self._log.info("config.loaded", path=path)

    def config_unbounded_concurrency_warning(self) -> None:
        self._log.warning(
            "config.unbounded_concurrency_warning",
            message="max_concurrent is unset; every dataset row will run at once",
        )
