"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str) -> None: ...

    def config_unbounded_concurrency_warning(self) -> None: ...
