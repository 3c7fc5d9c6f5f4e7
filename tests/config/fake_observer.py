"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[str] = []
        self.unbounded_warnings: int = 0

    def config_loaded(self, path: str) -> None:
        self.loaded.append(path)

    def config_unbounded_concurrency_warning(self) -> None:
        self.unbounded_warnings += 1
