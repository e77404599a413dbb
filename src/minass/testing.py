"""In-memory failure sink for running assertions outside a test runner."""

from __future__ import annotations


class Recorder:
    """Collects failure messages instead of reporting them.

    Satisfies :class:`minass.TestingT`. Useful for scripts, for wiring minass
    into runners without a dedicated adapter, and for testing assertions.
    """

    def __init__(self) -> None:
        self.failures: list[str] = []
        self.helper_calls = 0

    def helper(self) -> None:
        self.helper_calls += 1

    def error(self, message: str) -> None:
        self.failures.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def reset(self) -> None:
        """Forget all recorded failures."""
        self.failures.clear()
        self.helper_calls = 0
