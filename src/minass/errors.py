"""Error types raised by minass."""

from pathlib import Path


class UsageError(TypeError):
    """Raised when an assertion is called against its argument contract (developer error)."""


class ConfigError(Exception):
    """Raised when the ``[tool.minass]`` table cannot be loaded."""

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause

        message = f"Invalid minass configuration in {path}"
        if cause:
            message += f"\n\nCause: {cause}"

        super().__init__(message)
