"""Configuration loaded from the ``[tool.minass]`` table of pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from minass.errors import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"


class MinassConfig(BaseModel):
    """Rendering options for value dumps in failure messages.

    Attributes:
    ----------
    max_width: int
        Width passed to the pretty printer before it wraps containers.
    max_length: int | None
        Maximum number of container items shown before eliding the rest.
    max_string: int | None
        Maximum number of characters shown for nested strings.
    expand_all: bool
        Expand every container onto its own lines, regardless of width.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_width: int = Field(default=80, ge=20)
    max_length: int | None = Field(default=None, ge=1)
    max_string: int | None = Field(default=None, ge=1)
    expand_all: bool = False


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> MinassConfig:
    """Load config from the nearest pyproject.toml.

    A missing file or a missing ``[tool.minass]`` table yields the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or the table does not validate.
    """
    path = find_pyproject(start)
    if path is None:
        logger.debug("No %s found; using default config", PYPROJECT_NAME)
        return MinassConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, e) from e

    table = data.get("tool", {}).get("minass", {})
    try:
        config = MinassConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(path, e) from e

    logger.debug("Loaded minass config from %s: %r", path, config)
    return config


_config: MinassConfig | None = None


def get_config() -> MinassConfig:
    """Return the process-wide config, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: MinassConfig | None) -> None:
    """Override the process-wide config; ``None`` reloads it on next use."""
    global _config
    _config = config
