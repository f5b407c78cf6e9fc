# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and file sources for the lint fix loop."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    CONFIG_RELATIVE_PATH,
    DEFAULT_JOBS,
    DEFAULT_MAX_ITERATIONS,
    PYPROJECT_FILENAME,
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
)
from .models import LintTarget

LOGGER = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class EngineConfig(BaseModel):
    """Plain configuration record consumed by the fix iteration controller."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_iterations: int = Field(
        default=DEFAULT_MAX_ITERATIONS,
        ge=1,
        validation_alias=AliasChoices("maxIterations", "max_iterations", "max-iterations"),
        serialization_alias="maxIterations",
    )
    targets: tuple[LintTarget, ...]
    jobs: int = Field(default=DEFAULT_JOBS, ge=1)
    timeout: float | None = Field(default=None, gt=0)


class ConfigSource(Protocol):
    """Protocol implemented by configuration document readers."""

    name: str

    def load(self) -> Mapping[str, Any] | None:
        """Return the raw configuration mapping, or ``None`` when absent."""

    def describe(self) -> str:
        """Return a human readable description of the source."""


class JsonConfigSource:
    """Load configuration from a standalone JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self.name = str(path)

    def load(self) -> Mapping[str, Any] | None:
        if not self._path.is_file():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Failed to parse lint-fix config at {self._path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuration at {self._path} must be a JSON object")
        return data

    def describe(self) -> str:
        return f"JSON configuration at {self.name}"


class PyProjectConfigSource:
    """Read configuration from ``[tool.lintfix]`` within ``pyproject.toml``."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self.name = str(path)

    def load(self) -> Mapping[str, Any] | None:
        return self._section()

    def _section(self) -> Mapping[str, Any] | None:
        if not self._path.is_file():
            return None
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"Failed to parse {self._path}: {exc}") from exc
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return None
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return None
        return section

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def default_sources(root: Path) -> tuple[ConfigSource, ...]:
    """Return configuration sources for ``root`` in precedence order.

    Args:
        root: Project root directory.

    Returns:
        tuple[ConfigSource, ...]: Sources searched by :func:`load_config`.
    """

    return (
        JsonConfigSource(root / CONFIG_RELATIVE_PATH),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
    )


def parse_config(data: Mapping[str, Any], *, source: str = "<memory>") -> EngineConfig:
    """Validate a raw configuration mapping.

    Args:
        data: Mapping decoded from a configuration document.
        source: Description of where ``data`` came from, used in error text.

    Returns:
        EngineConfig: Validated configuration.

    Raises:
        ConfigError: If ``data`` does not satisfy the configuration schema.
    """

    try:
        return EngineConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid lint-fix config in {source}: {exc}") from exc


def load_config(root: Path, *, sources: Sequence[ConfigSource] | None = None) -> EngineConfig | None:
    """Load configuration for ``root`` from the first source that provides one.

    Args:
        root: Project root directory.
        sources: Optional override of the sources to search.

    Returns:
        EngineConfig | None: Parsed configuration, or ``None`` when no source exists.

    Raises:
        ConfigError: If a present document cannot be parsed or validated.
    """

    for source in sources if sources is not None else default_sources(root):
        data = source.load()
        if data is None:
            continue
        LOGGER.debug("loading configuration from %s", source.describe())
        return parse_config(data, source=source.describe())
    return None


def load_engine_config(root: Path, *, sources: Sequence[ConfigSource] | None = None) -> EngineConfig | None:
    """Load configuration, returning ``None`` when it is missing or invalid.

    The engine stays inert for a project whose configuration cannot be used;
    the failure is only logged.

    Args:
        root: Project root directory.
        sources: Optional override of the sources to search.

    Returns:
        EngineConfig | None: Parsed configuration or ``None``.
    """

    try:
        return load_config(root, sources=sources)
    except ConfigError as exc:
        LOGGER.error("%s", exc)
        return None


__all__ = [
    "ConfigError",
    "ConfigSource",
    "EngineConfig",
    "JsonConfigSource",
    "PyProjectConfigSource",
    "default_sources",
    "load_config",
    "load_engine_config",
    "parse_config",
]
