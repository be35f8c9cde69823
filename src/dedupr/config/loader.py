# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading for dedupr.

Configuration is read from ``dedupr.toml``, ``.dedupr.toml`` or the
``[tool.dedupr]`` table of ``pyproject.toml`` in the working directory, in that
order. An explicit path skips the search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from dedupr._internal.logging_utils import structured_extra
from dedupr.compat import tomllib
from dedupr.core.model_types import LogComponent

from .models import (
    ConfigModel,
    ConfigReadError,
    DedupeConfig,
    InvalidConfigFileError,
    model_to_config,
)

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("dedupr.toml", ".dedupr.toml", "pyproject.toml")

logger: logging.Logger = logging.getLogger("dedupr.config")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: DedupeConfig
    path: Path | None


def load_config(explicit_path: Path | None = None, *, base_dir: Path | None = None) -> DedupeConfig:
    """Load dedupr configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file.
        base_dir: Directory searched when no explicit path is given. Defaults
            to the current working directory.

    Returns:
        The resolved ``DedupeConfig``.
    """
    return load_config_with_metadata(explicit_path, base_dir=base_dir).config


def load_config_with_metadata(
    explicit_path: Path | None = None,
    *,
    base_dir: Path | None = None,
) -> LoadedConfig:
    """Load dedupr configuration with metadata about the source file.

    Args:
        explicit_path: Optional explicit path to a configuration file. A missing
            explicit file is an error; missing search candidates are skipped.
        base_dir: Directory searched when no explicit path is given.

    Returns:
        LoadedConfig: Parsed configuration and the path it originated from.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If the configuration fails validation.
    """
    root = base_dir if base_dir is not None else Path.cwd()
    if explicit_path is not None:
        candidate = explicit_path if explicit_path.is_absolute() else (root / explicit_path).resolve()
        if not candidate.is_file():
            raise ConfigReadError(candidate, FileNotFoundError("no such file"))
        loaded = _load_candidate_config(candidate, explicit=True)
        if loaded is not None:
            return loaded
    else:
        for name in CONFIG_FILENAMES:
            candidate = root / name
            if not candidate.is_file():
                continue
            loaded = _load_candidate_config(candidate, explicit=False)
            if loaded is not None:
                return loaded

    logger.debug("No dedupr configuration found; using defaults", extra=structured_extra(LogComponent.CONFIG))
    return LoadedConfig(config=DedupeConfig(), path=None)


def _load_candidate_config(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_dedupr_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.dedupr] table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    logger.debug(
        "Loaded configuration from %s",
        candidate,
        extra=structured_extra(LogComponent.CONFIG, path=candidate, strategy=model.strategy),
    )
    return LoadedConfig(config=model_to_config(model), path=candidate.resolve())


def _extract_dedupr_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the dedupr configuration payload from a TOML mapping.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate, or None when ``pyproject.toml`` carries no
        ``[tool.dedupr]`` table.

    Raises:
        InvalidConfigFileError: If ``[tool.dedupr]`` exists but is not a table.
    """
    if candidate.name != "pyproject.toml":
        return raw_map
    tool_section = raw_map.get("tool")
    if not isinstance(tool_section, dict):
        return None
    section = cast("dict[str, object]", tool_section).get("dedupr")
    if section is None:
        return None
    if not isinstance(section, dict):
        message = "[tool.dedupr] must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


__all__ = ["CONFIG_FILENAMES", "LoadedConfig", "load_config", "load_config_with_metadata"]
