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

"""Configuration models and validation for dedupr.

TOML data is validated by the Pydantic ``ConfigModel`` and then converted to
the frozen ``DedupeConfig`` dataclass that the rest of the package consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, field_validator

from dedupr.core.model_types import LogFormat, Strategy, ValueKind
from dedupr.exceptions import DeduprValidationError

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0
LOG_LEVEL_CHOICES: Final[tuple[str, ...]] = ("debug", "info", "warning", "error")


class ConfigValidationError(DeduprValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of dedupr.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid dedupr configuration in {path}: {error}")


@dataclass(slots=True, frozen=True)
class DedupeConfig:
    """Resolved defaults for the dedupr CLI.

    Attributes:
        strategy: Membership strategy used by ``dedupr run``.
        value_type: Type CLI tokens are converted to.
        log_format: Default log output format.
        log_level: Default log verbosity name.
    """

    strategy: Strategy = Strategy.HASH
    value_type: ValueKind = ValueKind.STR
    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"


class ConfigModel(BaseModel):
    """Pydantic model for validating dedupr configuration from TOML."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = CONFIG_VERSION
    strategy: Strategy = Strategy.HASH
    value_type: ValueKind = ValueKind.STR
    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"

    @field_validator("config_version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(value, CONFIG_VERSION)
        return value

    @field_validator("strategy", "value_type", "log_format", "log_level", mode="before")
    @classmethod
    def _normalise_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in LOG_LEVEL_CHOICES:
            allowed = ", ".join(LOG_LEVEL_CHOICES)
            msg = f"log_level must be one of: {allowed}"
            raise ValueError(msg)
        return value


def model_to_config(model: ConfigModel) -> DedupeConfig:
    """Convert a validated ``ConfigModel`` to the runtime dataclass.

    Args:
        model: Validated configuration model.

    Returns:
        Frozen ``DedupeConfig`` carrying the same values.
    """
    return DedupeConfig(
        strategy=model.strategy,
        value_type=model.value_type,
        log_format=model.log_format,
        log_level=model.log_level,
    )


__all__ = [
    "CONFIG_VERSION",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "DedupeConfig",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "model_to_config",
]
