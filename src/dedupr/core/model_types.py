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

"""Model types and enumerations for dedupr.

- ``Strategy`` selects the membership check used while deduplicating
- ``LogFormat`` and ``LogComponent`` describe structured logging output
- ``ValueKind`` and ``OutputFormat`` drive CLI token parsing and rendering
"""

from __future__ import annotations

from dedupr.compat import Self, StrEnum
from dedupr.exceptions import DeduprValidationError


class _ParsableEnum(StrEnum):
    """String enum with a forgiving ``from_str`` constructor."""

    @classmethod
    def _label(cls) -> str:
        return cls.__name__

    @classmethod
    def from_str(cls, raw: str) -> Self:
        """Create an enum member from a string value.

        Args:
            raw: String representation of the member, case-insensitive.

        Returns:
            The matching enum member.

        Raises:
            DeduprValidationError: If the string does not match any member.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            msg = f"Unknown {cls._label()} '{raw}' (expected one of: {choices})"
            raise DeduprValidationError(msg) from exc


class Strategy(_ParsableEnum):
    """Membership check used to track already-emitted values.

    Attributes:
        HASH: Set-backed lookups. Linear time; elements must be hashable.
        LINEAR: List scan using ``==``. Quadratic time; works for any element.
    """

    HASH = "hash"
    LINEAR = "linear"

    @classmethod
    def _label(cls) -> str:
        return "strategy"


class LogFormat(_ParsableEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def _label(cls) -> str:
        return "log format"


class LogComponent(StrEnum):
    """Logical component recorded on structured log records."""

    CLI = "cli"
    CORE = "core"
    CONFIG = "config"


class ValueKind(_ParsableEnum):
    """Type that CLI tokens are converted to before deduplication."""

    STR = "str"
    INT = "int"
    FLOAT = "float"

    @classmethod
    def _label(cls) -> str:
        return "value type"


class OutputFormat(_ParsableEnum):
    """Rendering used by ``dedupr run`` for its result."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def _label(cls) -> str:
        return "output format"


__all__ = [
    "LogComponent",
    "LogFormat",
    "OutputFormat",
    "Strategy",
    "ValueKind",
]
