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

# ruff: noqa: ANN401

"""Shared CLI type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import argparse

    from dedupr.config import DedupeConfig

__all__ = ["CLIContext", "SubparserCollection"]


class SubparserCollection(Protocol):
    """The part of ``argparse._SubParsersAction`` used by command modules."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser: ...


@dataclass(slots=True, frozen=True)
class CLIContext:
    """State shared by command handlers after global flags are processed.

    Attributes:
        config: Configuration defaults, already resolved from disk.
    """

    config: DedupeConfig
