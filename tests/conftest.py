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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture(autouse=True)
def reset_dedupr_logging() -> Generator[None, None, None]:
    """Restore the ``dedupr`` logger and logging env vars after each test."""
    logger = logging.getLogger("dedupr")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    saved_env = {name: os.environ.get(name) for name in ("DEDUPR_LOG_FORMAT", "DEDUPR_LOG_LEVEL")}
    yield
    logger.handlers.clear()
    logger.handlers.extend(handlers)
    logger.setLevel(level)
    logger.propagate = propagate
    for child in ("dedupr.cli", "dedupr.core", "dedupr.config"):
        logging.getLogger(child).setLevel(logging.NOTSET)
    for name, value in saved_env.items():
        if value is None:
            _ = os.environ.pop(name, None)
        else:
            os.environ[name] = value
