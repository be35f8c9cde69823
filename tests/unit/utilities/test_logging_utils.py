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

"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from dedupr._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from dedupr.core.model_types import LogComponent, LogFormat, Strategy
from dedupr.exceptions import DeduprValidationError

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: pytest.CaptureFixture[str]) -> None:
    config = configure_logging("json")
    assert config.format is LogFormat.JSON
    logger = logging.getLogger("dedupr")
    logger.info(
        "hello",
        extra=structured_extra(
            LogComponent.CORE,
            strategy=Strategy.HASH,
            input_count=4,
            output_count=2,
            duration_ms=1.5,
        ),
    )

    def _raise_logging_failure() -> None:
        message = "boom"
        raise RuntimeError(message)

    try:
        _raise_logging_failure()
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    lines = [line for line in captured.err.strip().splitlines() if line]
    payload = json.loads(lines[-2])
    assert payload["message"] == "hello"
    assert payload["level"] == "info"
    assert payload["logger"] == "dedupr"
    assert payload["component"] == "core"
    assert payload["strategy"] == "hash"
    assert payload["input_count"] == 4
    assert payload["output_count"] == 2
    assert payload["duration_ms"] == 1.5

    exception_payload = json.loads(lines[-1])
    assert exception_payload["message"] == "broken"
    assert "exc_info" in exception_payload


def test_configure_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    assert LOG_FORMATS == ("text", "json")
    config = configure_logging("text", log_level="warning")
    assert config.level == logging.WARNING
    logger = logging.getLogger("dedupr.cli")
    logger.info("ignored")
    logger.warning("recorded")
    captured = capsys.readouterr()
    assert "ignored" not in captured.err
    assert "[WARNING] recorded" in captured.err


def test_configure_logging_honors_env_overrides(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DEDUPR_LOG_FORMAT", "json")
    monkeypatch.setenv("DEDUPR_LOG_LEVEL", "error")
    config = configure_logging()
    assert config.level_name == "error"
    logger = logging.getLogger("dedupr")
    logger.warning("warned")
    logger.error("failed", extra=structured_extra(LogComponent.CLI, exit_code=2))
    captured = capsys.readouterr()
    lines = [line for line in captured.err.splitlines() if line]
    last = json.loads(lines[-1])
    assert last["message"] == "failed"
    assert last["exit_code"] == 2
    assert all("warned" not in line for line in lines)


def test_configure_logging_unknown_level_falls_back_to_info() -> None:
    assert configure_logging("text", log_level="chatty").level == logging.INFO


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(DeduprValidationError, match="Unknown log format"):
        _ = configure_logging("xml")


def test_structured_extra_normalizes_inputs(tmp_path: Path) -> None:
    extra = structured_extra(
        LogComponent.CONFIG,
        strategy="linear",
        path=tmp_path / "dedupr.toml",
        details={"source": "cwd"},
    )
    assert extra["component"] is LogComponent.CONFIG
    assert "strategy" in extra
    assert extra["strategy"] is Strategy.LINEAR
    assert "path" in extra
    assert extra["path"].endswith("dedupr.toml")
    assert "details" in extra
    assert extra["details"] == {"source": "cwd"}


def test_structured_extra_drops_empty_fields() -> None:
    extra = structured_extra(LogComponent.CLI, details={})
    assert extra == {"component": LogComponent.CLI}
