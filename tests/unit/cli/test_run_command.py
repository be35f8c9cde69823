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

"""Unit tests for the ``run`` command helpers."""

from __future__ import annotations

import pytest

from dedupr.cli.commands.run import coerce_tokens, render_values
from dedupr.core.model_types import OutputFormat, ValueKind
from dedupr.exceptions import DeduprValidationError

pytestmark = [pytest.mark.unit, pytest.mark.cli]


def test_coerce_tokens_keeps_strings_by_default() -> None:
    tokens = ["1", "01"]
    assert coerce_tokens(tokens, ValueKind.STR) == ["1", "01"]


def test_coerce_tokens_parses_numbers() -> None:
    assert coerce_tokens(["1", "-2"], ValueKind.INT) == [1, -2]
    assert coerce_tokens(["1", "2.5e0"], ValueKind.FLOAT) == [1.0, 2.5]


def test_coerce_tokens_rejects_unparsable_float() -> None:
    with pytest.raises(DeduprValidationError, match="invalid float value 'x'"):
        _ = coerce_tokens(["1.0", "x"], ValueKind.FLOAT)


def test_render_values_formats() -> None:
    assert render_values([3, 1], OutputFormat.TEXT) == ["3", "1"]
    assert render_values(["a", 2], OutputFormat.JSON) == ['["a", 2]']
    assert render_values([], OutputFormat.JSON) == ["[]"]


@pytest.mark.parametrize("token", ["nan", "NaN", "inf", "-Infinity"])
def test_coerce_tokens_rejects_non_finite_floats(token: str) -> None:
    with pytest.raises(DeduprValidationError, match=f"invalid float value '{token}'"):
        _ = coerce_tokens(["1.5", token], ValueKind.FLOAT)


def test_render_values_refuses_non_finite_json() -> None:
    with pytest.raises(ValueError, match="not JSON compliant"):
        _ = render_values([float("nan")], OutputFormat.JSON)
