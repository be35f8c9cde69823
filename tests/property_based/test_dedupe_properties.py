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

"""Property-based tests for deduplicate."""

from __future__ import annotations

import pytest
from hypothesis import given

from dedupr import Strategy, deduplicate
from tests.property_based.strategies import hashable_values, repetitive_int_lists, unique_int_lists

pytestmark = pytest.mark.property


@given(repetitive_int_lists())
def test_output_holds_each_input_value_exactly_once(values: list[int]) -> None:
    result = deduplicate(values)
    assert len(result) == len(set(result))
    assert set(result) == set(values)
    assert len(result) <= len(values)


@given(repetitive_int_lists())
def test_output_follows_first_occurrence_order(values: list[int]) -> None:
    result = deduplicate(values)
    positions = [values.index(value) for value in result]
    assert positions == sorted(positions)


@given(repetitive_int_lists())
def test_output_is_subsequence_of_input(values: list[int]) -> None:
    remaining = iter(values)
    assert all(any(candidate == value for candidate in remaining) for value in deduplicate(values))


@given(repetitive_int_lists())
def test_deduplicate_is_idempotent(values: list[int]) -> None:
    once = deduplicate(values)
    assert deduplicate(once) == once


@given(unique_int_lists())
def test_unique_input_is_returned_as_equal_copy(values: list[int]) -> None:
    result = deduplicate(values)
    assert result == values
    assert result is not values


@given(repetitive_int_lists())
def test_input_is_not_mutated(values: list[int]) -> None:
    snapshot = list(values)
    _ = deduplicate(values)
    assert values == snapshot


@given(hashable_values())
def test_strategies_agree_on_hashable_input(values: list[object]) -> None:
    assert deduplicate(values, strategy=Strategy.HASH) == deduplicate(values, strategy=Strategy.LINEAR)
