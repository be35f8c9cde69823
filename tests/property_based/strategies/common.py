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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "hashable_values",
    "repetitive_int_lists",
    "unique_int_lists",
]


def repetitive_int_lists(max_size: int = 40, max_value: int = 8) -> st.SearchStrategy[list[int]]:
    """Integer lists drawn from a narrow range so duplicates are common.

    Args:
        max_size: Maximum list length.
        max_value: Largest integer value (values start at 0).

    Returns:
        Hypothesis strategy producing lists of small integers.
    """
    return st.lists(st.integers(min_value=0, max_value=max_value), max_size=max_size)


def unique_int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy that yields integer lists without repeats."""
    return st.lists(st.integers(), max_size=max_size, unique=True)


def hashable_values(max_size: int = 30) -> st.SearchStrategy[list[object]]:
    """Mixed hashable scalars and tuples, including ``True``/``1`` style collisions."""
    scalar = st.one_of(
        st.integers(min_value=-3, max_value=3),
        st.booleans(),
        st.text(max_size=2),
        st.none(),
    )
    element = st.one_of(scalar, st.tuples(scalar, scalar))
    return st.lists(element, max_size=max_size)
