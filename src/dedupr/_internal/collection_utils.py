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

"""First-occurrence deduplication primitives.

Both variants walk the input once and keep the first appearance of every
value. They differ only in how the seen-set is represented: ``dedupe_preserve``
uses a ``set`` and needs hashable values, ``dedupe_linear`` scans the output
list and only needs ``==``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

H = TypeVar("H", bound=Hashable)
T = TypeVar("T")


def dedupe_preserve(values: Iterable[H]) -> list[H]:
    """Return items in order, dropping subsequent duplicates.

    Args:
        values: Iterable of hashable items whose first occurrence should be
            preserved.

    Returns:
        A new list containing the first appearance of each unique value,
        ordered by the original traversal.

    Raises:
        TypeError: If an item is not hashable.
    """
    seen: set[H] = set()
    result: list[H] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def dedupe_linear(values: Iterable[T]) -> list[T]:
    """Return items in order using equality checks against the emitted items.

    Quadratic in the number of distinct values, but accepts elements that
    define ``__eq__`` without ``__hash__`` (lists, dicts, mutable records).

    Args:
        values: Iterable of equality-comparable items.

    Returns:
        A new list containing the first appearance of each unique value.
    """
    result: list[T] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


__all__ = ["dedupe_linear", "dedupe_preserve"]
