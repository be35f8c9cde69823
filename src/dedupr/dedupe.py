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

"""Order-preserving duplicate removal.

``deduplicate`` is the validated entry point: it checks the input at the call
boundary, dispatches to the selected strategy and logs one debug record per
call. The unchecked primitives live in ``dedupr._internal.collection_utils``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, Final, TypeVar, cast

from dedupr._internal.collection_utils import dedupe_linear, dedupe_preserve
from dedupr._internal.logging_utils import structured_extra
from dedupr.core.model_types import LogComponent, Strategy
from dedupr.exceptions import DeduprTypeError, UnhashableElementError

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")

DEFAULT_STRATEGY: Final[Strategy] = Strategy.HASH
_TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)

logger: logging.Logger = logging.getLogger("dedupr.core")


def _coerce_strategy(strategy: Strategy | str) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    return Strategy.from_str(str(strategy))


def _materialise(values: Iterable[T]) -> Sequence[T]:
    if isinstance(values, _TEXT_TYPES):
        type_name = type(values).__name__
        msg = f"expected a sequence of values, got '{type_name}'; pass list(...) to split it into items"
        raise DeduprTypeError(msg)
    if isinstance(values, (list, tuple)):
        return values
    try:
        return list(values)
    except TypeError as exc:
        msg = f"expected an iterable of values, got '{type(values).__name__}'"
        raise DeduprTypeError(msg) from exc


def _find_unhashable(values: Sequence[T]) -> UnhashableElementError | None:
    for index, value in enumerate(values):
        try:
            _ = hash(value)
        except TypeError:
            return UnhashableElementError(index, value)
    return None


def deduplicate(values: Iterable[T], *, strategy: Strategy | str = DEFAULT_STRATEGY) -> list[T]:
    """Return the distinct elements of ``values`` in first-occurrence order.

    The input is never mutated and the result is always a new list, even when
    ``values`` contains no duplicates.

    Args:
        values: Ordered values to deduplicate. Any iterable except text
            (``str``, ``bytes``, ``bytearray``) is accepted; one-shot iterators
            are consumed.
        strategy: ``hash`` (default) for set-backed lookups, or ``linear`` for
            equality-only values such as lists or dicts.

    Returns:
        A new list holding each distinct element exactly once.

    Raises:
        DeduprTypeError: If ``values`` is text or not iterable, or if the hash
            strategy meets an unhashable element.
        DeduprValidationError: If ``strategy`` is not a known strategy name.
    """
    selected = _coerce_strategy(strategy)
    items = _materialise(values)
    started = time.perf_counter()
    if selected is Strategy.HASH:
        try:
            result = cast("list[T]", dedupe_preserve(cast("Sequence[Hashable]", items)))
        except TypeError as exc:
            # only rescan on failure to recover the offending index
            unhashable = _find_unhashable(items)
            if unhashable is None:
                raise
            raise unhashable from exc
    else:
        result = dedupe_linear(items)
    logger.debug(
        "Deduplicated %d values to %d",
        len(items),
        len(result),
        extra=structured_extra(
            LogComponent.CORE,
            strategy=selected,
            input_count=len(items),
            output_count=len(result),
            duration_ms=(time.perf_counter() - started) * 1000,
        ),
    )
    return result


__all__ = ["DEFAULT_STRATEGY", "deduplicate"]
