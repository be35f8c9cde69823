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

"""Common exception hierarchy for dedupr."""

from __future__ import annotations

__all__ = [
    "DeduprError",
    "DeduprTypeError",
    "DeduprValidationError",
    "UnhashableElementError",
]


class DeduprError(Exception):
    """Base error for all dedupr exceptions."""


class DeduprValidationError(DeduprError, ValueError):
    """Raised when input data fails validation checks."""


class DeduprTypeError(DeduprError, TypeError):
    """Raised when input data has an unexpected type."""


class UnhashableElementError(DeduprTypeError):
    """Raised when the hash strategy meets an element that cannot be hashed."""

    def __init__(self, index: int, value: object) -> None:
        """Initialize the exception with the offending position and value.

        Args:
            index: Zero-based position of the element in the input.
            value: The element that could not be hashed.
        """
        self.index = index
        self.value = value
        type_name = type(value).__name__
        super().__init__(
            f"element at index {index} of type '{type_name}' is not hashable; "
            "use strategy='linear' for equality-only values",
        )
