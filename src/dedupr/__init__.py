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

"""dedupr - order-preserving duplicate removal.

Provides ``deduplicate``, which returns the distinct elements of a sequence in
first-occurrence order, along with the unchecked hash-based and linear-scan
primitives it is built on and a small command-line wrapper.
"""

from __future__ import annotations

from dedupr.exceptions import (
    DeduprError,
    DeduprTypeError,
    DeduprValidationError,
    UnhashableElementError,
)

from ._internal.collection_utils import dedupe_linear, dedupe_preserve
from .config import DedupeConfig, load_config
from .core.model_types import Strategy
from .dedupe import deduplicate

__all__ = [
    "DedupeConfig",
    "DeduprError",
    "DeduprTypeError",
    "DeduprValidationError",
    "Strategy",
    "UnhashableElementError",
    "__version__",
    "dedupe_linear",
    "dedupe_preserve",
    "deduplicate",
    "load_config",
]

__version__ = "0.1.0"
