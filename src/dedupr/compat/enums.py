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

"""``StrEnum`` for every supported interpreter.

``enum.StrEnum`` arrived in Python 3.11. On 3.10 a ``str``/``Enum`` mixin with
the same ``__str__`` behaviour stands in for it.
"""

from __future__ import annotations

import enum as _enum
from typing import TYPE_CHECKING, cast

from dedupr.compat.typing import override


class _StrEnumBase(str, _enum.Enum):
    """Shared base so type checkers see a single ``StrEnum`` shape."""


if TYPE_CHECKING:

    class StrEnum(_StrEnumBase):
        """Type-checker view of StrEnum."""

        @override
        def __str__(self) -> str: ...

else:
    _STDLIB_STR_ENUM = getattr(_enum, "StrEnum", None)

    if _STDLIB_STR_ENUM is None:

        class _Py310StrEnum(_StrEnumBase):
            @override
            def __str__(self) -> str:
                return str(self.value)

        StrEnum: type[_StrEnumBase] = _Py310StrEnum
    else:
        StrEnum = cast("type[_StrEnumBase]", _STDLIB_STR_ENUM)

__all__ = ["StrEnum"]
