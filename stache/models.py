# stache — Mustache template loader and client-side bundle compiler
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Data models for scanned and stringified templates."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class RawTemplate:
    """A template file as read from disk.

    ``id`` is the logical name (file name without directory or extension)
    and ``contents`` is the file text with any byte-order mark removed.
    """

    id: str
    contents: str


@dataclass(frozen=True)
class StringifiedTemplate:
    """A template compiled to client-side source code.

    ``last`` is true only for the final entry of a bundle, so that the
    wrapper template can omit the trailing separator.
    """

    id: str
    script: str
    last: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
