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

"""Reading template files and deriving template names from paths."""

from __future__ import annotations

from pathlib import Path

BYTE_ORDER_MARK = "\ufeff"


def strip_byte_order_mark(text: str) -> str:
    """Remove a leading UTF-8 byte-order mark, if present.

    Empty input is returned unchanged.
    """
    if text and text[0] == BYTE_ORDER_MARK:
        return text[1:]
    return text


def read_template_file(path: str | Path) -> str:
    """Read a template file as UTF-8 text with any byte-order mark removed.

    I/O and decoding errors propagate to the caller.
    """
    return strip_byte_order_mark(Path(path).read_text(encoding="utf-8"))


def short_name(name: str | Path) -> str:
    """Return the logical template name for a file name or path.

    ``"views/partials/header.mustache"`` becomes ``"header"``.  A name
    without an extension is returned whole; a leading dot does not count
    as an extension separator (``".hidden"`` stays ``".hidden"``).
    """
    base = str(name).replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    if dot <= 0:
        return base
    return base[:dot]
