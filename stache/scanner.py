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

"""Directory scanning for template files.

Every regular file directly inside the directory is read; subdirectories
are skipped.  Entries are returned sorted by file name so that bundles
come out in the same order on every filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from stache.files import read_template_file, short_name
from stache.models import RawTemplate

logger = logging.getLogger(__name__)


def scan_directory(directory: str | Path) -> list[RawTemplate]:
    """Read all template files in *directory*.

    Raises ``FileNotFoundError`` / ``NotADirectoryError`` /
    ``PermissionError`` when the directory cannot be listed.
    """
    directory = Path(directory)
    entries = sorted(directory.iterdir(), key=lambda p: p.name)
    templates: list[RawTemplate] = []
    for path in entries:
        if path.is_dir():
            continue
        templates.append(RawTemplate(id=short_name(path.name), contents=read_template_file(path)))
    logger.debug("Scanned %d template(s) in %s", len(templates), directory)
    return templates


def scan_directories(directories: Iterable[str | Path]) -> list[RawTemplate]:
    """Scan several directories in order and concatenate the results.

    Ids are not de-duplicated here; a later entry with the same id wins
    once the list is turned into a registry.
    """
    templates: list[RawTemplate] = []
    for directory in directories:
        templates.extend(scan_directory(directory))
    return templates
