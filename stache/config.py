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

"""Renderer options.

Defaults point at the ``views/`` directory shipped inside the package:

* ``views/layouts``: layouts
* ``views/partials``: partials (and the client bundle)
* ``views/sharedTemplates.mustache``: the bundle wrapper

Setting ``template_directory`` switches to single-root mode, where one
directory supplies both layouts and partials.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

VIEWS_DIR = Path(__file__).parent / "views"

DEFAULT_LAYOUTS_DIRECTORY = VIEWS_DIR / "layouts"
DEFAULT_PARTIALS_DIRECTORY = VIEWS_DIR / "partials"
DEFAULT_SHARED_TEMPLATES_TEMPLATE = VIEWS_DIR / "sharedTemplates.mustache"
DEFAULT_PARTIALS_DIRECTORY_NAME = "partials"

# camelCase option names accepted from configuration mappings
_ALIASES = {
    "layoutsDirectory": "layouts_directory",
    "partialsDirectory": "partials_directory",
    "templateDirectory": "template_directory",
    "sharedTemplatesTemplate": "shared_templates_template",
    "sharedTemplateTemplate": "shared_templates_template",
    "partialsDirectoryName": "partials_directory_name",
}

PathLike = str | Path


def _as_path(value: PathLike) -> Path:
    return Path(value).expanduser()


@dataclass
class RendererOptions:
    """Where to find templates.

    Attributes:
        layouts_directory: Directory of layout templates.
        partials_directory: Directory, or ordered directories, of partials.
        template_directory: Single root used for both layouts and partials.
        shared_templates_template: Wrapper template for the client bundle.
        partials_directory_name: Subdirectory of a host's view root that
            holds partials (used by :mod:`stache.middleware`).
    """

    layouts_directory: Path = DEFAULT_LAYOUTS_DIRECTORY
    partials_directory: Path | list[Path] = DEFAULT_PARTIALS_DIRECTORY
    template_directory: Path | None = None
    shared_templates_template: Path = DEFAULT_SHARED_TEMPLATES_TEMPLATE
    partials_directory_name: str = DEFAULT_PARTIALS_DIRECTORY_NAME

    def __post_init__(self) -> None:
        self.layouts_directory = _as_path(self.layouts_directory)
        if isinstance(self.partials_directory, (str, Path)):
            self.partials_directory = _as_path(self.partials_directory)
        else:
            self.partials_directory = [_as_path(p) for p in self.partials_directory]
        if self.template_directory is not None:
            self.template_directory = _as_path(self.template_directory)
        self.shared_templates_template = _as_path(self.shared_templates_template)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None = None, **overrides: Any) -> RendererOptions:
        """Build options from camelCase or snake_case keys.

        Raises ``ValueError`` for keys that are not recognised.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in {**(mapping or {}), **overrides}.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ValueError(
                    f"Unknown option {key!r}. Available: {sorted(known | set(_ALIASES))}"
                )
            if value is not None:
                values[name] = value
        return cls(**values)

    @property
    def partials_directories(self) -> list[Path]:
        """Ordered list of directories to scan for partials."""
        if self.template_directory is not None:
            return [self.template_directory]
        if isinstance(self.partials_directory, list):
            return list(self.partials_directory)
        return [self.partials_directory]

    @property
    def layouts_directories(self) -> list[Path]:
        """Ordered list of directories to scan for layouts."""
        if self.template_directory is not None:
            return [self.template_directory]
        return [self.layouts_directory]
