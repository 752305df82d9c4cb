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

"""Name -> compiled template mappings for partials and layouts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from stache.compiler import CompiledTemplate, compile_template
from stache.files import short_name
from stache.models import RawTemplate


def build_registry(templates: Iterable[RawTemplate]) -> dict[str, CompiledTemplate]:
    """Compile every template and key it by id.

    A later template silently replaces an earlier one with the same id.
    """
    registry: dict[str, CompiledTemplate] = {}
    for template in templates:
        registry[template.id] = compile_template(template.contents)
    return registry


def lookup(registry: Mapping[str, CompiledTemplate], name: str) -> CompiledTemplate | None:
    """Find a template by logical name or by a path-like name.

    An exact id match wins, so ids containing dots (``list.item``) are
    found as-is.  Returns ``None`` when nothing matches.
    """
    if name in registry:
        return registry[name]
    return registry.get(short_name(name))


def render_with_partials(
    registry: Mapping[str, CompiledTemplate],
    name: str,
    locals: Mapping[str, Any] | None = None,
    partials: Mapping[str, CompiledTemplate] | None = None,
) -> str | None:
    """Render *name* from *registry* against *locals*.

    *partials* defaults to *registry* itself.  An unknown name yields
    ``None`` rather than an error.
    """
    template = lookup(registry, name)
    if template is None:
        return None
    return template.render(locals or {}, registry if partials is None else partials)
