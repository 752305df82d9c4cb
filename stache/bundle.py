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

"""Client-side template bundle.

The bundle is produced by rendering the *shared templates* wrapper template
with ``{"templates": [{"id", "key", "script", "last"}, ...]}``.  ``key`` is
``id`` as a quoted JavaScript string and must be emitted unescaped.  The
wrapper decides how the function expressions are joined; ``last`` lets it
drop the separator after the final entry::

    {{#templates}}{{{key}}}: {{{script}}}{{^last}},{{/last}}
    {{/templates}}
"""

from __future__ import annotations

from collections.abc import Sequence

from stache.compiler import CompiledTemplate, compile_to_string, js_string
from stache.models import RawTemplate, StringifiedTemplate


def stringify_templates(templates: Sequence[RawTemplate]) -> list[StringifiedTemplate]:
    """Compile each template to client source, flagging the final entry."""
    final = len(templates) - 1
    return [
        StringifiedTemplate(
            id=template.id,
            script=compile_to_string(template.contents),
            last=i == final,
        )
        for i, template in enumerate(templates)
    ]


def render_bundle(wrapper: CompiledTemplate, templates: Sequence[RawTemplate]) -> str:
    """Render *templates* through the *wrapper* into a single script."""
    entries = [
        {**entry.to_dict(), "key": js_string(entry.id)}
        for entry in stringify_templates(templates)
    ]
    return wrapper.render({"templates": entries})
