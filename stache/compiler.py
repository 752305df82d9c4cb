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

"""Mustache compilation backed by chevron.

Two forms are produced from the same template text:

* :class:`CompiledTemplate`: a server-side renderable.  The text is
  tokenized up front so syntax errors surface as ``chevron.ChevronError``
  when compiling, not when rendering.
* A *stringified* template: JavaScript source for a standalone render
  function, meant to be shipped to the browser and executed there with the
  Mustache.js runtime.

Whitespace handling is chevron's: standalone section/comment lines are
dropped, ``{{name}}`` is HTML-escaped and ``{{{name}}}`` is emitted raw.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import chevron
from chevron.tokenizer import tokenize

from stache.files import read_template_file

CLIENT_RUNTIME = "Mustache"


class _PartialSources(dict):
    """Partial lookup that renders unknown names as empty text.

    chevron falls back to reading ``<name>.mustache`` from disk for
    partials missing from its dictionary; this mapping never misses.
    """

    def __missing__(self, key: str) -> str:
        return ""


class CompiledTemplate:
    """A tokenized Mustache template that can be rendered repeatedly."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._tokens = list(tokenize(source))

    def render(
        self,
        data: Any = None,
        partials: Mapping[str, CompiledTemplate | str] | None = None,
    ) -> str:
        """Render with *data*; *partials* maps names to templates or sources.

        *data* is usually a mapping, but any object works; chevron falls
        back to attribute access for keys it cannot subscript.
        """
        return chevron.render(
            template=self._tokens,
            data=data if data is not None else {},
            partials_dict=_partial_sources(partials),
        )

    def __repr__(self) -> str:
        preview = self.source[:40]
        return f"CompiledTemplate({preview!r})"


def _partial_sources(partials: Mapping[str, Any] | None) -> _PartialSources:
    sources = _PartialSources()
    for name, partial in (partials or {}).items():
        sources[name] = partial.source if isinstance(partial, CompiledTemplate) else partial
    return sources


def compile_template(text: str) -> CompiledTemplate:
    """Compile Mustache *text* into a renderable template."""
    return CompiledTemplate(text)


def js_string(text: str) -> str:
    """Encode *text* as a JavaScript string literal safe inside ``<script>``."""
    return json.dumps(text).replace("</", "<\\/")


def compile_to_string(text: str) -> str:
    """Compile Mustache *text* into JavaScript source for a render function.

    The template is validated with the same tokenizer as
    :func:`compile_template`.  The emitted expression evaluates to a
    function ``render(view, partials)`` delegating to ``Mustache.render``,
    with the template text available as ``render.source``.
    """
    list(tokenize(text))
    literal = js_string(text)
    return (
        "(function () {\n"
        f"  var source = {literal};\n"
        "  var render = function (view, partials) {\n"
        f"    return {CLIENT_RUNTIME}.render(source, view, partials);\n"
        "  };\n"
        "  render.source = source;\n"
        "  return render;\n"
        "})()"
    )


def compile_template_file(path: str | Path) -> CompiledTemplate:
    """Read and compile a single template file."""
    return compile_template(read_template_file(path))
