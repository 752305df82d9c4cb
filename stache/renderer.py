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

"""Template renderer holding the partial/layout registries and the client bundle.

``reload_all()`` rebuilds everything from disk: the bundle wrapper is
recompiled, every configured directory is re-read, and the partials,
layouts and bundle are replaced together.  Nothing is cached between
reloads and nothing is updated incrementally.

Callers that keep a reference to the mapping returned by
:meth:`TemplateRenderer.get_partials` keep seeing the old templates after a
reload; fetch again to see the new ones.  The renderer has no lock, so
hosts calling ``reload_all()`` from several threads must serialise those
calls themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from stache.bundle import render_bundle
from stache.compiler import CompiledTemplate, compile_template_file
from stache.config import RendererOptions
from stache.registry import build_registry, lookup, render_with_partials
from stache.scanner import scan_directories

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Load, compile and serve Mustache partials and layouts.

    Args:
        options: A :class:`RendererOptions`, or a mapping using camelCase
            or snake_case option names.
        load: Read the templates immediately (default ``True``).
        **overrides: Individual options, applied over *options*.
    """

    def __init__(
        self,
        options: RendererOptions | dict[str, Any] | None = None,
        *,
        load: bool = True,
        **overrides: Any,
    ) -> None:
        if isinstance(options, RendererOptions):
            if overrides:
                raise TypeError("Pass either a RendererOptions instance or keyword options, not both")
            self.options = options
        else:
            self.options = RendererOptions.from_mapping(options, **overrides)
        self._partials: dict[str, CompiledTemplate] = {}
        self._layouts: dict[str, CompiledTemplate] = {}
        self._shared_templates = ""
        if load:
            self.reload_all()

    def reload_all(self) -> None:
        """Re-read every template directory and rebuild all compiled state.

        Errors (missing directories, unreadable files, template syntax)
        propagate, and the previously loaded state is kept.
        """
        opts = self.options
        wrapper = compile_template_file(opts.shared_templates_template)

        partial_templates = scan_directories(opts.partials_directories)
        partials = build_registry(partial_templates)

        layouts = build_registry(scan_directories(opts.layouts_directories))

        shared_templates = render_bundle(wrapper, partial_templates)

        self._partials = partials
        self._layouts = layouts
        self._shared_templates = shared_templates
        logger.info("Loaded %d partial(s) and %d layout(s)", len(partials), len(layouts))

    # Short aliases for the full rebuild.
    reload = reload_all
    read = reload_all

    # --- Lookups ------------------------------------------------------------

    def get_partials(self) -> dict[str, CompiledTemplate]:
        """Return the current partials mapping (replaced on every reload)."""
        return self._partials

    def get_layouts(self) -> dict[str, CompiledTemplate]:
        return self._layouts

    def get_partial(self, name: str) -> CompiledTemplate | None:
        """Return the partial for a logical or path-like *name*, or ``None``."""
        return lookup(self._partials, name)

    get_template = get_partial

    def get_shared_templates(self) -> str:
        """Return the client-side script bundling every partial."""
        return self._shared_templates

    # --- Rendering ----------------------------------------------------------

    def render_layout(self, name: str, locals: dict[str, Any] | None = None) -> str | None:
        """Render layout *name* with all partials available.

        Returns ``None`` if there is no such layout.
        """
        return render_with_partials(self._layouts, name, locals, self._partials)

    def render_partial(self, name: str, locals: dict[str, Any] | None = None) -> str | None:
        """Render partial *name* with the other partials available.

        Returns ``None`` if there is no such partial.
        """
        return render_with_partials(self._partials, name, locals)

    @staticmethod
    def compile_template_file(path: str | Path) -> CompiledTemplate:
        """Read and compile one template file outside the registries."""
        return compile_template_file(path)
