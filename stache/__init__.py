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

"""Mustache template loading and pre-compilation.

Scans directories of Mustache templates, compiles them with chevron for
server-side rendering of layouts and partials, and pre-compiles the
partials into a single JavaScript bundle for the browser.

Usage::

    from stache import TemplateRenderer

    renderer = TemplateRenderer(
        layouts_directory="views/layouts",
        partials_directory="views/partials",
    )
    html = renderer.render_layout("main", {"title": "Home"})
    script = renderer.get_shared_templates()

    renderer.reload_all()  # pick up changes on disk

The Starlette integration lives in :mod:`stache.middleware` and needs the
``web`` extra.
"""

from stache.bundle import render_bundle, stringify_templates
from stache.compiler import (
    CompiledTemplate,
    compile_template,
    compile_template_file,
    compile_to_string,
)
from stache.config import RendererOptions
from stache.files import read_template_file, short_name, strip_byte_order_mark
from stache.models import RawTemplate, StringifiedTemplate
from stache.registry import build_registry, lookup, render_with_partials
from stache.renderer import TemplateRenderer
from stache.scanner import scan_directories, scan_directory

__all__ = [
    "TemplateRenderer",
    "RendererOptions",
    "CompiledTemplate",
    "compile_template",
    "compile_template_file",
    "compile_to_string",
    "RawTemplate",
    "StringifiedTemplate",
    "read_template_file",
    "strip_byte_order_mark",
    "short_name",
    "scan_directory",
    "scan_directories",
    "build_registry",
    "lookup",
    "render_with_partials",
    "stringify_templates",
    "render_bundle",
]
