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

"""Starlette / FastAPI integration.

Usage::

    from starlette.applications import Starlette
    from stache.middleware import install

    app = Starlette()
    app.state.views = "templates"
    app.state.env = "development"
    engine = install(app)

    render = engine.compile("<main>{{> header}}</main>")
    html = render({"title": "Home"})

Partials are read from ``<views>/<partials_directory_name>``.  In the
``"development"`` environment every HTTP request triggers a full
``reload_all()`` before it is handled, so edits on disk show up without a
restart.  The reload is synchronous and blocks the event loop while it
runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from starlette.types import ASGIApp, Receive, Scope, Send

from stache.compiler import compile_template
from stache.config import DEFAULT_PARTIALS_DIRECTORY_NAME, RendererOptions
from stache.renderer import TemplateRenderer

logger = logging.getLogger(__name__)

DEVELOPMENT = "development"


class ReloadMiddleware:
    """ASGI middleware forcing a full template reload before each request."""

    def __init__(self, app: ASGIApp, renderer: TemplateRenderer) -> None:
        self.app = app
        self.renderer = renderer

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            logger.debug("Reloading templates for %s", scope.get("path"))
            self.renderer.reload_all()
        await self.app(scope, receive, send)


class ViewEngine:
    """View-engine facade over a :class:`TemplateRenderer`."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def compile(self, source: str, filename: str | None = None) -> Callable[[dict[str, Any] | None], str]:
        """Compile *source* into ``render(locals) -> str``.

        Partials are resolved when the returned function is called, so a
        reload between compile and render is picked up.  *filename* is
        accepted for view-engine compatibility and only used in logging.
        """
        template = compile_template(source)
        logger.debug("Compiled view %s", filename or "<string>")

        def render(locals: dict[str, Any] | None = None) -> str:
            return template.render(locals or {}, self.renderer.get_partials())

        return render

    def get_shared_templates(self) -> str:
        return self.renderer.get_shared_templates()


def install(
    app: Any,
    *,
    views: str | Path | None = None,
    env: str | None = None,
    partials_directory_name: str = DEFAULT_PARTIALS_DIRECTORY_NAME,
    **options: Any,
) -> ViewEngine:
    """Attach a template renderer to a Starlette application.

    *views* and *env* default to ``app.state.views`` and ``app.state.env``.
    The returned engine is also stored on ``app.state.templates``.
    Raises ``ValueError`` when no view directory is configured.
    """
    views = views if views is not None else getattr(app.state, "views", None)
    env = env if env is not None else getattr(app.state, "env", None)
    if views is None:
        raise ValueError("No view directory: pass views= or set app.state.views")

    opts = RendererOptions.from_mapping(
        options,
        partials_directory=Path(views) / partials_directory_name,
        partials_directory_name=partials_directory_name,
    )
    if "layouts_directory" not in options and "layoutsDirectory" not in options:
        opts.layouts_directory = Path(views).expanduser()

    engine = ViewEngine(TemplateRenderer(opts))
    if env == DEVELOPMENT:
        app.add_middleware(ReloadMiddleware, renderer=engine.renderer)
        logger.info("Template reload on every request enabled (%s)", env)
    app.state.templates = engine
    return engine
