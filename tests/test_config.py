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

"""Tests for stache.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from stache.config import (
    DEFAULT_LAYOUTS_DIRECTORY,
    DEFAULT_PARTIALS_DIRECTORY,
    DEFAULT_SHARED_TEMPLATES_TEMPLATE,
    RendererOptions,
)


class TestDefaults:
    def test_point_into_package_views(self):
        opts = RendererOptions()
        assert opts.layouts_directory == DEFAULT_LAYOUTS_DIRECTORY
        assert opts.partials_directory == DEFAULT_PARTIALS_DIRECTORY
        assert opts.shared_templates_template == DEFAULT_SHARED_TEMPLATES_TEMPLATE
        assert opts.partials_directory_name == "partials"
        assert opts.template_directory is None

    def test_default_files_exist(self):
        assert DEFAULT_LAYOUTS_DIRECTORY.is_dir()
        assert DEFAULT_PARTIALS_DIRECTORY.is_dir()
        assert DEFAULT_SHARED_TEMPLATES_TEMPLATE.is_file()


class TestFromMapping:
    def test_camel_case_keys(self, tmp_path):
        opts = RendererOptions.from_mapping({
            "layoutsDirectory": str(tmp_path / "l"),
            "partialsDirectory": str(tmp_path / "p"),
            "sharedTemplatesTemplate": str(tmp_path / "s.mustache"),
            "partialsDirectoryName": "parts",
        })
        assert opts.layouts_directory == tmp_path / "l"
        assert opts.partials_directory == tmp_path / "p"
        assert opts.shared_templates_template == tmp_path / "s.mustache"
        assert opts.partials_directory_name == "parts"

    def test_singular_shared_template_alias(self, tmp_path):
        opts = RendererOptions.from_mapping({"sharedTemplateTemplate": tmp_path / "w.mustache"})
        assert opts.shared_templates_template == tmp_path / "w.mustache"

    def test_snake_case_overrides(self, tmp_path):
        opts = RendererOptions.from_mapping(
            {"layoutsDirectory": tmp_path / "a"}, layouts_directory=tmp_path / "b",
        )
        assert opts.layouts_directory == tmp_path / "b"

    def test_none_values_keep_defaults(self):
        opts = RendererOptions.from_mapping({"templateDirectory": None})
        assert opts.template_directory is None

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="Unknown option 'viewsDir'"):
            RendererOptions.from_mapping({"viewsDir": "x"})

    def test_expands_user(self):
        opts = RendererOptions(layouts_directory="~/layouts")
        assert opts.layouts_directory == Path.home() / "layouts"


class TestDirectories:
    def test_separate_roots(self, tmp_path):
        opts = RendererOptions(layouts_directory=tmp_path / "l", partials_directory=tmp_path / "p")
        assert opts.layouts_directories == [tmp_path / "l"]
        assert opts.partials_directories == [tmp_path / "p"]

    def test_multiple_partials_directories(self, tmp_path):
        opts = RendererOptions(partials_directory=[str(tmp_path / "a"), tmp_path / "b"])
        assert opts.partials_directories == [tmp_path / "a", tmp_path / "b"]

    def test_single_root_mode(self, tmp_path):
        opts = RendererOptions(template_directory=tmp_path)
        assert opts.layouts_directories == [tmp_path]
        assert opts.partials_directories == [tmp_path]
