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

"""Tests for stache.scanner."""

from __future__ import annotations

import pytest

from stache.models import RawTemplate
from stache.scanner import scan_directories, scan_directory


def _write(directory, name, text):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(text, encoding="utf-8")


class TestScanDirectory:
    def test_reads_each_file(self, tmp_path):
        _write(tmp_path, "header.mustache", "Hello {{name}}!")
        _write(tmp_path, "footer.mustache", "Bye")

        templates = scan_directory(tmp_path)
        assert templates == [
            RawTemplate(id="footer", contents="Bye"),
            RawTemplate(id="header", contents="Hello {{name}}!"),
        ]

    def test_sorted_by_file_name(self, tmp_path):
        for name in ("c.mustache", "a.mustache", "b.mustache"):
            _write(tmp_path, name, name)
        assert [t.id for t in scan_directory(tmp_path)] == ["a", "b", "c"]

    def test_strips_bom(self, tmp_path):
        _write(tmp_path, "bom.mustache", "\ufeff<div>{{x}}</div>")
        (template,) = scan_directory(tmp_path)
        assert template.contents == "<div>{{x}}</div>"

    def test_skips_subdirectories(self, tmp_path):
        _write(tmp_path, "page.mustache", "page")
        _write(tmp_path / "partials", "nested.mustache", "nested")
        assert [t.id for t in scan_directory(tmp_path)] == ["page"]

    def test_empty_directory(self, tmp_path):
        assert scan_directory(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            scan_directory(tmp_path / "nope")

    def test_file_instead_of_directory_raises(self, tmp_path):
        _write(tmp_path, "file.mustache", "x")
        with pytest.raises(NotADirectoryError):
            scan_directory(tmp_path / "file.mustache")


class TestScanDirectories:
    def test_concatenates_in_order(self, tmp_path):
        _write(tmp_path / "a", "foo.txt", "from a")
        _write(tmp_path / "b", "foo.txt", "from b")
        _write(tmp_path / "b", "bar.txt", "bar")

        templates = scan_directories([tmp_path / "a", tmp_path / "b"])
        assert [(t.id, t.contents) for t in templates] == [
            ("foo", "from a"),
            ("bar", "bar"),
            ("foo", "from b"),
        ]
