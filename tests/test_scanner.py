"""Tests for the directive scanner."""

from pathlib import Path

import pytest

from code_bundle.errors import ResolutionError, ResourceError
from code_bundle.scanner import DirectiveScanner, parse_directives, scan_file

FIXTURES = Path(__file__).parent / "fixtures"
DEPS = FIXTURES / "deps"


def test_parse_in_declaration_order():
    text = "// @requires foo\nvar x = 1;\n// @requires bar\n"
    assert parse_directives(text) == ["foo", "bar"]


def test_parse_collapses_duplicates():
    text = "// @requires foo\n// @requires bar\n// @requires foo\n"
    assert parse_directives(text) == ["foo", "bar"]


def test_parse_ignores_comment_syntax():
    text = "#!/bin/sh\n# @requires foo.js\n * @requires bar.js\n\nrm -rf /\n"
    assert parse_directives(text) == ["foo.js", "bar.js"]


def test_parse_token_is_rest_of_line():
    assert parse_directives("/* @requires Layer/Vector.js\r\n") == ["Layer/Vector.js"]
    assert parse_directives("@requires\tsome file.js") == ["some file.js"]


def test_parse_token_kept_verbatim():
    assert parse_directives("// @requires a.js  \n// @requires b.js\t\r") == ["a.js  ", "b.js\t"]


def test_parse_only_newlines_end_lines():
    text = "// @requires a\u2028b.js\n// @requires c\fd.js\r// @requires e.js"
    assert parse_directives(text) == ["a\u2028b.js", "c\fd.js", "e.js"]


def test_parse_last_marker_on_line_wins():
    assert parse_directives("// @requires a.js @requires b.js") == ["b.js"]


def test_parse_rejects_incomplete_markers():
    text = "// @requires\n// @requires   \n// @requiresfoo.js\n// requires foo.js\n"
    assert parse_directives(text) == []


def test_parse_empty():
    assert parse_directives("") == []


def test_scan_file():
    assert scan_file(DEPS / "Map.js") == ["Util.js", "Base.js"]
    assert scan_file(DEPS / "Base.js") == []


def test_scan_missing_file():
    with pytest.raises(ResourceError) as exc:
        scan_file(DEPS / "Nope.js")
    assert exc.value.path == DEPS / "Nope.js"


class TestDirectiveScanner:
    def test_dependencies_resolve_against_root(self):
        scanner = DirectiveScanner()
        deps = scanner.dependencies((DEPS / "Map.js").resolve(), DEPS.resolve())
        assert deps == [(DEPS / "Util.js").resolve(), (DEPS / "Base.js").resolve()]

    def test_tokens_are_memoized(self, tmp_path):
        f = tmp_path / "a.js"
        f.write_text("// @requires b.js\n")
        scanner = DirectiveScanner()
        assert scanner.tokens(f) == ["b.js"]
        f.write_text("// @requires c.js\n")
        assert scanner.tokens(f) == ["b.js"]
        assert scanner.files_read == 1

    def test_unresolved_token(self, tmp_path):
        f = tmp_path / "a.js"
        f.write_text("// @requires missing\n")
        with pytest.raises(ResolutionError) as exc:
            DirectiveScanner().dependencies(f, tmp_path)
        assert exc.value.token == "missing"
        assert exc.value.declared_in == f
        assert "missing" in str(exc.value)
        assert str(f) in str(exc.value)

    def test_directory_is_not_a_dependency(self, tmp_path):
        (tmp_path / "lib").mkdir()
        f = tmp_path / "a.js"
        f.write_text("// @requires lib\n")
        with pytest.raises(ResolutionError):
            DirectiveScanner().dependencies(f, tmp_path)
