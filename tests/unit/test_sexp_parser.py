"""Tests for the S-expression parser and document loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from kicad2zen.exceptions import FormatError, IoError
from kicad2zen.sexp import Document, NodeKind, parse

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures" / "blinky"


class TestParseAtoms:
    def test_unquoted_atom(self) -> None:
        node = parse("hello")
        assert node.kind is NodeKind.SYMBOL
        assert node.value == "hello"

    def test_quoted_string(self) -> None:
        node = parse('"hello world"')
        assert node.kind is NodeKind.STRING
        assert node.value == "hello world"

    def test_quoted_with_escapes(self) -> None:
        node = parse(r'"say \"hi\""')
        assert node.value == 'say "hi"'

    def test_newline_escape(self) -> None:
        assert parse(r'"a\nb"').value == "a\nb"

    def test_number_stays_text(self) -> None:
        node = parse("3.14159")
        assert node.is_symbol
        assert node.value == "3.14159"


class TestParseExpressions:
    def test_simple_pair(self) -> None:
        node = parse("(version 20241229)")
        assert node.kind is NodeKind.LIST
        assert node.name == "version"
        assert node.first_value == "20241229"

    def test_nested_expression(self) -> None:
        node = parse("(a (b c) (d e))")
        assert node.name == "a"
        assert [c.name for c in node.children] == ["b", "d"]
        assert node.children[1].first_value == "e"

    def test_symbol_and_string_kept_apart(self) -> None:
        node = parse('(dnp yes "yes")')
        first, second = node.atoms
        assert first.is_symbol
        assert second.is_string

    def test_empty_quoted_string_value(self) -> None:
        node = parse('(net 0 "")')
        assert node.atom_values == ["0", ""]

    def test_empty_list(self) -> None:
        node = parse("()")
        assert node.is_list
        assert node.name == ""
        assert node.children == []

    def test_nested_list_as_first_element(self) -> None:
        node = parse("((a 1) b)")
        assert node.name == ""
        assert node.children[0].name == "a"
        assert node.children[1].value == "b"

    def test_whitespace_and_newlines(self) -> None:
        node = parse("(\n\tat\n\t1\n\t2\n)")
        assert node.name == "at"
        assert node.atom_values == ["1", "2"]


class TestParseErrors:
    def test_unclosed_paren(self) -> None:
        with pytest.raises(ValueError):
            parse("(a (b c)")

    def test_unexpected_close(self) -> None:
        with pytest.raises(ValueError):
            parse(")")

    def test_unterminated_string(self) -> None:
        with pytest.raises(ValueError):
            parse('(a "oops)')

    def test_trailing_data(self) -> None:
        with pytest.raises(ValueError):
            parse("(a 1) (b 2)")

    def test_empty_input(self) -> None:
        with pytest.raises(ValueError):
            parse("   ")


class TestQueryAPI:
    def test_getitem_found(self) -> None:
        node = parse("(root (child1 a) (child2 b))")
        assert node["child2"].first_value == "b"

    def test_getitem_not_found(self) -> None:
        node = parse("(root (child1 a))")
        with pytest.raises(KeyError):
            _ = node["missing"]

    def test_get_default(self) -> None:
        node = parse("(root (child1 a))")
        assert node.get("missing") is None

    def test_find_all(self) -> None:
        node = parse("(root (item a) (item b) (other c) (item d))")
        assert [i.first_value for i in node.find_all("item")] == ["a", "b", "d"]

    def test_find_recursive(self) -> None:
        node = parse("(root (a (pad 1)) (b (pad 2)) (pad 3))")
        assert len(list(node.find_recursive("pad"))) == 3

    def test_first_value_skips_lists(self) -> None:
        node = parse('(symbol (lib_id "Device:R") "named")')
        assert node.first_value == "named"


class TestDocument:
    def test_from_text_checks_root(self) -> None:
        doc = Document.from_text("(kicad_sch (version 1))", expected_root="kicad_sch")
        assert doc.root.name == "kicad_sch"

    def test_wrong_root_is_format_error(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            Document.from_text("(kicad_pcb (version 1))", expected_root="kicad_sch")
        assert exc_info.value.error_code == "FORMAT_ERROR"
        assert exc_info.value.expected == "kicad_sch"

    def test_atom_root_is_format_error(self) -> None:
        with pytest.raises(FormatError):
            Document.from_text("kicad_sch", expected_root="kicad_sch")

    def test_tokenizer_failure_is_format_error(self) -> None:
        with pytest.raises(FormatError):
            Document.from_text("(kicad_sch (version 1)", expected_root="kicad_sch")

    def test_deep_nesting_is_format_error(self) -> None:
        text = "(kicad_sch " + "(a " * 5000 + ")" * 5001
        with pytest.raises(FormatError, match="nested too deeply") as exc_info:
            Document.from_text(text, expected_root="kicad_sch")
        assert exc_info.value.expected == "kicad_sch"

    def test_load_fixture(self) -> None:
        doc = Document.load(FIXTURE_DIR / "blinky.kicad_pcb", expected_root="kicad_pcb")
        assert doc.root.name == "kicad_pcb"
        assert doc.root["general"]["thickness"].first_value == "1.6"

    def test_missing_file_is_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(IoError) as exc_info:
            Document.load(tmp_path / "nope.kicad_sch")
        assert exc_info.value.error_code == "IO_ERROR"

    def test_invalid_utf8_is_io_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.kicad_sch"
        path.write_bytes(b"(kicad_sch \xff\xfe)")
        with pytest.raises(IoError):
            Document.load(path)
