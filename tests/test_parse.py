from __future__ import annotations

from pathlib import Path

import pytest

from roc import config
from roc.document import load_document, parse_html
from roc.errors import DocumentError, InvalidPatternError
from roc.parse import DocParser, extract, render_sections
from roc.tags import TaggedPath
from tests import pages


def make_parser(name: str, page: str, method_name: str | None = None, **kwargs) -> DocParser:
    tagged = TaggedPath.from_path(Path("docs") / name, method_name=method_name)
    kwargs.setdefault("max_width", 90)
    return DocParser(tagged, parse_html(page), **kwargs)


class TestStruct:
    def test_declaration_summary_then_methods(self):
        parser = make_parser("struct.File.html", pages.STRUCT_FILE)
        assert parser.parse() == (
            "pub struct File { /* fields omitted */ }\n"
            "\n"
            "A reference to an open file on the filesystem.\n"
            "\n"
            "An instance of a File can be read and/or written.\n"
            "\n"
            "pub fn open(path: P) -> Result<File>\n"
            "pub fn create(path: P) -> Result<File>"
        )

    def test_section_names(self):
        parser = make_parser("struct.File.html", pages.STRUCT_FILE)
        assert [s.name for s in parser.sections()] == ["declaration", "summary", "methods"]

    def test_summary_stops_at_first_non_paragraph(self):
        summary = make_parser("struct.File.html", pages.STRUCT_FILE).extract_summary()
        assert "Not part of the summary" not in summary.text
        assert summary.text.count("\n\n") == 1

    def test_method_signatures_filtered(self):
        parser = make_parser("struct.File.html", pages.STRUCT_FILE, pattern="create")
        assert parser.extract_method_signatures().text == "pub fn create(path: P) -> Result<File>[src]"

    def test_examples_are_opt_in(self):
        parser = make_parser("struct.File.html", pages.STRUCT_FILE, show_examples=True)
        sections = parser.sections()
        assert sections[-1].name == "examples"
        assert sections[-1].text == 'use std::fs::File;\nlet f = File::open("foo.txt");'

    def test_missing_impl_block_is_absent(self):
        parser = make_parser("struct.Empty.html", "<html><body><p>hi</p></body></html>")
        assert parser.extract_method_signatures() is None
        assert parser.parse() == ""


class TestMethod:
    def test_method_with_docs(self):
        parser = make_parser("struct.PathBuf.html", pages.STRUCT_PATHBUF, method_name="push")
        assert parser.parse() == "pub fn push(&mut self, path: P)\n\nExtends self with path."

    def test_missing_method_placeholder(self):
        parser = make_parser("struct.PathBuf.html", pages.STRUCT_PATHBUF, method_name="file_name")
        assert parser.parse() == "file_name is not method"


class TestEnum:
    def test_summary_and_variants(self):
        parser = make_parser("enum.Ordering.html", pages.ENUM_ORDERING)
        assert parser.parse() == (
            "An Ordering is the result of a comparison between two values.\n"
            "\n"
            "Less\n"
            "An ordering where a compared value is less than another.\n"
            "Equal\n"
            "Greater\n"
            "An ordering where a compared value is greater than another."
        )

    def test_variants_filtered(self):
        parser = make_parser("enum.Ordering.html", pages.ENUM_ORDERING, pattern="Greater|greater")
        assert parser.extract_variants().text == (
            "Greater\nAn ordering where a compared value is greater than another."
        )


class TestModule:
    def test_summary_and_tables(self):
        parser = make_parser("index.html", pages.MODULE_FS)
        assert parser.parse() == (
            "Filesystem manipulation operations.\n"
            "\n"
            "modules\n"
            "-------\n"
            "unix  Unix specific extensions.\n"
            "\n"
            "structs\n"
            "-------\n"
            "File         A reference to an open file.\n"
            "OpenOptions  Options and flags.\n"
            "\n"
            "functions\n"
            "---------\n"
            "read  Read the entire contents of a file."
        )

    def test_missing_tables_are_skipped(self):
        parser = make_parser("index.html", pages.MODULE_FS)
        assert parser.extract_table("traits") is None
        assert parser.extract_table("macros") is None

    def test_table_filter(self):
        parser = make_parser("index.html", pages.MODULE_FS, pattern="Open")
        assert parser.extract_table("structs").text == "structs\n-------\nOpenOptions  Options and flags."
        assert parser.extract_table("functions") is None

    def test_header_without_table(self):
        page = '<html><body><h2 id="structs" class="section-header">Structs</h2><p>none</p></body></html>'
        assert make_parser("index.html", page).extract_table("structs") is None

    def test_one_node_between_header_and_table(self):
        page = (
            '<html><body><h2 id="structs" class="section-header">Structs</h2>'
            "<p>Types in this module.</p>"
            "<table><tr><td>File</td><td>An open file.</td></tr></table></body></html>"
        )
        section = make_parser("index.html", page).extract_table("structs")
        assert section.text == "structs\n-------\nFile  An open file."

    def test_two_nodes_between_header_and_table(self):
        page = (
            '<html><body><h2 id="structs" class="section-header">Structs</h2>'
            "<p>one</p><p>two</p>"
            "<table><tr><td>File</td><td>An open file.</td></tr></table></body></html>"
        )
        assert make_parser("index.html", page).extract_table("structs") is None

    def test_child_modules(self):
        assert make_parser("index.html", pages.MODULE_FS).child_modules() == (
            "modules\n-------\nunix  Unix specific extensions."
        )

    def test_no_child_modules(self):
        parser = make_parser("index.html", pages.MODULE_BARE)
        assert parser.child_modules() == config.NO_CHILD_MODULES


def test_other_kinds_show_summary_only():
    parser = make_parser("fn.read.html", pages.FUNCTION_READ)
    assert parser.parse() == "Read the entire contents of a file into a bytes vector."


def test_invalid_pattern_fails_early():
    with pytest.raises(InvalidPatternError):
        make_parser("struct.File.html", pages.STRUCT_FILE, pattern="[unclosed")


def test_extract_function():
    tagged = TaggedPath.from_path("struct.File.html")
    sections = extract(tagged, parse_html(pages.STRUCT_FILE), pattern="open")
    assert sections[-1].text == "pub fn open(path: P) -> Result<File>[src]"


def test_render_sections_strips_src_links():
    tagged = TaggedPath.from_path("struct.File.html")
    text = render_sections(extract(tagged, parse_html(pages.STRUCT_FILE)))
    assert "[src]" not in text


def test_load_document_from_disk(tmp_path: Path):
    path = tmp_path / "struct.File.html"
    path.write_text(pages.STRUCT_FILE, encoding="utf-8")
    parser = DocParser(TaggedPath.from_path(path), max_width=90)
    assert parser.parse().startswith("pub struct File")


def test_load_document_missing_file(tmp_path: Path):
    with pytest.raises(DocumentError):
        load_document(tmp_path / "struct.Gone.html")


def test_load_document_not_utf8(tmp_path: Path):
    path = tmp_path / "struct.Bad.html"
    path.write_bytes(b"<html>\xff\xfe</html>")
    with pytest.raises(DocumentError):
        load_document(path)


def test_load_document_empty(tmp_path: Path):
    path = tmp_path / "struct.Empty.html"
    path.write_text("")
    with pytest.raises(DocumentError):
        load_document(path)
