# roc/parse.py
"""
Extract readable sections from rustdoc generated HTML.

Only a handful of rustdoc's conventions are relied on: ``docblock`` and
``type-decl`` classes, the ``impl-items`` container, ``method.<name>`` and
``variant.<name>`` ids, and ``section-header`` headings followed by a table.
"""
from __future__ import annotations
import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, NavigableString
from bs4.element import Tag as Element

from roc import config
from roc.datatypes import Section
from roc.document import load_document
from roc.grep import compile_pattern, grep
from roc.table import Table, header
from roc.tags import Tag, TaggedPath

logger = logging.getLogger(__name__)

# Module page tables, in the order they are printed
MODULE_TABLES = (
    "modules",
    "traits",
    "constants",
    "structs",
    "enums",
    "functions",
    "macros",
)

_VARIANT_ID = re.compile(r"^variant\.")


def _has_class(node: object, name: str) -> bool:
    return isinstance(node, Element) and name in (node.get("class") or [])


class DocParser:
    """
    Parses generated HTML output from rustdoc to give summarised results.
    """

    def __init__(
        self,
        tagged_path: TaggedPath,
        document: Optional[BeautifulSoup] = None,
        *,
        pattern: Optional[str] = None,
        show_examples: bool = False,
        max_width: Optional[int] = None,
    ) -> None:
        self.tagged_path = tagged_path
        # bad patterns should fail before any work is done
        self.pattern = compile_pattern(pattern) if pattern is not None else None
        self.show_examples = show_examples
        self.max_width = max_width
        if document is None:
            document = load_document(tagged_path.full_path)
        self.contents = document

    def _filtered(self, text: str) -> str:
        if self.pattern is None:
            return text
        return grep(text, self.pattern)

    # Dispatch

    def sections(self) -> list[Section]:
        """
        Present sections for the page, in display order.
        """
        kind = self.tagged_path.kind
        logger.debug("extracting %s sections from %s", kind.name, self.tagged_path.file_name)
        found: list[Optional[Section]] = []

        if kind is Tag.MODULE:
            found.append(self.extract_summary())
            found.extend(self.extract_table(name) for name in MODULE_TABLES)
        elif kind is Tag.STRUCT:
            found.append(self.extract_type_declaration())
            found.append(self.extract_summary())
            found.append(self.extract_method_signatures())
        elif kind is Tag.ENUM:
            found.append(self.extract_summary())
            found.append(self.extract_variants())
        elif kind is Tag.METHOD:
            method = self.extract_method()
            if method is None:
                name = self.tagged_path.method_name
                method = Section("method", config.NOT_A_METHOD.format(name=name))
            found.append(method)
        else:
            found.append(self.extract_summary())

        if self.show_examples:
            found.append(self.extract_examples())

        return [section for section in found if section]

    def parse(self) -> str:
        """
        Text of all sections, ready to print.
        """
        return render_sections(self.sections())

    def child_modules(self) -> str:
        """
        Only the table of child modules, for listing mode.
        """
        modules = self.extract_table("modules")
        if not modules:
            return config.NO_CHILD_MODULES
        return render_sections([modules])

    # Extraction

    def _summary_block(self) -> Optional[Element]:
        for block in self.contents.find_all(class_="docblock"):
            if not _has_class(block, "type-decl"):
                return block
        return None

    def extract_summary(self) -> Optional[Section]:
        """
        Leading run of paragraphs from the first doc block.
        """
        block = self._summary_block()
        if block is None:
            return None

        paragraphs: list[str] = []
        for node in block.children:
            if isinstance(node, Element) and node.name == "p":
                paragraphs.append(node.get_text())
            elif isinstance(node, NavigableString) and not node.strip():
                continue
            else:
                break
        return Section("summary", "\n\n".join(paragraphs))

    def extract_type_declaration(self) -> Section:
        # every struct page has one, so this is never absent
        text = "\n".join(
            node.get_text() for node in self.contents.find_all(class_="type-decl")
        )
        return Section("declaration", text)

    def extract_method_signatures(self) -> Optional[Section]:
        impl_block = self.contents.find(class_="impl-items")
        if impl_block is None:
            return None

        methods = [
            node.get_text()
            for node in impl_block.children
            if _has_class(node, "method")
        ]
        return Section("methods", self._filtered("\n".join(methods)))

    def _with_docblock(self, node: Element, sep: str) -> str:
        """
        Text of node, followed by its doc block if that comes right after it.
        """
        parts = [node.get_text()]
        following = node.find_next_sibling()
        if _has_class(following, "docblock"):
            parts.append(following.get_text())
        return sep.join(parts)

    def extract_method(self) -> Optional[Section]:
        name = self.tagged_path.method_name
        if name is None:
            return None
        node = self.contents.find(id=f"method.{name}")
        if node is None:
            logger.debug("no element with id method.%s", name)
            return None
        return Section("method", self._with_docblock(node, "\n\n"))

    def extract_variants(self) -> Optional[Section]:
        variants = [
            self._with_docblock(node, "\n")
            for node in self.contents.find_all(id=_VARIANT_ID)
        ]
        if not variants:
            return None
        return Section("variants", self._filtered("\n".join(variants)))

    @staticmethod
    def _table_after(heading: Element) -> Optional[Element]:
        """
        The table following heading, allowing one node in between.
        Whitespace between siblings is not a node here.
        """
        siblings = [
            node
            for node in heading.next_siblings
            if not (isinstance(node, NavigableString) and not node.strip())
        ]
        for node in siblings[:2]:
            if isinstance(node, Element) and node.name == "table":
                return node
        return None

    def _table_rows(self, name: str) -> Optional[list[list[str]]]:
        heading = self.contents.find(class_="section-header", id=name)
        if heading is None:
            return None
        table = self._table_after(heading)
        if table is None:
            logger.debug("section %r is not followed by a table", name)
            return None

        body = table.find("tbody", recursive=False) or table
        rows = [
            [
                cell.get_text().replace("\n", " ").rstrip()
                for cell in row.find_all(["td", "th"], recursive=False)
            ]
            for row in body.find_all("tr", recursive=False)
        ]
        return rows or None

    def extract_table(self, name: str) -> Optional[Section]:
        """
        The table under the section header with id name, e.g. "structs".
        """
        rows = self._table_rows(name)
        if rows is None:
            return None
        body = self._filtered(Table.from_rows(rows, max_width=self.max_width).render())
        if not body:
            return None
        return Section(name, f"{header(name)}\n{body}")

    def extract_examples(self) -> Optional[Section]:
        block = self._summary_block()
        if block is None:
            return None
        examples = [pre.get_text().strip("\n") for pre in block.find_all("pre", class_="rust")]
        if not examples:
            return None
        return Section("examples", "\n\n".join(examples))


def extract(
    tagged_path: TaggedPath,
    document: BeautifulSoup,
    pattern: Optional[str] = None,
    max_width: Optional[int] = None,
) -> list[Section]:
    """
    Sections for a located page and its already loaded document.
    """
    parser = DocParser(tagged_path, document, pattern=pattern, max_width=max_width)
    return parser.sections()


def render_sections(sections: list[Section]) -> str:
    """
    Join sections with a blank line and drop rustdoc's "[src]" link text.
    """
    text = "\n\n".join(section.text for section in sections if section)
    text = text.replace(config.SRC_ARTIFACT, "")
    return "\n".join(line.rstrip() for line in text.splitlines())
