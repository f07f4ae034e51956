# roc/document.py
from __future__ import annotations
from pathlib import Path

from bs4 import BeautifulSoup

from roc.errors import DocumentError

PARSER = "lxml"


def parse_html(markup: str) -> BeautifulSoup:
    """
    Parse rustdoc output. Markup without a single element is rejected.
    """
    soup = BeautifulSoup(markup, PARSER)
    if soup.find(True) is None:
        raise DocumentError("no HTML elements found")
    return soup


def load_document(path: Path | str) -> BeautifulSoup:
    """
    Read and parse a generated documentation page.
    rustdoc always writes UTF-8, anything else means the tree is broken.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentError(f"unable to open file: {path}: {exc.strerror}") from exc

    try:
        markup = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentError(f"file is not valid UTF-8: {path}") from exc

    try:
        return parse_html(markup)
    except DocumentError as exc:
        raise DocumentError(
            f"unable to parse rustdoc generated HTML file: {path.name} ({exc})"
        ) from exc
