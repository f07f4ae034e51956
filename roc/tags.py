# roc/tags.py
from __future__ import annotations
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from roc.errors import UndecodableNameError

MODULE_PAGE = "index.html"
HTML_SUFFIX = ".html"


class Tag(Enum):
    """
    Kind of item a rustdoc file documents. For prefixed kinds the value is the
    keyword rustdoc puts in front of the file name: ``<keyword>.<name>.html``.
    """

    CONSTANT = "constant"
    ENUM = "enum"
    FUNCTION = "fn"
    MACRO = "macro"
    PRIMITIVE = "primitive"
    STRUCT = "struct"
    TRAIT = "trait"
    MODULE = "module"
    METHOD = "method"
    UNKNOWN = "unknown"

    @property
    def is_prefixed(self) -> bool:
        return self in _PREFIXED


_PREFIXED = frozenset(
    {
        Tag.CONSTANT,
        Tag.ENUM,
        Tag.FUNCTION,
        Tag.MACRO,
        Tag.PRIMITIVE,
        Tag.STRUCT,
        Tag.TRAIT,
    }
)
_BY_KEYWORD = {tag.value: tag for tag in _PREFIXED}


def _decoded_name(path: Path | str) -> str | None:
    """
    File name of path as text, or None if it is not valid UTF-8.
    os.fsdecode smuggles undecodable bytes through as lone surrogates.
    """
    name = os.path.basename(os.fsdecode(path))
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name


def classify(path: Path | str) -> Tag:
    """
    Classify a path by its file name alone; the file is never opened.
    """
    name = _decoded_name(path)
    if name is None:
        return Tag.UNKNOWN
    if name == MODULE_PAGE:
        return Tag.MODULE
    return _BY_KEYWORD.get(name.split(".")[0], Tag.UNKNOWN)


def strip_prefix(file_name: str, tag: Tag) -> str | None:
    """
    ``struct.PathBuf.html`` -> ``PathBuf`` for prefixed tags, None otherwise.
    """
    if not tag.is_prefixed:
        return None
    rest = file_name.split(".", 1)[1] if "." in file_name else ""
    if rest.endswith(HTML_SUFFIX):
        rest = rest[: -len(HTML_SUFFIX)]
    return rest


@dataclass(frozen=True, slots=True)
class TaggedPath:
    """
    A located documentation file plus what we know about it from its name.
    without_prefix is only set for prefixed tags (see strip_prefix).
    """

    full_path: Path
    file_name: str
    tag: Tag
    without_prefix: str | None = None
    method_name: str | None = None

    @classmethod
    def from_path(cls, path: Path | str, method_name: str | None = None) -> "TaggedPath":
        """
        Build a TaggedPath for path. File names that are not valid UTF-8 are
        fatal here, unlike in classify.
        """
        full_path = Path(path)
        file_name = _decoded_name(full_path)
        if file_name is None:
            raise UndecodableNameError(f"file name is not valid UTF-8: {full_path!r}")
        tag = classify(full_path)
        return cls(
            full_path=full_path,
            file_name=file_name,
            tag=tag,
            without_prefix=strip_prefix(file_name, tag),
            method_name=method_name,
        )

    @property
    def kind(self) -> Tag:
        """
        What the extractor should treat this as: a method lookup wins over the
        kind of the page the method lives on.
        """
        if self.method_name is not None:
            return Tag.METHOD
        return self.tag

    def with_method(self, method_name: str | None) -> "TaggedPath":
        return TaggedPath(
            full_path=self.full_path,
            file_name=self.file_name,
            tag=self.tag,
            without_prefix=self.without_prefix,
            method_name=method_name,
        )
