# roc/datatypes.py
from __future__ import annotations
from dataclasses import dataclass

from roc.errors import EmptyQueryError


@dataclass(frozen=True, slots=True)
class Query:
    """
    A parsed documentation query, e.g. ``std::path::PathBuf.file_name``.
    components is the query path with the ``::`` and ``.`` separators removed.
    """

    raw: str
    components: tuple[str, ...]
    is_stdlib: bool
    is_method: bool

    @property
    def method_name(self) -> str | None:
        """
        The trailing ``.method`` part of the query, if there is one.
        """
        if not self.is_method or not self.components:
            return None
        return self.components[-1]

    @property
    def path_components(self) -> tuple[str, ...]:
        """
        Components that name the file to locate (the method name is looked up
        inside that file later on).
        """
        if self.method_name is not None:
            return self.components[:-1]
        return self.components

    @property
    def symbol(self) -> str:
        """
        Last path component: the module or item being looked up.
        """
        if not self.path_components:
            raise EmptyQueryError(self.raw)
        return self.path_components[-1]


@dataclass(frozen=True, slots=True)
class Section:
    """
    One block of extracted text, e.g. a summary or the "structs" table.
    """

    name: str
    text: str

    def __bool__(self) -> bool:
        return bool(self.text.strip())
