# roc/errors.py
from __future__ import annotations


class RocError(Exception):
    """
    Base class for conditions that stop an invocation.
    """


class DocRootNotFoundError(RocError):
    """
    No documentation tree could be located for the query.
    """


class EmptyQueryError(RocError):
    """
    The query had no path components left after parsing.
    """

    def __init__(self, raw: str) -> None:
        super().__init__(f"query {raw!r} does not name anything")
        self.raw = raw


class UndecodableNameError(RocError):
    """
    A file name met during the search is not valid UTF-8.
    """


class DocumentError(RocError):
    """
    The resolved documentation file could not be read or parsed.
    """


class InvalidPatternError(RocError):
    """
    A line filter pattern failed to compile.
    """


class TableShapeError(RocError, ValueError):
    """
    A row that is not exactly two cells was given to the two column renderer.
    """
