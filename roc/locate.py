# roc/locate.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, Optional

from roc.datatypes import Query
from roc.errors import DocRootNotFoundError
from roc.tags import MODULE_PAGE, TaggedPath

logger = logging.getLogger(__name__)


class Locator:
    """
    Maps a parsed query onto a file inside a rustdoc tree.

    rustdoc writes one directory per module (with an index.html), one
    ``<kind>.<name>.html`` file per item and puts methods on the page of the
    type that owns them. Lookup therefore tries the module directory first,
    then scans for a prefixed file, walking up towards the root so that
    truncated paths such as ``std::PathBuf`` still find something.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise DocRootNotFoundError(
                f"documentation root is not a directory: {self.root}"
            )

    def resolve(self, query: Query) -> Optional[TaggedPath]:
        """
        Locate the page for query, or None if nothing matches.
        Raises EmptyQueryError for a query without components.
        """
        symbol = query.symbol
        candidate = self.root.joinpath(*query.path_components[:-1])
        method_name = query.method_name

        module_dir = candidate / symbol
        # absolute components would replace the root when joined
        if not (candidate.is_relative_to(self.root) and module_dir.is_relative_to(self.root)):
            logger.debug("query %r points outside %s", query.raw, self.root)
            return None

        if module_dir.is_dir():
            logger.debug("module fast path: %s", module_dir)
            return TaggedPath.from_path(module_dir / MODULE_PAGE, method_name)

        for level in self._levels(candidate):
            found = self._scan(level, symbol)
            if found is not None:
                return found.with_method(method_name)

            if level != self.root and level.name == symbol:
                logger.debug("directory itself matches %r: %s", symbol, level)
                return TaggedPath.from_path(level / MODULE_PAGE, method_name)

        logger.debug("no match for %r under %s", query.raw, self.root)
        return None

    def _levels(self, candidate: Path) -> Iterator[Path]:
        """
        candidate, then each of its parents down to (and including) the root.
        """
        parts = candidate.relative_to(self.root).parts
        for depth in range(len(parts), -1, -1):
            yield self.root.joinpath(*parts[:depth])

    def _scan(self, level: Path, symbol: str) -> Optional[TaggedPath]:
        """
        First prefixed file in level whose name, stripped of its prefix and
        extension, equals symbol.
        """
        try:
            entries = sorted(level.iterdir())
        except OSError as exc:
            logger.debug("skipping %s: %s", level, exc)
            return None

        logger.debug("scanning %s for %r", level, symbol)
        for entry in entries:
            tagged = TaggedPath.from_path(entry)
            if tagged.tag.is_prefixed and tagged.without_prefix == symbol:
                logger.debug("matched %s as %s", entry, tagged.tag.name)
                return tagged
        return None


def resolve(query: Query, root: Path | str) -> Optional[TaggedPath]:
    """
    Shorthand for ``Locator(root).resolve(query)``.
    """
    return Locator(root).resolve(query)
