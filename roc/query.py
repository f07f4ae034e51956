# roc/query.py
from __future__ import annotations
import re

from roc import config
from roc.datatypes import Query

# "::" separates path segments, "." a trailing method and whitespace is noise
_SPLIT_RE = re.compile(r"::|\.|\s+")


def parse_query(raw: str) -> Query:
    """
    Break a raw query into its components.

    Nothing is validated here: stray separators simply produce fewer
    components, so ``"::"`` parses to a query with no components at all and
    only fails once something tries to resolve it.
    """
    components = tuple(part for part in _SPLIT_RE.split(raw) if part)
    return Query(
        raw=raw,
        components=components,
        is_stdlib=bool(components) and components[0] == config.STDLIB_CRATE,
        is_method="." in raw,
    )


def is_crate_listing(raw: str) -> bool:
    """
    True for the queries that ask for the list of documented crates.
    """
    return raw.strip() in config.CRATE_LISTING_QUERIES
