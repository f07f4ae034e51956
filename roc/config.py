# roc/config.py
from __future__ import annotations

# Documentation roots
STD_DOC_SUFFIX = "share/doc/rust/html"
CRATE_DOC_SUFFIX = "target/doc"
PROJECT_MARKER = "Cargo.toml"

# Environment overrides (skip discovery when set)
STD_DOC_ROOT_ENV = "ROC_STD_DOC_ROOT"
CRATE_DOC_ROOT_ENV = "ROC_CRATE_DOC_ROOT"

# Query handling
STDLIB_CRATE = "std"
CRATE_LISTING_QUERIES = frozenset({".", "crate"})

# Pretty printing
SPACER = "  "
DEFAULT_TERM_WIDTH = 90

# rustdoc leaves this link text at the end of most declaration lines
SRC_ARTIFACT = "[src]"

# Messages
NOT_A_METHOD = "{name} is not method"
NO_CHILD_MODULES = "No child modules found"
