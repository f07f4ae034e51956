# roc/__init__.py
"""
roc - command line rust documentation that rocks.

Resolves a query such as ``std::path::PathBuf.file_name`` against the HTML
generated by rustdoc and prints a plain-text summary of the page.
"""
from __future__ import annotations

__version__ = "0.3.0"
