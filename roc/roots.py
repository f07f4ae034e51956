# roc/roots.py
from __future__ import annotations
import logging
import os
import subprocess
from pathlib import Path

from roc import config
from roc.tags import MODULE_PAGE

logger = logging.getLogger(__name__)


def sysroot() -> Path | None:
    """
    Toolchain sysroot as reported by ``rustc --print sysroot``.
    None if rustc is not installed or the call fails.
    """
    try:
        out = subprocess.run(
            ["rustc", "--print", "sysroot"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("rustc --print sysroot failed: %s", exc)
        return None

    root = out.stdout.strip()
    return Path(root) if root else None


def crate_root(start: Path | None = None) -> Path | None:
    """
    Walk upward from start (default: the working directory) to the first
    directory holding a Cargo.toml.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / config.PROJECT_MARKER).is_file():
            return directory
    return None


def _from_env(name: str) -> Path | None:
    value = os.environ.get(name)
    if not value:
        return None
    logger.debug("using %s=%s", name, value)
    return Path(value).expanduser()


def doc_root(is_stdlib: bool, start: Path | None = None) -> Path | None:
    """
    Base directory of the rustdoc tree to search: the toolchain's shared docs
    for std, ``target/doc`` of the enclosing crate otherwise.
    Returns None when the tree is not there.
    """
    if is_stdlib:
        root = _from_env(config.STD_DOC_ROOT_ENV)
        if root is None:
            base = sysroot()
            root = base / config.STD_DOC_SUFFIX if base else None
    else:
        root = _from_env(config.CRATE_DOC_ROOT_ENV)
        if root is None:
            base = crate_root(start)
            root = base / config.CRATE_DOC_SUFFIX if base else None

    if root is None or not root.is_dir():
        logger.debug("no documentation root found (stdlib=%s, tried %s)", is_stdlib, root)
        return None
    return root


def list_crates(root: Path) -> list[str]:
    """
    Names of the crates documented under root: sub-directories with a module page.
    """
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and (entry / MODULE_PAGE).is_file()
    )
