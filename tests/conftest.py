from __future__ import annotations

from pathlib import Path

import pytest

from tests.pages import (
    ENUM_ORDERING,
    FUNCTION_READ,
    MODULE_BARE,
    MODULE_FS,
    STRUCT_FILE,
    STRUCT_PATHBUF,
)


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def doc_root(tmp_path: Path) -> Path:
    """
    A small rustdoc tree: <root>/std/{fs,path,cmp} and a local crate "mycrate".
    """
    root = tmp_path / "html"
    write(root / "std" / "index.html", MODULE_BARE)
    write(root / "std" / "fs" / "index.html", MODULE_FS)
    write(root / "std" / "fs" / "struct.File.html", STRUCT_FILE)
    write(root / "std" / "fs" / "fn.read.html", FUNCTION_READ)
    write(root / "std" / "path" / "index.html", MODULE_BARE)
    write(root / "std" / "path" / "struct.PathBuf.html", STRUCT_PATHBUF)
    write(root / "std" / "cmp" / "index.html", MODULE_BARE)
    write(root / "std" / "cmp" / "enum.Ordering.html", ENUM_ORDERING)
    write(root / "mycrate" / "index.html", MODULE_BARE)
    write(root / "mycrate" / "struct.Widget.html", STRUCT_PATHBUF)
    return root
