import sys
from pathlib import Path

import pytest


def write_file(path: Path, contents: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


def count_files_manually(root: Path) -> int:
    return sum(1 for p in root.rglob("*") if p.is_file() and not p.is_symlink())


requires_symlinks = pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")


def row_for(table, extension: str):
    for row in table.rows:
        if row.extension == extension:
            return row
    return None
