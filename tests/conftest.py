from pathlib import Path

import pytest

from helpers import write_file


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    write_file(root / "a.ts", "const a = 1;")
    write_file(root / "b.ts", "const b = 2;")
    write_file(root / "c.rs", "fn main() {}")
    write_file(root / "LICENSE", "license text")
    write_file(root / "README", "readme text")
    write_file(root / "nested" / "inner" / "deep.txt", "deep")
    return root
