"""Shared fixtures for package helper tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Write a directory tree of files below root."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            full_path.write_bytes(content)
        else:
            full_path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def package_src(helper_tmp: Path) -> Path:
    """A package source tree with one root file and one nested file."""
    return write_tree(
        helper_tmp / "from_dir",
        {
            "file1.php": "<?php\nnamespace OldNamespace;\n\nclass Test {}",
            "Subdir/file2.php": "<?php\nnamespace OldNamespace\\Subdir;\n\nclass SubTest {}",
        },
    )
