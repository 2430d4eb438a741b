"""Root pytest configuration for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.utils import set_mtime


@pytest.fixture
def existing_file(tmp_path: Path) -> Path:
    path = tmp_path / "exists.txt"
    path.write_text("hello")
    set_mtime(path, 1_000_000_000_000_000_000)
    return path
