"""Shared fixtures for code-bundle tests."""

from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Write ``{relative_path: text}`` under tmp_path and return the root."""

    def _make(files: dict[str, str]) -> Path:
        for name, text in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text)
        return tmp_path.resolve()

    return _make
