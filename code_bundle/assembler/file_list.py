"""Render an ordered file list as a bracketed listing."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


def format_file_list(files: Iterable[Path], relative_to: Path | None = None) -> str:
    """Render files one per line, quoted, inside brackets.

    ::

        [
           "libs/a.js",
           "app/main.js"
        ]

    Paths under ``relative_to`` are shown relative to it; others stay absolute.
    """
    entries: list[str] = []
    for file in files:
        shown = file
        if relative_to is not None:
            try:
                shown = file.relative_to(relative_to)
            except ValueError:
                pass
        entries.append(f'   "{shown.as_posix()}"')
    if not entries:
        return "[\n]"
    return "[\n" + ",\n".join(entries) + "\n]"


def common_root(files: list[Path]) -> Path | None:
    """Deepest directory containing every file, or None for an empty list."""
    if not files:
        return None
    return Path(os.path.commonpath([str(f.parent) for f in files]))
