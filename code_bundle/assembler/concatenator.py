"""Concatenate ordered files into a bundle and write it out."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from code_bundle.errors import ResourceError

logger = logging.getLogger(__name__)

Compressor = Callable[[str], str]


def concatenate(files: Iterable[Path]) -> str:
    """Join file contents in order, every line terminated by a newline.

    Only ``\\r\\n`` and ``\\r`` are rewritten (to ``\\n``); other line
    separators such as form feeds or U+2028 pass through untouched.
    """
    parts: list[str] = []
    for file in files:
        text = read_source(file)
        if text and not text.endswith("\n"):
            text += "\n"
        parts.append(text)
    return "".join(parts)


def read_source(file: Path) -> str:
    """Read a UTF-8 file with universal newlines."""
    try:
        return file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ResourceError(file, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ResourceError(file, e.strerror or str(e)) from e


def compress(data: str, compressor: Compressor | None = None, label: str = "bundle") -> str:
    """Run ``data`` through ``compressor`` if one is given."""
    if compressor is None:
        return data
    logger.info("Compressing concatenated %s (source is %d bytes)", label, len(data))
    output = compressor(data)
    ratio = (len(output) * 100.0 / len(data)) if data else 100.0
    logger.info("Compressed to %d bytes (%.2f%%)", len(output), ratio)
    return output


def write_bundle(content: str, target: Path) -> Path:
    """Write a bundle, creating parent directories as needed."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(content), target)
    return target
