"""Line-oriented ``@requires`` directive parsing."""

from __future__ import annotations

import re
from pathlib import Path

from code_bundle.errors import ResourceError

# Greedy prefix: the last "@requires" on a line wins. The token is the rest
# of the line, kept verbatim.
_REQUIRES_RE = re.compile(r".*@requires[ \t]+(\S.*)")


def parse_directives(text: str) -> list[str]:
    """Return the dependency tokens declared in ``text``.

    Lines end at ``\\n``, ``\\r\\n`` or ``\\r`` only. Tokens come out in
    first-seen order; a token declared twice is kept once.
    """
    tokens: list[str] = []
    seen: set[str] = set()
    for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        m = _REQUIRES_RE.fullmatch(line)
        if not m:
            continue
        token = m.group(1)
        if token not in seen:
            seen.add(token)
            tokens.append(token)
    return tokens


def scan_file(file_path: Path) -> list[str]:
    """Read a file and parse its directives."""
    try:
        source = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ResourceError(file_path, e.strerror or str(e)) from e
    return parse_directives(source)
