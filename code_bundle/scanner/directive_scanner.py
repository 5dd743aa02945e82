"""Per-run directive scanner with token memoization."""

from __future__ import annotations

import logging
from pathlib import Path

from code_bundle.errors import ResolutionError
from code_bundle.models import file_reference
from code_bundle.scanner.directives import scan_file

logger = logging.getLogger(__name__)


class DirectiveScanner:
    """Scan files for ``@requires`` tokens, reading each file at most once.

    One instance lives for one resolution run. Nothing is shared between runs,
    so edits made on disk between runs are always picked up.
    """

    def __init__(self):
        self._tokens: dict[Path, list[str]] = {}
        self.files_read = 0

    def tokens(self, file: Path) -> list[str]:
        """Direct dependency tokens of ``file``, in declaration order."""
        cached = self._tokens.get(file)
        if cached is None:
            cached = scan_file(file)
            self._tokens[file] = cached
            self.files_read += 1
            logger.debug("scanned %s: %d directive(s)", file, len(cached))
        return cached

    def dependencies(self, file: Path, root: Path) -> list[Path]:
        """Direct dependencies of ``file`` resolved against ``root``.

        Raises:
            ResolutionError: a token does not name an existing file.
            ResourceError: ``file`` cannot be read.
        """
        resolved: list[Path] = []
        for token in self.tokens(file):
            candidate = file_reference(token, root)
            if not candidate.is_file():
                raise ResolutionError(token, declared_in=file, candidate=candidate)
            if candidate not in resolved:
                resolved.append(candidate)
        return resolved
