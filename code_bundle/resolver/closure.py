"""Transitive closure of declared dependencies over a file tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from code_bundle.models import file_reference
from code_bundle.scanner import DirectiveScanner

logger = logging.getLogger(__name__)


class ClosureComputer:
    """Expand a seed set to every file reachable through ``@requires``."""

    def __init__(self, scanner: DirectiveScanner | None = None):
        self.scanner = scanner or DirectiveScanner()

    def compute(self, seed: Iterable[Path], root: Path) -> list[Path]:
        """Return the seed plus everything it pulls in, transitively.

        The result keeps insertion order: seed files first, then files in the
        order they were discovered. That order is the tie-break used by the
        sorter, so it must be stable for a given tree.

        Iterates to a fixed point. The set only grows and the tree is finite,
        so this terminates even when declarations form a cycle.
        """
        working: dict[Path, None] = dict.fromkeys(file_reference(p) for p in seed)
        seed_count = len(working)
        iterations = 0
        while True:
            iterations += 1
            candidate = dict(working)
            for file in working:
                for dep in self.scanner.dependencies(file, root):
                    candidate.setdefault(dep, None)
            if len(candidate) == len(working):
                break
            logger.debug(
                "closure iteration %d: %d -> %d file(s)",
                iterations, len(working), len(candidate),
            )
            working = candidate

        logger.debug(
            "closure of %d seed file(s) under %s: %d file(s) after %d iteration(s)",
            seed_count, root, len(working), iterations,
        )
        return list(working)
