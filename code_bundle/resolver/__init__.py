"""Dependency resolution: closure -> graph -> build order."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from code_bundle.models import file_reference
from code_bundle.resolver.closure import ClosureComputer
from code_bundle.resolver.dependency_graph import DependencyGraphBuilder
from code_bundle.resolver.graph_models import DependencyGraph
from code_bundle.resolver.topo_sort import TopologicalSorter
from code_bundle.scanner import DirectiveScanner

logger = logging.getLogger(__name__)


def resolve_build_order(
    seed: Iterable[str | Path],
    root: str | Path,
    *,
    first: Iterable[str | Path] = (),
) -> list[Path]:
    """Resolve the full build order for ``seed`` against a dependency root.

    Args:
        seed: Files to bundle. Relative paths are taken from the working
            directory.
        root: Directory that ``@requires`` tokens resolve against.
        first: Files to build first, relative to ``root``. They are prepended
            to the seed, so they win every tie, but a dependency edge still
            places a file's requirements ahead of it.

    Raises:
        ResourceError: a file in the closure cannot be read.
        ResolutionError: a token names no file under ``root``.
        CycleError: the declarations form a cycle.
    """
    root_path = file_reference(root)
    files = [file_reference(p, root_path) for p in first]
    files.extend(file_reference(p) for p in seed)

    # One scanner per run: each file is read once, and nothing outlives the run
    scanner = DirectiveScanner()
    closure = ClosureComputer(scanner).compute(files, root_path)
    graph = DependencyGraphBuilder(scanner).build(closure, root_path)
    order = TopologicalSorter().sort(graph)

    logger.info(
        "Resolved %d file(s) (%d edge(s)) from %d seed file(s)",
        len(order), graph.edge_count, len(files),
    )
    return order


__all__ = [
    "ClosureComputer",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "TopologicalSorter",
    "resolve_build_order",
]
