"""Dependency graph builder: one vertex per closure file, one edge per declaration."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from code_bundle.resolver.graph_models import DependencyGraph
from code_bundle.scanner import DirectiveScanner


class DependencyGraphBuilder:
    """Build a dependency graph over a closed set of files."""

    def __init__(self, scanner: DirectiveScanner | None = None):
        self.scanner = scanner or DirectiveScanner()

    def build(self, closure: Iterable[Path], root: Path) -> DependencyGraph:
        graph = DependencyGraph()

        # Step 1: every file becomes a disconnected vertex
        for file in closure:
            graph.add_file(file)

        # Step 2: edges from each dependency to the file declaring it
        for file in list(graph.files):
            for dep in self.scanner.dependencies(file, root):
                if dep not in graph:
                    raise ValueError(
                        f"{dep} (required by {file}) is missing from the closure"
                    )
                graph.add_edge(dep, file)

        return graph
