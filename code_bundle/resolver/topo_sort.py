"""Deterministic topological sort with cycle reporting."""

from __future__ import annotations

import heapq
from pathlib import Path

from code_bundle.errors import CycleError
from code_bundle.resolver.graph_models import DependencyGraph


class TopologicalSorter:
    """Linearize a dependency graph so every dependency precedes its dependents.

    Kahn's algorithm over vertex indices. Ready vertices sit in a min-heap, so
    when several files could go next the one inserted into the graph first
    wins, and identical graphs always produce identical orders.
    """

    def sort(self, graph: DependencyGraph) -> list[Path]:
        in_degree = [len(deps) for deps in graph.dependencies]
        ready = [idx for idx, degree in enumerate(in_degree) if degree == 0]
        heapq.heapify(ready)

        order: list[int] = []
        while ready:
            idx = heapq.heappop(ready)
            order.append(idx)
            for dependent in graph.dependents[idx]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    heapq.heappush(ready, dependent)

        if len(order) != len(graph):
            remaining = {idx for idx, degree in enumerate(in_degree) if degree > 0}
            cycle = self._find_cycle(graph, remaining)
            raise CycleError([graph.files[idx] for idx in cycle])

        return [graph.files[idx] for idx in order]

    @staticmethod
    def _find_cycle(graph: DependencyGraph, remaining: set[int]) -> list[int]:
        """Extract one cycle from the vertices Kahn's algorithm could not emit.

        Every remaining vertex still has a remaining dependency, so walking
        dependencies from any of them must revisit a vertex.
        """
        path: list[int] = []
        position: dict[int, int] = {}
        node = min(remaining)
        while node not in position:
            position[node] = len(path)
            path.append(node)
            node = next(dep for dep in graph.dependencies[node] if dep in remaining)
        cycle = path[position[node]:]
        # The walk went dependent -> dependency; report dependency first.
        cycle.reverse()
        return cycle
