"""Data models for the dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DependencyGraph:
    """Directed graph over file references, stored as an index arena.

    Vertex ``i`` is ``files[i]``. Edges point from a dependency to its
    dependent, i.e. from the file that must come first.
    """
    files: list[Path] = field(default_factory=list)  # index -> file
    index: dict[Path, int] = field(default_factory=dict)  # file -> index
    dependents: list[list[int]] = field(default_factory=list)  # dependency -> [dependents]
    dependencies: list[list[int]] = field(default_factory=list)  # dependent -> [dependencies]

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, file: object) -> bool:
        return file in self.index

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.dependents)

    def add_file(self, file: Path) -> int:
        """Insert a vertex, returning its index. Re-inserting is a no-op."""
        existing = self.index.get(file)
        if existing is not None:
            return existing
        idx = len(self.files)
        self.files.append(file)
        self.index[file] = idx
        self.dependents.append([])
        self.dependencies.append([])
        return idx

    def add_edge(self, dependency: Path, dependent: Path) -> None:
        """Record that ``dependency`` must precede ``dependent``."""
        try:
            source = self.index[dependency]
            target = self.index[dependent]
        except KeyError as e:
            raise ValueError(f"{e.args[0]} is not a vertex of this graph") from None
        # Avoid duplicate edges
        if target in self.dependents[source]:
            return
        self.dependents[source].append(target)
        self.dependencies[target].append(source)

    def edges(self) -> list[tuple[Path, Path]]:
        """All edges as ``(dependency, dependent)`` pairs, in insertion order."""
        return [
            (self.files[source], self.files[target])
            for source, targets in enumerate(self.dependents)
            for target in targets
        ]
