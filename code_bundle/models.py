"""Data models for the code-bundle resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def file_reference(path: str | Path, root: str | Path | None = None) -> Path:
    """Normalize a path to the absolute, canonical form used as a graph key.

    Relative paths are taken against ``root`` when given, otherwise against
    the current working directory. Absolute paths ignore ``root``.
    """
    base = Path(root) if root is not None else Path.cwd()
    return (base / path).resolve()


@dataclass
class BundleConfig:
    """Configuration for a bundle run."""
    manifest: Path | None = None
    manifest_root: Path | None = None  # defaults to the manifest's directory
    deps_fields: list[str] = field(default_factory=list)
    dependency_root: Path | None = None
    build_first: list[str] = field(default_factory=list)
    js_fields: list[str] = field(default_factory=list)
    css_fields: list[str] = field(default_factory=list)
    js_target: Path = field(default_factory=lambda: Path("dist") / "dist.js")
    css_target: Path = field(default_factory=lambda: Path("dist") / "dist.css")


@dataclass
class BundleResult:
    """Result from the bundle pipeline."""
    js_target: Path
    css_target: Path
    js_files: list[Path] = field(default_factory=list)
    css_files: list[Path] = field(default_factory=list)
    library_files: list[Path] = field(default_factory=list)
    app_files: list[Path] = field(default_factory=list)
    js_bytes: int = 0
    css_bytes: int = 0
