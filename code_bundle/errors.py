"""Exception hierarchy for dependency resolution and bundling."""

from __future__ import annotations

from pathlib import Path


class BundleError(Exception):
    """Base class for every failure raised by code-bundle."""


class ResourceError(BundleError):
    """A referenced file could not be opened or read."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ResolutionError(BundleError):
    """A declared dependency token does not name a file under the root."""

    def __init__(self, token: str, declared_in: Path, candidate: Path | None = None):
        self.token = token
        self.declared_in = declared_in
        self.candidate = candidate
        message = f"Unresolved dependency {token!r} declared in {declared_in}"
        if candidate is not None:
            message += f" (no file at {candidate})"
        super().__init__(message)


class CycleError(BundleError):
    """The dependency graph has no valid build order."""

    def __init__(self, cycle: list[Path]):
        self.cycle = cycle
        chain = " -> ".join(str(p) for p in cycle + cycle[:1])
        super().__init__(f"Circular dependency detected: {chain}")


class ManifestError(BundleError):
    """A manifest or project config document is malformed."""
