"""Manifest lists: named fields of file paths in a JSON document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from code_bundle.assembler import read_source
from code_bundle.errors import ManifestError
from code_bundle.models import file_reference


class Manifest:
    """A JSON manifest mapping field names to a path or a list of paths.

    Example::

        {
          "deps": ["app/main.js"],
          "js": ["vendor/jquery.js", "app/main.js"],
          "css": "style/app.css"
        }
    """

    def __init__(self, manifest: Path, manifest_root: Path | None = None):
        self.manifest = Path(manifest)
        self.manifest_root = Path(manifest_root) if manifest_root else self.manifest.parent
        self._data: dict | None = None

    def _load(self) -> dict:
        if self._data is None:
            text = read_source(self.manifest)
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise ManifestError(f"Manifest {self.manifest} is not valid JSON: {e}") from e
            if not isinstance(data, dict):
                raise ManifestError(f"Manifest {self.manifest} must be a JSON object")
            self._data = data
        return self._data

    def resolve_file(self, path: str) -> Path:
        return file_reference(path, self.manifest_root)

    def resolve(self, fields: Iterable[str]) -> list[Path]:
        """Build the list of files named by ``fields``, in field order."""
        data = self._load()
        files: list[Path] = []
        for field_name in fields:
            value = data.get(field_name)
            if isinstance(value, str):
                files.append(self.resolve_file(value))
            elif isinstance(value, list):
                for i, entry in enumerate(value):
                    if not isinstance(entry, str):
                        raise ManifestError(
                            f"Entry {i} in manifest field '{field_name}' is not a string: {entry!r}"
                        )
                    files.append(self.resolve_file(entry))
            else:
                raise ManifestError(
                    f"Manifest field '{field_name}' is not a string or array."
                )
        return files
