"""Project config file loading."""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path

from code_bundle.assembler import read_source
from code_bundle.errors import ManifestError
from code_bundle.models import BundleConfig

DEFAULT_CONFIG_NAME = "code-bundle.json"

_PATH_KEYS = {"manifest", "manifest_root", "dependency_root", "js_target", "css_target"}
_LIST_KEYS = {"deps_fields", "build_first", "js_fields", "css_fields"}


def load_config(path: Path) -> BundleConfig:
    """Load a :class:`BundleConfig` from a JSON project file.

    Relative paths in the file are taken from the file's own directory.
    """
    text = read_source(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Config {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"Config {path} must be a JSON object")

    known = {f.name for f in fields(BundleConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ManifestError(f"Unknown key(s) in {path}: {', '.join(unknown)}")

    base = path.parent
    kwargs: dict = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in _PATH_KEYS:
            if not isinstance(value, str):
                raise ManifestError(f"'{key}' in {path} must be a string")
            kwargs[key] = base / value
        elif key in _LIST_KEYS:
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ManifestError(f"'{key}' in {path} must be a list of strings")
            kwargs[key] = list(value)
    return BundleConfig(**kwargs)
