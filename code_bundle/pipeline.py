"""Bundle pipeline: manifest -> resolve -> split -> concatenate -> write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from code_bundle.assembler import Compressor, compress, concatenate, write_bundle
from code_bundle.errors import ManifestError
from code_bundle.manifest import Manifest
from code_bundle.models import BundleConfig, BundleResult
from code_bundle.resolver import resolve_build_order

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def _manifest(config: BundleConfig) -> Manifest:
    if config.manifest is None:
        raise ManifestError("No manifest configured")
    return Manifest(config.manifest, config.manifest_root)


def run_order(config: BundleConfig) -> list[Path]:
    """Resolve the build order of the manifest's dependency fields."""
    manifest = _manifest(config)
    seed = manifest.resolve(config.deps_fields)
    if config.dependency_root is None:
        return list(dict.fromkeys(seed))
    return resolve_build_order(seed, config.dependency_root, first=config.build_first)


def run_bundle(
    config: BundleConfig,
    progress: ProgressCallback | None = None,
    js_compressor: Compressor | None = None,
    css_compressor: Compressor | None = None,
) -> BundleResult:
    """Run the full bundle pipeline and write both targets."""
    logger.info("Reading manifest: %s", config.manifest)
    manifest = _manifest(config)

    # Stage 1: Resolve
    if progress:
        progress("Resolving", 0, 1)
    deps_files = manifest.resolve(config.deps_fields)
    if config.dependency_root is not None:
        logger.info("Resolving dependencies under %s", config.dependency_root)
        ordered = resolve_build_order(
            deps_files, config.dependency_root, first=config.build_first,
        )
    else:
        ordered = []
    if progress:
        progress("Resolving", 1, 1)

    # Stage 2: Split library files from application-local files
    js_files = list(dict.fromkeys(ordered + manifest.resolve(config.js_fields)))
    local = set(deps_files)
    library_files = [f for f in js_files if f not in local]
    app_files = [f for f in js_files if f in local]

    # Stage 3: Concatenate
    if progress:
        progress("Concatenating", 0, 2)
    logger.info("Concatenating %d file(s)...", len(js_files))
    js = compress(
        concatenate(library_files) + concatenate(app_files),
        js_compressor, label="Javascript",
    )
    if progress:
        progress("Concatenating", 1, 2)

    css_files = manifest.resolve(config.css_fields)
    logger.info("Concatenating %d file(s)...", len(css_files))
    css = compress(concatenate(css_files), css_compressor, label="CSS")
    if progress:
        progress("Concatenating", 2, 2)

    # Stage 4: Write
    if progress:
        progress("Writing", 0, 1)
    write_bundle(js, config.js_target)
    write_bundle(css, config.css_target)
    if progress:
        progress("Writing", 1, 1)

    return BundleResult(
        js_target=config.js_target,
        css_target=config.css_target,
        js_files=library_files + app_files,
        css_files=css_files,
        library_files=library_files,
        app_files=app_files,
        js_bytes=len(js.encode("utf-8")),
        css_bytes=len(css.encode("utf-8")),
    )
