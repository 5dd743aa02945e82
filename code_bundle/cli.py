"""Click CLI with order, build, and serve subcommands."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

import click

from code_bundle import __version__
from code_bundle.assembler import common_root, format_file_list
from code_bundle.config import DEFAULT_CONFIG_NAME, load_config
from code_bundle.errors import BundleError
from code_bundle.models import BundleConfig
from code_bundle.pipeline import run_bundle
from code_bundle.resolver import resolve_build_order

_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)
_DIR = click.Path(exists=True, file_okay=False, path_type=Path)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.getenv("CODE_BUNDLE_LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details")
def cli(verbose: bool):
    """code-bundle: Order and concatenate files by their @requires directives."""
    _configure_logging(verbose)


@cli.command()
@click.argument("seed", nargs=-1, required=True, type=_FILE)
@click.option("--root", "-r", required=True, type=_DIR, help="Directory @requires tokens resolve against")
@click.option("--first", "-f", multiple=True, help="File to build first, relative to --root")
@click.option("--relative/--absolute", default=True, help="Show paths relative to their common directory")
def order(seed: tuple[Path, ...], root: Path, first: tuple[str, ...], relative: bool):
    """Print the build order for SEED files and everything they require."""
    try:
        files = resolve_build_order(seed, root, first=first)
    except BundleError as e:
        raise click.ClickException(str(e))

    click.echo(format_file_list(files, common_root(files) if relative else None))


@cli.command()
@click.argument("manifest", required=False, type=_FILE)
@click.option("--config", "-c", "config_path", type=_FILE, help=f"JSON project file (default: ./{DEFAULT_CONFIG_NAME} if present)")
@click.option("--manifest-root", type=_DIR, help="Root of the files named in the manifest")
@click.option("--deps-field", "-d", multiple=True, help="Manifest field listing files to resolve dependencies for")
@click.option("--root", "-r", "dependency_root", type=_DIR, help="Directory @requires tokens resolve against")
@click.option("--first", "-f", multiple=True, help="File to build first, relative to --root")
@click.option("--js-field", "-j", multiple=True, help="Manifest field listing Javascript files")
@click.option("--css-field", "-s", multiple=True, help="Manifest field listing CSS files")
@click.option("--js-target", type=click.Path(dir_okay=False, path_type=Path), help="Javascript bundle path")
@click.option("--css-target", type=click.Path(dir_okay=False, path_type=Path), help="CSS bundle path")
def build(
    manifest: Path | None,
    config_path: Path | None,
    manifest_root: Path | None,
    deps_field: tuple[str, ...],
    dependency_root: Path | None,
    first: tuple[str, ...],
    js_field: tuple[str, ...],
    css_field: tuple[str, ...],
    js_target: Path | None,
    css_target: Path | None,
):
    """Resolve, concatenate, and write the Javascript and CSS bundles."""
    if config_path is None and Path(DEFAULT_CONFIG_NAME).is_file():
        config_path = Path(DEFAULT_CONFIG_NAME)

    try:
        config = load_config(config_path) if config_path else BundleConfig()
    except BundleError as e:
        raise click.ClickException(str(e))

    # Command-line options override the project file
    overrides = {
        "manifest": manifest,
        "manifest_root": manifest_root,
        "deps_fields": list(deps_field) or None,
        "dependency_root": dependency_root,
        "build_first": list(first) or None,
        "js_fields": list(js_field) or None,
        "css_fields": list(css_field) or None,
        "js_target": js_target,
        "css_target": css_target,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    if config.manifest is None:
        raise click.UsageError("Specify a MANIFEST or a --config file naming one")

    def progress(stage: str, current: int, total: int):
        if total > 0:
            click.echo(f"  {stage}: {current}/{total}", nl=(current == total))
        else:
            click.echo(f"  {stage}...")

    click.echo(f"Bundling from {config.manifest}\n")

    try:
        result = run_bundle(config, progress=progress)
    except BundleError as e:
        raise click.ClickException(str(e))

    click.echo(
        f"\nDone! {len(result.library_files)} library and "
        f"{len(result.app_files)} application file(s), {len(result.css_files)} stylesheet(s)"
    )
    click.echo(f"  {result.js_target} ({result.js_bytes} bytes)")
    click.echo(f"  {result.css_target} ({result.css_bytes} bytes)")


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
@click.option("--open/--no-open", default=False, help="Open the API docs in a browser")
def serve(port: int, host: str, open: bool):
    """Start the resolver web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'code-bundle[web]'"
        )

    from code_bundle.web import create_app

    click.echo(f"Starting code-bundle web API at http://{host}:{port}")

    if open:
        import webbrowser
        import threading
        threading.Timer(1.0, lambda: webbrowser.open(f"http://{host}:{port}/docs")).start()

    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
