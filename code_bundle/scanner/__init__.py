"""Directive scanning layer."""

from __future__ import annotations

from code_bundle.scanner.directive_scanner import DirectiveScanner
from code_bundle.scanner.directives import parse_directives, scan_file

__all__ = [
    "DirectiveScanner",
    "parse_directives",
    "scan_file",
]
