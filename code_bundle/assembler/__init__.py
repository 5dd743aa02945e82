"""Assembler layer."""

from code_bundle.assembler.concatenator import (
    Compressor,
    compress,
    concatenate,
    read_source,
    write_bundle,
)
from code_bundle.assembler.file_list import common_root, format_file_list

__all__ = [
    "Compressor",
    "common_root",
    "compress",
    "concatenate",
    "format_file_list",
    "read_source",
    "write_bundle",
]
