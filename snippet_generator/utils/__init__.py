"""
Utilities Module for Snippet Generation

This module provides the entity name conversions and file helpers shared by
the parser, the template engine and the command line interface.
"""

from .file_utils import ensure_directory, write_files_to_disk
from .string_case import (
    REF_PREFIX,
    camelcase,
    normalize_entity_name,
    pluralize,
    private_field_name,
    spaced_lowercase,
)

__all__ = [
    "REF_PREFIX",
    "camelcase",
    "ensure_directory",
    "normalize_entity_name",
    "pluralize",
    "private_field_name",
    "spaced_lowercase",
    "write_files_to_disk",
]
