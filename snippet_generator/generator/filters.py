"""
Jinja2 filters for C# snippet generation.

This module exposes the entity naming helpers as template filters so that
custom templates can derive additional variants themselves.
"""

from __future__ import annotations

from typing import Any

from snippet_generator.utils.string_case import (
    camelcase,
    normalize_entity_name,
    pluralize,
    private_field_name,
    spaced_lowercase,
)

FILTERS: dict[str, Any] = {
    "normalize_name": normalize_entity_name,
    "pluralize": pluralize,
    "camel_case": camelcase,
    "spaced_lower": spaced_lowercase,
    "csharp_field": private_field_name,
}
