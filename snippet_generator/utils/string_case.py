"""
String case conversion utilities for snippet generation.

This module turns a single entity identifier into the naming variants used
by the repository and service templates: the canonical name without the
reference-table marker, its plural, a camelCase parameter name and the
spaced lowercase wording used in documentation comments.
"""

import re
from collections.abc import Callable
from typing import Final

# Prefix marking reference/lookup tables, dropped from member names
REF_PREFIX: Final = "Ref_"

# Regex patterns for case conversion
_LOWER_UPPER_PATTERN: Final = re.compile(r"(?<=[a-z0-9])([A-Z])")

# Pluralization suffixes, compared case-insensitively
_Y_SUFFIX: Final = "y"
_SY_SUFFIX: Final = "sy"
_S_SUFFIX: Final = "s"


def _convert_if_not_empty(string: str | None, conversion_func: Callable[[str], str]) -> str:
    """Safely convert a string, returning empty string if input is None or empty."""
    return conversion_func(string) if string else ""


def normalize_entity_name(name: str) -> str:
    """Strip the ``Ref_`` marker from the start of an entity name.

    The marker is matched case-insensitively and only at the beginning of
    the string. Names without the marker are returned unchanged.

    Args:
        name: Entity name as supplied by the user.

    Returns:
        The canonical entity name.

    Examples:
        >>> normalize_entity_name("Ref_Product")
        'Product'
        >>> normalize_entity_name("REF_Country")
        'Country'
        >>> normalize_entity_name("Category")
        'Category'
    """
    if name[: len(REF_PREFIX)].lower() == REF_PREFIX.lower():
        return name[len(REF_PREFIX) :]
    return name


def pluralize(name: str) -> str:
    """Derive the plural form of a canonical entity name.

    Rules are checked in order and the first match wins:

    - ends with ``y`` but not ``sy``: replace the ``y`` with ``ies``
    - ends with ``s``: already plural, returned as is
    - anything else: append ``s``

    Irregular English plurals are deliberately not handled.

    Args:
        name: Canonical entity name.

    Returns:
        Plural entity name.

    Examples:
        >>> pluralize("Category")
        'Categories'
        >>> pluralize("Status")
        'Status'
        >>> pluralize("Key")
        'Keies'
    """
    lowered = name.lower()
    if lowered.endswith(_Y_SUFFIX) and not lowered.endswith(_SY_SUFFIX):
        return name[:-1] + "ies"
    if lowered.endswith(_S_SUFFIX):
        return name
    return name + "s"


def camelcase(string: str | None) -> str:
    """Convert a PascalCase name into camelCase.

    Only the first character is lower-cased, the rest is kept as is.

    Args:
        string: String to convert.

    Returns:
        Camel case string.

    Examples:
        >>> camelcase("CampaignAttribute")
        'campaignAttribute'
        >>> camelcase("A")
        'a'
    """

    def _camelcase(s: str) -> str:
        if len(s) == 1:
            return s.lower()
        return s[0].lower() + s[1:]

    return _convert_if_not_empty(string, _camelcase)


def spaced_lowercase(string: str | None) -> str:
    """Convert a PascalCase name into lowercase words separated by spaces.

    A space is inserted before every uppercase letter that directly follows
    a lowercase letter or a digit, so acronyms stay together.

    Args:
        string: String to convert.

    Returns:
        Spaced lowercase string.

    Examples:
        >>> spaced_lowercase("CampaignAttribute")
        'campaign attribute'
        >>> spaced_lowercase("MyGreatClass")
        'my great class'
        >>> spaced_lowercase("HTTPRequestLog")
        'httprequest log'
    """

    def _spaced_lowercase(s: str) -> str:
        return _LOWER_UPPER_PATTERN.sub(r" \1", s).lower()

    return _convert_if_not_empty(string, _spaced_lowercase)


def private_field_name(string: str | None) -> str:
    """Return the underscore-prefixed camelCase name used for C# private fields.

    Examples:
        >>> private_field_name("ProductRepository")
        '_productRepository'
    """
    return f"_{camelcase(string)}" if string else ""
