"""
Entity Name Parser Module

This module validates entity names and derives the naming variants consumed
by the snippet templates.
"""

from .entity_parser import EntityNameParser, EntityNames, parse_entity_name

__all__ = [
    "EntityNameParser",
    "EntityNames",
    "parse_entity_name",
]
