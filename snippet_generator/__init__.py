"""
Repository/Service Snippet Generator

A Jinja2-based generator that derives naming variants from an entity name
and renders C# repository and service snippets for it.
"""

from .constants import SnippetKind
from .errors import OutputConflictError, SnippetGeneratorError, TemplateRenderingError, ValidationError
from .generator import GeneratedSnippets, SnippetCodeGenerator, SnippetTemplateEngine
from .parser import EntityNameParser, EntityNames, parse_entity_name

__version__ = "1.0.0"

__all__ = [
    "EntityNameParser",
    "EntityNames",
    "GeneratedSnippets",
    "OutputConflictError",
    "SnippetCodeGenerator",
    "SnippetGeneratorError",
    "SnippetKind",
    "SnippetTemplateEngine",
    "TemplateRenderingError",
    "ValidationError",
    "parse_entity_name",
]
