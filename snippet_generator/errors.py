"""Exception types raised by the snippet generator."""

from __future__ import annotations


class SnippetGeneratorError(Exception):
    """Base class for all snippet generator errors."""


class ValidationError(SnippetGeneratorError, ValueError):
    """Raised when the supplied entity name is empty or whitespace only."""

    def __init__(self, message: str = "Entity name cannot be empty.") -> None:
        super().__init__(message)


class TemplateRenderingError(SnippetGeneratorError):
    """Raised when a snippet template is missing or cannot be rendered."""


class OutputConflictError(SnippetGeneratorError):
    """Raised when two snippets would be written to the same file."""
