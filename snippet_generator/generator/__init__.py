"""
Snippet Generator Module

This module provides Jinja2-based rendering of repository and service
snippets from derived entity names.
"""

from .template_engine import GeneratedSnippets, SnippetCodeGenerator, SnippetTemplateEngine

__all__ = [
    "GeneratedSnippets",
    "SnippetCodeGenerator",
    "SnippetTemplateEngine",
]
