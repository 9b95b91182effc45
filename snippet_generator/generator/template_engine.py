"""
Snippet Template Engine for Repository and Service Generation

This module uses Jinja2 templates to render the repository and service
snippets of an entity from its derived names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from snippet_generator.constants import SnippetKind
from snippet_generator.errors import OutputConflictError, TemplateRenderingError
from snippet_generator.generator.filters import FILTERS
from snippet_generator.parser.entity_parser import EntityNameParser, EntityNames

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedSnippets:
    """The four snippets rendered for one entity."""

    names: EntityNames
    repository_interface: str
    repository_implementation: str
    service_interface: str
    service_implementation: str

    def get(self, kind: SnippetKind) -> str:
        return getattr(self, kind.key)

    def as_dict(self) -> dict[SnippetKind, str]:
        """Return the snippets keyed by kind, in generation order."""
        return {kind: self.get(kind) for kind in SnippetKind}


class SnippetTemplateEngine:
    """Template engine for generating C# snippets."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine."""
        if template_dir is None:
            current_dir = Path(__file__).parent
            template_dir = current_dir.parent / "templates"

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._register_filters()

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters for snippet generation."""
        self.env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context.

        Raises:
            TemplateRenderingError: If the template cannot be loaded or
                references a value missing from ``context``.
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            msg = f"Failed to render template '{template_name}' from {self.template_dir}: {e}"
            raise TemplateRenderingError(msg) from e


class SnippetCodeGenerator:
    """Main code generator for repository and service snippets."""

    def __init__(
        self,
        template_engine: SnippetTemplateEngine | None = None,
        parser: EntityNameParser | None = None,
    ) -> None:
        """Initialize the code generator."""
        self.template_engine = template_engine or SnippetTemplateEngine()
        self.parser = parser or EntityNameParser()

    def generate_snippet(self, kind: SnippetKind, names: EntityNames) -> str:
        """Render a single snippet for already derived names."""
        logger.debug("Rendering %s snippet for %s", kind.title, names.entity_name)
        return self.template_engine.render_template(kind.template_name, names.context())

    def generate_all(self, entity_name: str) -> GeneratedSnippets:
        """Generate all four snippets for ``entity_name``.

        Raises:
            ValidationError: If ``entity_name`` is empty or whitespace only.
        """
        names = self.parser.parse(entity_name)
        return self._generate_from_names(names)

    def generate_batch(self, entity_names: Iterable[str]) -> list[GeneratedSnippets]:
        """Generate snippets for several entities.

        Every name is validated before anything is rendered, so an invalid
        name yields no output at all. Results follow input order, repeated
        names included.
        """
        parsed = self.parser.parse_many(list(entity_names))
        return [self._generate_from_names(names) for names in parsed]

    def generate_files(
        self,
        entity_names: Iterable[str],
        output_dir: Path,
        kinds: Sequence[SnippetKind] | None = None,
    ) -> dict[Path, str]:
        """Map output file paths to snippet content for every entity.

        Raises:
            ValidationError: If any entity name is empty or whitespace only.
            OutputConflictError: If two entities map to the same file, e.g.
                ``Ref_Product`` and ``Product``.
        """
        selected = kinds or list(SnippetKind)
        files: dict[Path, str] = {}
        owners: dict[Path, str] = {}
        for names in self.parser.parse_many(list(entity_names)):
            for kind in selected:
                path = Path(output_dir) / kind.file_name(names.clean_name)
                if path in owners:
                    msg = f"'{owners[path]}' and '{names.entity_name}' would both be written to {path}"
                    raise OutputConflictError(msg)
                owners[path] = names.entity_name
                files[path] = self.generate_snippet(kind, names)
        return files

    def _generate_from_names(self, names: EntityNames) -> GeneratedSnippets:
        rendered = {kind.key: self.generate_snippet(kind, names) for kind in SnippetKind}
        return GeneratedSnippets(names=names, **rendered)
