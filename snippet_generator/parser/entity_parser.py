"""
Entity Name Parser for Snippet Generation.

This module validates a user supplied entity name and derives every naming
variant the repository and service templates need from it.
"""

import logging
from dataclasses import asdict, dataclass

from snippet_generator.errors import ValidationError
from snippet_generator.utils.string_case import (
    camelcase,
    normalize_entity_name,
    pluralize,
    spaced_lowercase,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityNames:
    """Naming variants derived from a single entity name.

    Attributes:
        entity_name: The entity type name exactly as entered, including any
            ``Ref_`` marker and surrounding whitespace. Used wherever the
            generated code refers to the type.
        clean_name: The trimmed entity name without the ``Ref_`` marker,
            used in member and class names.
        plural_name: Plural of :attr:`clean_name`.
        camel_name: camelCase form of :attr:`clean_name`, used for parameters.
        doc_name: Spaced lowercase form of :attr:`clean_name` for comments.
        doc_plural_name: Spaced lowercase form of :attr:`plural_name`.
    """

    entity_name: str
    clean_name: str
    plural_name: str
    camel_name: str
    doc_name: str
    doc_plural_name: str

    def context(self) -> dict[str, str]:
        """Return the template context for these names."""
        return asdict(self)


class EntityNameParser:
    """Parser turning raw entity names into :class:`EntityNames`."""

    def parse(self, raw_name: str | None) -> EntityNames:
        """Validate ``raw_name`` and derive all naming variants.

        Args:
            raw_name: The entity name supplied by the user.

        Returns:
            The derived names.

        Raises:
            ValidationError: If ``raw_name`` is missing, empty or whitespace only.
        """
        entity_name = self._validate(raw_name)

        clean_name = normalize_entity_name(entity_name.strip())
        plural_name = pluralize(clean_name)
        names = EntityNames(
            entity_name=entity_name,
            clean_name=clean_name,
            plural_name=plural_name,
            camel_name=camelcase(clean_name),
            doc_name=spaced_lowercase(clean_name),
            doc_plural_name=spaced_lowercase(plural_name),
        )
        logger.debug("Derived names for %r: %s", raw_name, names)
        return names

    def parse_many(self, raw_names: list[str]) -> list[EntityNames]:
        """Parse several entity names, validating all of them before returning."""
        return [self.parse(raw_name) for raw_name in raw_names]

    @staticmethod
    def _validate(raw_name: str | None) -> str:
        if raw_name is None or not raw_name.strip():
            raise ValidationError
        return raw_name


def parse_entity_name(raw_name: str | None) -> EntityNames:
    """Shortcut for :meth:`EntityNameParser.parse`."""
    return EntityNameParser().parse(raw_name)
