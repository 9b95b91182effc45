"""Constants shared by the snippet generator modules."""

from __future__ import annotations

from enum import Enum
from typing import Final

TEMPLATE_SUFFIX: Final = ".cs.j2"
OUTPUT_SUFFIX: Final = ".cs"


class SnippetKind(Enum):
    """The four snippets produced for every entity.

    Each member carries the template it is rendered from, the title printed
    above it and the pattern used to name the file it is written to.
    """

    REPOSITORY_INTERFACE = ("repository_interface", "Repository Interface", "I{clean_name}Repository")
    REPOSITORY_IMPLEMENTATION = ("repository_implementation", "Repository Implementation", "{clean_name}Repository")
    SERVICE_INTERFACE = ("service_interface", "Service Interface", "I{clean_name}Service")
    SERVICE_IMPLEMENTATION = ("service_implementation", "Service Implementation", "{clean_name}Service")

    def __init__(self, key: str, title: str, file_stem: str) -> None:
        self.key = key
        self.title = title
        self.file_stem = file_stem

    @property
    def template_name(self) -> str:
        return f"{self.key}{TEMPLATE_SUFFIX}"

    def file_name(self, clean_name: str) -> str:
        """Return the ``.cs`` file name for this snippet of ``clean_name``."""
        return self.file_stem.format(clean_name=clean_name) + OUTPUT_SUFFIX

    @classmethod
    def from_key(cls, key: str) -> SnippetKind:
        for kind in cls:
            if kind.key == key:
                return kind
        raise KeyError(key)


SNIPPET_KEYS: Final = tuple(kind.key for kind in SnippetKind)
