"""Catalog data model.

Message keys, origins and catalog entries shared by the store, the merge
engine and the partition engine.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, TypeAlias

__all__ = [
    "CatalogEntry",
    "CompleteCatalog",
    "LocaleCode",
    "MessageKey",
    "MinimalCatalog",
    "Origin",
    "RawCatalog",
]

MessageKey: TypeAlias = str
"""Identifier of a translatable message (source text and/or context)."""

LocaleCode: TypeAlias = str
"""Locale directory name (e.g., 'en', 'fr', 'pt-BR')."""

MinimalCatalog: TypeAlias = Mapping[MessageKey, str]
"""Key -> translation text, the format compiled artifacts are built from."""

CompleteCatalog: TypeAlias = "Mapping[MessageKey, CatalogEntry]"
"""Key -> entry with translation and provenance."""

RawCatalog: TypeAlias = "Mapping[MessageKey, CatalogEntry]"
"""Fresh extractor output; every translation is empty."""

_RESERVED_FIELDS = frozenset({"translation", "origin"})


@dataclass(frozen=True, slots=True)
class Origin:
    """Source location where a message key was found.

    Attributes:
        path: Source file path as reported by the extractor
        line: Line number, or None once stripped for persistence
    """

    path: str
    line: int | None = None

    @classmethod
    def from_json(cls, value: Any) -> Origin:
        """Build from a persisted ``[path]`` or ``[path, line]`` list.

        Raises:
            ValueError: If value is not a non-empty list led by a path string
        """
        if not isinstance(value, list | tuple) or not value or not isinstance(value[0], str):
            msg = f"Invalid origin: {value!r}"
            raise ValueError(msg)
        line = value[1] if len(value) > 1 else None
        if line is not None and (isinstance(line, bool) or not isinstance(line, int)):
            msg = f"Invalid origin line number: {line!r}"
            raise ValueError(msg)
        return cls(path=value[0], line=line)

    def to_json(self) -> list[str | int]:
        """Render as ``[path]`` or ``[path, line]``."""
        if self.line is None:
            return [self.path]
        return [self.path, self.line]

    def without_line(self) -> Origin:
        """Return a copy that keeps only the file path."""
        return Origin(self.path)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One message of a complete catalog.

    Attributes:
        translation: Translation text, empty when untranslated
        origin: Every source location where the key was found
        extra: Extractor-supplied fields, preserved verbatim
        field_order: Order of the non-translation fields as read
    """

    translation: str = ""
    origin: tuple[Origin, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    field_order: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_json(cls, value: Any) -> CatalogEntry:
        """Build from a persisted ``{translation, origin, ...}`` object.

        A missing translation reads as empty; a missing origin reads as ().

        Raises:
            ValueError: If value is not an object or a field has the wrong type
        """
        if not isinstance(value, dict):
            msg = f"Catalog entry must be an object, got {type(value).__name__}"
            raise ValueError(msg)
        translation = value.get("translation", "")
        if not isinstance(translation, str):
            msg = f"Translation must be a string, got {translation!r}"
            raise ValueError(msg)
        origin = value.get("origin", [])
        if not isinstance(origin, list):
            msg = f"Origin must be a list, got {origin!r}"
            raise ValueError(msg)
        extra = {k: v for k, v in value.items() if k not in _RESERVED_FIELDS}
        return cls(
            translation=translation,
            origin=tuple(Origin.from_json(item) for item in origin),
            extra=MappingProxyType(extra),
            field_order=tuple(k for k in value if k != "translation"),
        )

    def to_json(self) -> dict[str, Any]:
        """Render as a JSON-ready object with translation first.

        The remaining fields follow in field_order; fields it does not list
        come next, with origin last.
        """
        fields = {**self.extra, "origin": [item.to_json() for item in self.origin]}
        rendered: dict[str, Any] = {"translation": self.translation}
        for name in (*self.field_order, *self.extra, "origin"):
            if name in fields and name not in rendered:
                rendered[name] = fields[name]
        return rendered

    @property
    def origin_paths(self) -> tuple[str, ...]:
        """File paths of every origin, in order."""
        return tuple(item.path for item in self.origin)

    def with_translation(self, translation: str) -> CatalogEntry:
        """Return a copy carrying a different translation."""
        return replace(self, translation=translation)

    def without_line_numbers(self) -> CatalogEntry:
        """Return a copy whose origins keep only the file path."""
        return replace(self, origin=tuple(item.without_line() for item in self.origin))
