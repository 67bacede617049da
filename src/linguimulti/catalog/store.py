"""On-disk catalog store.

Reads and writes the two JSON catalogs kept per locale directory and the
compiled artifacts produced from them.

Loading comes in two families:
    strict - load_complete(), load_minimal(): a missing file raises
             CatalogMissingError, an unreadable or malformed one raises
             CatalogCorruptedError.
    soft   - load_translations_or_empty(), load_minimal_or_empty(): the
             same failures yield an empty mapping. Used where a previous
             catalog is only a merge source and its absence is the normal
             first-run state. Only translations are read from the complete
             catalog, so a malformed entry costs that entry alone.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from linguimulti.catalog.types import (
    CatalogEntry,
    CompleteCatalog,
    LocaleCode,
    MinimalCatalog,
)
from linguimulti.constants import (
    ARTIFACT_FILENAME,
    COMPLETE_CATALOG_FILENAME,
    COMPLETE_CATALOG_NAME,
    IGNORED_LOCALE_DIRS,
    JSON_INDENT,
    MINIMAL_CATALOG_FILENAME,
)
from linguimulti.errors import (
    CatalogCorruptedError,
    CatalogFileError,
    CatalogMissingError,
    LocaleDirectoryError,
)

__all__ = [
    "CatalogStore",
    "parse_complete_catalog",
    "parse_minimal_catalog",
    "read_json_object",
]

logger = logging.getLogger(__name__)


def read_json_object(path: Path) -> dict[str, Any]:
    """Read a JSON file whose top level must be an object.

    Raises:
        CatalogMissingError: If path does not exist
        CatalogCorruptedError: If path cannot be read, is not valid JSON,
            or its top level is not an object
    """
    if not path.exists():
        raise CatalogMissingError(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogCorruptedError(path) from e
    if not isinstance(data, dict):
        raise CatalogCorruptedError(path)
    return data


def parse_complete_catalog(data: Mapping[str, Any], path: Path) -> dict[str, CatalogEntry]:
    """Convert a decoded complete (or raw) catalog object into entries.

    Raises:
        CatalogCorruptedError: If any entry is malformed
    """
    try:
        return {key: CatalogEntry.from_json(value) for key, value in data.items()}
    except ValueError as e:
        raise CatalogCorruptedError(path) from e


def parse_minimal_catalog(data: Mapping[str, Any], path: Path) -> dict[str, str]:
    """Validate a decoded minimal catalog object.

    Raises:
        CatalogCorruptedError: If any translation is not a string
    """
    if not all(isinstance(value, str) for value in data.values()):
        raise CatalogCorruptedError(path)
    return dict(data)


def _write_json(path: Path, data: Mapping[str, Any]) -> None:
    text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")


@dataclass(frozen=True, slots=True)
class CatalogStore:
    """Catalog files under a locales directory.

    Example:
        >>> store = CatalogStore(Path("locale"))
        >>> for locale in store.list_locales():
        ...     minimal = store.load_minimal(locale)

    Attributes:
        locales_dir: Directory holding one subdirectory per locale
    """

    locales_dir: Path

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def list_locales(self) -> tuple[LocaleCode, ...]:
        """Return locale directory names in sorted listing order.

        Plain files and build output directories are skipped.

        Raises:
            LocaleDirectoryError: If the locales directory does not exist or
                is not a directory
        """
        if not self.locales_dir.is_dir():
            msg = "locale directory does not exist"
            raise LocaleDirectoryError(msg)
        locales = []
        for child in sorted(self.locales_dir.iterdir(), key=lambda p: p.name):
            if child.name in IGNORED_LOCALE_DIRS:
                continue
            if not child.is_dir():
                logger.debug("Skipping non-directory entry: %s", child)
                continue
            locales.append(child.name)
        return tuple(locales)

    def minimal_path(self, locale: LocaleCode) -> Path:
        """Path of the minimal catalog for locale."""
        return self.locales_dir / locale / MINIMAL_CATALOG_FILENAME

    def complete_path(self, locale: LocaleCode) -> Path:
        """Path of the complete catalog for locale."""
        return self.locales_dir / locale / COMPLETE_CATALOG_FILENAME

    def artifact_path(self, locale: LocaleCode, catalog_name: str) -> Path:
        """Path of the compiled artifact for (locale, catalog_name).

        The reserved complete catalog has no name prefix.
        """
        if catalog_name == COMPLETE_CATALOG_NAME:
            return self.locales_dir / locale / ARTIFACT_FILENAME
        return self.locales_dir / locale / f"{catalog_name}.{ARTIFACT_FILENAME}"

    # ------------------------------------------------------------------
    # Strict loaders
    # ------------------------------------------------------------------

    def load_complete(self, locale: LocaleCode) -> dict[str, CatalogEntry]:
        """Load the complete catalog, failing loudly.

        Raises:
            CatalogMissingError: If the file does not exist
            CatalogCorruptedError: If the file cannot be parsed
        """
        path = self.complete_path(locale)
        return parse_complete_catalog(read_json_object(path), path)

    def load_minimal(self, locale: LocaleCode) -> dict[str, str]:
        """Load the minimal catalog, failing loudly.

        Raises:
            CatalogMissingError: If the file does not exist
            CatalogCorruptedError: If the file cannot be parsed
        """
        path = self.minimal_path(locale)
        return parse_minimal_catalog(read_json_object(path), path)

    # ------------------------------------------------------------------
    # Soft loaders
    # ------------------------------------------------------------------

    def load_translations_or_empty(self, locale: LocaleCode) -> dict[str, str]:
        """Read the translation of every usable complete catalog entry.

        Origins and extras are not parsed. Entries that are not objects or
        whose translation is not a string are skipped; a missing or
        unreadable file yields {}.
        """
        try:
            data = read_json_object(self.complete_path(locale))
        except CatalogFileError as e:
            logger.debug("Using no stored translations for %s: %s", locale, e)
            return {}
        translations = {}
        for key, value in data.items():
            translation = value.get("translation", "") if isinstance(value, dict) else None
            if not isinstance(translation, str):
                logger.debug("Skipping malformed entry %r in %s", key, locale)
                continue
            translations[key] = translation
        return translations

    def load_minimal_or_empty(self, locale: LocaleCode) -> MinimalCatalog:
        """Load the minimal catalog, or {} if it is missing or unusable."""
        try:
            return self.load_minimal(locale)
        except CatalogFileError as e:
            logger.debug("Using empty minimal catalog for %s: %s", locale, e)
            return {}

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def write_catalogs(
        self,
        locale: LocaleCode,
        complete: CompleteCatalog,
        minimal: MinimalCatalog,
    ) -> None:
        """Persist both catalogs for locale.

        Entries are written as given; callers strip origin line numbers first.
        """
        _write_json(
            self.complete_path(locale),
            {key: entry.to_json() for key, entry in complete.items()},
        )
        _write_json(self.minimal_path(locale), minimal)
        logger.debug("Wrote catalogs for %s (%d keys)", locale, len(minimal))

    def write_artifact(self, locale: LocaleCode, catalog_name: str, source: str) -> Path:
        """Write compiled artifact source and return its path."""
        path = self.artifact_path(locale, catalog_name)
        path.write_text(source, encoding="utf-8")
        logger.debug("Wrote artifact %s", path)
        return path
