"""Merge of a fresh extraction with previously stored translations.

Origins always come from the fresh extraction; translations come from the
previous complete catalog, read key by key; hand edits in the previous
minimal catalog take precedence over both when the minimal catalog is
rebuilt.

Every function returns new mappings and leaves its inputs untouched.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from linguimulti.catalog.store import CatalogStore
from linguimulti.catalog.types import (
    CatalogEntry,
    CompleteCatalog,
    LocaleCode,
    MessageKey,
    MinimalCatalog,
    RawCatalog,
)

__all__ = [
    "ExtractResult",
    "MergeResult",
    "extract_locale",
    "merge_catalogs",
    "merge_translations",
    "project_minimal",
    "seed_catalog",
    "strip_line_numbers",
    "translations_of",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Merged catalogs for one locale.

    Attributes:
        complete: Merged complete catalog (line numbers still present)
        minimal: Rebuilt minimal catalog
    """

    complete: dict[MessageKey, CatalogEntry]
    minimal: dict[MessageKey, str]


@dataclass(frozen=True, slots=True)
class ExtractResult:
    """Outcome of merging one locale.

    Attributes:
        locale: Locale directory name
        key_count: Number of keys in the written minimal catalog
        untranslated: Number of empty translations in the minimal catalog
    """

    locale: LocaleCode
    key_count: int
    untranslated: int = 0


def seed_catalog(raw: RawCatalog) -> dict[MessageKey, CatalogEntry]:
    """Give every raw key an empty translation, keeping origin and extras."""
    return {key: entry.with_translation("") for key, entry in raw.items()}


def translations_of(complete: CompleteCatalog) -> dict[MessageKey, str]:
    """Return the translation of every entry in complete."""
    return {key: entry.translation for key, entry in complete.items()}


def merge_translations(
    seeded: CompleteCatalog,
    previous: Mapping[MessageKey, str],
) -> dict[MessageKey, CatalogEntry]:
    """Carry stored translations onto freshly seeded entries.

    previous maps keys to translations only; stored origins and extras are
    stale and never consulted. Keys missing from seeded are dropped.
    """
    merged = {}
    for key, entry in seeded.items():
        stored = previous.get(key)
        merged[key] = entry if stored is None else entry.with_translation(stored)
    return merged


def project_minimal(
    complete: CompleteCatalog,
    overrides: MinimalCatalog | None = None,
) -> dict[MessageKey, str]:
    """Project translations out of complete.

    A value present in overrides wins for keys of complete. Override keys
    absent from complete are ignored.
    """
    overrides = overrides or {}
    return {key: overrides.get(key, entry.translation) for key, entry in complete.items()}


def strip_line_numbers(complete: CompleteCatalog) -> dict[MessageKey, CatalogEntry]:
    """Return complete with every origin reduced to its file path."""
    return {key: entry.without_line_numbers() for key, entry in complete.items()}


def merge_catalogs(
    raw: RawCatalog,
    previous_translations: Mapping[MessageKey, str],
    previous_minimal: MinimalCatalog,
) -> MergeResult:
    """Merge a fresh extraction with the stored catalogs of one locale.

    Args:
        raw: Fresh extractor output
        previous_translations: Translations stored in the complete catalog
            ({} if none)
        previous_minimal: Stored minimal catalog ({} if none)

    Returns:
        MergeResult with the new complete and minimal catalogs
    """
    complete = merge_translations(seed_catalog(raw), previous_translations)
    minimal = project_minimal(complete, previous_minimal)
    return MergeResult(complete=complete, minimal=minimal)


def extract_locale(store: CatalogStore, locale: LocaleCode, raw: RawCatalog) -> ExtractResult:
    """Merge raw into the stored catalogs of locale and write them back.

    Previous catalogs are loaded softly: a missing or corrupt file merges as
    an empty catalog, and a malformed complete catalog entry loses only its
    own translation.
    """
    result = merge_catalogs(
        raw,
        store.load_translations_or_empty(locale),
        store.load_minimal_or_empty(locale),
    )
    store.write_catalogs(locale, strip_line_numbers(result.complete), result.minimal)
    untranslated = sum(1 for value in result.minimal.values() if value == "")
    logger.debug("Merged %s: %d keys, %d untranslated", locale, len(result.minimal), untranslated)
    return ExtractResult(locale=locale, key_count=len(result.minimal), untranslated=untranslated)
