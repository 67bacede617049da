"""Translation completeness checks for strict compilation."""

from __future__ import annotations

from linguimulti.catalog.types import LocaleCode, MessageKey, MinimalCatalog
from linguimulti.errors import MissingTranslationsError

__all__ = [
    "find_missing_translations",
    "requires_verification",
    "verify_no_missing_translations",
]


def find_missing_translations(catalog: MinimalCatalog) -> tuple[MessageKey, ...]:
    """Keys whose translation is the empty string, in catalog order."""
    return tuple(key for key, translation in catalog.items() if translation == "")


def requires_verification(strict: bool, locale: LocaleCode, source_locale: LocaleCode) -> bool:
    """Completeness is enforced only in strict mode and never for the source locale."""
    return strict and locale != source_locale


def verify_no_missing_translations(catalog: MinimalCatalog, locale: LocaleCode) -> None:
    """Fail if any translation in the full minimal catalog is empty.

    Raises:
        MissingTranslationsError: If at least one translation is missing
    """
    missing = find_missing_translations(catalog)
    if missing:
        raise MissingTranslationsError(locale, missing)
