"""lingui-multi exception hierarchy.

Every failure the tool can report derives from LinguiMultiError, so the
command line can print the message and exit with status 1 without catching
unrelated exceptions.

Hierarchy:
    LinguiMultiError (base)
    ├─ ConfigurationError (manifest absent, invalid, or incomplete)
    ├─ LocaleDirectoryError (locales directory absent)
    ├─ SourceDirectoryError (configured source directory absent)
    ├─ CatalogFileError (required catalog file unusable)
    │  ├─ CatalogMissingError ("file missing: <path>")
    │  └─ CatalogCorruptedError ("file is corrupted: <path>")
    └─ MissingTranslationsError (strict mode, untranslated keys)

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

__all__ = [
    "CatalogCorruptedError",
    "CatalogFileError",
    "CatalogMissingError",
    "ConfigurationError",
    "LinguiMultiError",
    "LocaleDirectoryError",
    "MissingTranslationsError",
    "SourceDirectoryError",
]


class LinguiMultiError(Exception):
    """Base exception for all lingui-multi errors."""


class ConfigurationError(LinguiMultiError):
    """Project manifest is absent, unparseable, or missing required keys.

    Always fatal. Raised before any catalog is read or written.
    """


class LocaleDirectoryError(LinguiMultiError):
    """Locales directory does not exist."""


@final
class SourceDirectoryError(LinguiMultiError):
    """A configured source directory does not exist."""


class CatalogFileError(LinguiMultiError):
    """A required catalog file could not be used.

    Attributes:
        path: Path of the offending file
    """

    def __init__(self, message: str, path: Path) -> None:
        """Initialize CatalogFileError.

        Args:
            message: Human-readable error description
            path: Path of the offending file
        """
        super().__init__(message)
        self.path = path


@final
class CatalogMissingError(CatalogFileError):
    """Required catalog file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file missing: {path}", path)


@final
class CatalogCorruptedError(CatalogFileError):
    """Catalog file exists but cannot be read or parsed."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file is corrupted: {path}", path)


@final
class MissingTranslationsError(LinguiMultiError):
    """Strict compilation found untranslated keys in a non-source locale.

    Attributes:
        locale: Locale whose minimal catalog is incomplete
        missing: Keys with an empty translation, in catalog order
    """

    def __init__(self, locale: str, missing: tuple[str, ...]) -> None:
        """Initialize MissingTranslationsError.

        Args:
            locale: Locale whose minimal catalog is incomplete
            missing: Keys with an empty translation
        """
        super().__init__(f"Missing {len(missing)} translations in {locale}")
        self.locale = locale
        self.missing = missing

    @property
    def count(self) -> int:
        """Number of untranslated keys."""
        return len(self.missing)
