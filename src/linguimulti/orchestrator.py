"""Extraction and compilation runs across locales and sub-catalogs.

extract_catalogs() runs the extractor once and merges the result into
every locale directory. compile_catalogs() partitions and compiles every
(sub-catalog, locale) pair.

Both runs are sequential and not transactional: the first error aborts the
run, and files written by earlier iterations stay on disk.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from linguimulti.catalog.store import CatalogStore
from linguimulti.catalog.types import LocaleCode
from linguimulti.compiler import CatalogCompiler, CompileResult, compile_sub_catalog
from linguimulti.config import ProjectConfig
from linguimulti.extraction import MessageExtractor
from linguimulti.merge import ExtractResult, extract_locale
from linguimulti.partition import build_ignore_pattern, select_keys
from linguimulti.verify import requires_verification, verify_no_missing_translations

__all__ = [
    "CompileSummary",
    "ExtractSummary",
    "compile_catalogs",
    "extract_catalogs",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractSummary:
    """Immutable aggregate of an extraction run.

    Attributes:
        extracted_keys: Number of keys produced by the extractor
        results: Per-locale merge results, in processing order
    """

    extracted_keys: int
    results: tuple[ExtractResult, ...]

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales written, in processing order."""
        return tuple(r.locale for r in self.results)

    @property
    def untranslated(self) -> int:
        """Total empty translations across all locales."""
        return sum(r.untranslated for r in self.results)

    def get_by_locale(self, locale: LocaleCode) -> ExtractResult | None:
        """Result for locale, or None if it was not processed."""
        return next((r for r in self.results if r.locale == locale), None)


@dataclass(frozen=True, slots=True)
class CompileSummary:
    """Immutable aggregate of a compilation run.

    Attributes:
        results: Per-(sub-catalog, locale) results, in processing order
    """

    results: tuple[CompileResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"CompileSummary(artifacts={self.artifact_count}, catalogs={len(self.catalog_names)})"

    @property
    def artifact_count(self) -> int:
        """Number of artifacts written."""
        return len(self.results)

    @property
    def catalog_names(self) -> tuple[str, ...]:
        """Distinct sub-catalog names, in processing order."""
        return tuple(dict.fromkeys(r.catalog_name for r in self.results))

    def get_by_catalog(self, catalog_name: str) -> tuple[CompileResult, ...]:
        """All results for one sub-catalog."""
        return tuple(r for r in self.results if r.catalog_name == catalog_name)

    def get_by_locale(self, locale: LocaleCode) -> tuple[CompileResult, ...]:
        """All results for one locale."""
        return tuple(r for r in self.results if r.locale == locale)


def extract_catalogs(
    config: ProjectConfig,
    store: CatalogStore,
    extractor: MessageExtractor,
) -> ExtractSummary:
    """Extract messages once and merge them into every locale.

    Raises:
        LocaleDirectoryError: If the locales directory does not exist
        CatalogFileError: If the extractor's raw catalog is unusable
    """
    locales = store.list_locales()
    raw = extractor.extract(config.src_path_dirs, config.ignore_patterns)

    results = []
    for locale in locales:
        result = extract_locale(store, locale, raw)
        logger.info("%s %d", locale, result.key_count)
        results.append(result)
    return ExtractSummary(extracted_keys=len(raw), results=tuple(results))


def compile_catalogs(
    config: ProjectConfig,
    store: CatalogStore,
    compiler: CatalogCompiler,
    *,
    strict: bool = False,
) -> CompileSummary:
    """Compile every configured sub-catalog, then the complete catalog.

    Args:
        config: Validated project configuration
        store: Catalog store for the locales directory
        compiler: Artifact renderer
        strict: Fail on empty translations in non-source locales

    Raises:
        LocaleDirectoryError: If the locales directory does not exist
        CatalogFileError: If a locale's catalogs are missing or corrupted
        MissingTranslationsError: In strict mode, on the first incomplete locale
    """
    locales = store.list_locales()
    results = []

    for catalog in config.catalogs:
        logger.info("\n\nCatalog: %s", catalog.name)
        logger.info("================")
        pattern = build_ignore_pattern(config.ignore_patterns_for(catalog))

        for locale in locales:
            eligible = select_keys(store.load_complete(locale), pattern)
            minimal = store.load_minimal(locale)

            if requires_verification(strict, locale, config.source_locale):
                verify_no_missing_translations(minimal, locale)

            result = compile_sub_catalog(store, compiler, locale, catalog.name, eligible, minimal)
            logger.info("%s %d", locale, result.key_count)
            results.append(result)

    return CompileSummary(results=tuple(results))
