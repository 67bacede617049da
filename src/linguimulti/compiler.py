"""Compilation of selected translations into runtime artifacts.

compile_sub_catalog() is the adapter between the partition engine and a
CatalogCompiler: it narrows the minimal catalog to the eligible keys, asks
the compiler for artifact source, and stores it at the deterministic path
for (locale, sub-catalog).

JavaScriptCatalogCompiler renders a CommonJS module carrying the messages
and the locale's CLDR plural function:

    /* eslint-disable */module.exports={languageData:{"plurals":<fn>},messages:{...}};

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from babel import Locale, UnknownLocaleError
from babel.plural import to_javascript

from linguimulti.catalog.store import CatalogStore
from linguimulti.catalog.types import LocaleCode, MessageKey, MinimalCatalog
from linguimulti.constants import FALLBACK_PLURAL_LOCALE

__all__ = [
    "CatalogCompiler",
    "CompileResult",
    "JavaScriptCatalogCompiler",
    "compile_sub_catalog",
    "plural_function",
    "screen_catalog",
]

logger = logging.getLogger(__name__)


class CatalogCompiler(Protocol):
    """Protocol for rendering a key -> translation mapping as artifact source."""

    def compile(self, locale: LocaleCode, messages: MinimalCatalog) -> str:
        """Return artifact source for messages of locale."""


@lru_cache(maxsize=128)
def plural_function(locale: LocaleCode) -> str:
    """JavaScript plural function for locale, from Babel's CLDR data.

    Both 'pt-BR' and 'pt_BR' spellings are accepted. Unknown locales use
    the plural rules of FALLBACK_PLURAL_LOCALE.
    """
    try:
        parsed = Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s plural rules",
            locale,
            e,
            FALLBACK_PLURAL_LOCALE,
        )
        parsed = Locale.parse(FALLBACK_PLURAL_LOCALE)
    return to_javascript(parsed.plural_form)


@dataclass(frozen=True, slots=True)
class JavaScriptCatalogCompiler:
    """Render catalogs as CommonJS modules.

    Attributes:
        header: Text emitted before the module body
    """

    header: str = "/* eslint-disable */"

    def compile(self, locale: LocaleCode, messages: MinimalCatalog) -> str:
        """Return module source for messages of locale."""
        body = json.dumps(dict(messages), ensure_ascii=False, separators=(",", ":"))
        plurals = plural_function(locale)
        return (
            f'{self.header}module.exports={{languageData:{{"plurals":{plurals}}},'
            f"messages:{body}}};"
        )


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Outcome of compiling one (sub-catalog, locale) pair.

    Attributes:
        catalog_name: Sub-catalog name
        locale: Locale directory name
        key_count: Number of keys written to the artifact
        path: Artifact path
    """

    catalog_name: str
    locale: LocaleCode
    key_count: int
    path: Path


def screen_catalog(
    eligible_keys: Iterable[MessageKey],
    minimal: MinimalCatalog,
) -> dict[MessageKey, str]:
    """Translations of the eligible keys present in minimal.

    Eligible keys without a minimal entry are dropped silently.
    """
    return {key: minimal[key] for key in eligible_keys if key in minimal}


def compile_sub_catalog(
    store: CatalogStore,
    compiler: CatalogCompiler,
    locale: LocaleCode,
    catalog_name: str,
    eligible_keys: Iterable[MessageKey],
    minimal: MinimalCatalog,
) -> CompileResult:
    """Compile and store the artifact for (locale, catalog_name)."""
    messages = screen_catalog(eligible_keys, minimal)
    path = store.write_artifact(locale, catalog_name, compiler.compile(locale, messages))
    return CompileResult(
        catalog_name=catalog_name,
        locale=locale,
        key_count=len(messages),
        path=path,
    )
