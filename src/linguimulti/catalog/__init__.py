"""Catalog data model and on-disk store.

Submodules:
    types - type aliases (MessageKey, LocaleCode, catalogs), Origin, CatalogEntry
    store - CatalogStore (strict and soft loaders, writers, path layout)

Python 3.13+.
"""

from linguimulti.catalog.store import CatalogStore
from linguimulti.catalog.types import (
    CatalogEntry,
    CompleteCatalog,
    LocaleCode,
    MessageKey,
    MinimalCatalog,
    Origin,
    RawCatalog,
)

__all__ = [
    "CatalogEntry",
    "CatalogStore",
    "CompleteCatalog",
    "LocaleCode",
    "MessageKey",
    "MinimalCatalog",
    "Origin",
    "RawCatalog",
]
