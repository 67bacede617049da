"""Origin-path partitioning of a complete catalog into sub-catalogs.

A key belongs to a sub-catalog only if none of its origins matches the
sub-catalog's ignore pattern. One ignored usage site vetoes the key for
that sub-catalog, because the key is needed wherever it appears.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from linguimulti.catalog.types import CatalogEntry, CompleteCatalog, MessageKey
from linguimulti.errors import ConfigurationError

__all__ = [
    "build_ignore_pattern",
    "is_eligible",
    "select_keys",
]


def build_ignore_pattern(patterns: Iterable[str]) -> re.Pattern[str] | None:
    """Compile patterns into one case-insensitive alternation.

    Returns:
        Compiled pattern, or None when no patterns are given

    Raises:
        ConfigurationError: If the combined expression does not compile
    """
    parts = list(patterns)
    if not parts:
        return None
    source = "|".join(parts)
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        msg = f"invalid ignore pattern: {source!r} ({e})"
        raise ConfigurationError(msg) from e


def is_eligible(entry: CatalogEntry, pattern: re.Pattern[str] | None) -> bool:
    """True if no origin path of entry matches pattern."""
    if pattern is None:
        return True
    return all(pattern.search(path) is None for path in entry.origin_paths)


def select_keys(
    catalog: CompleteCatalog,
    pattern: re.Pattern[str] | None,
) -> tuple[MessageKey, ...]:
    """Return the keys of catalog eligible under pattern, in catalog order."""
    return tuple(key for key, entry in catalog.items() if is_eligible(entry, pattern))
