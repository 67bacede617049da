"""Message extraction collaborators.

The merge engine consumes a raw catalog: every message key found in the
sources with the locations where it was found and no translation. Any
object with a matching extract() method can supply one.

Implementations:
    BabelMessageExtractor - scans source trees with Babel's extractors
    JsonCatalogExtractor  - reads a raw catalog collected by another tool

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Protocol

from babel.messages.extract import DEFAULT_KEYWORDS, extract_from_dir

from linguimulti.catalog.store import parse_complete_catalog, read_json_object
from linguimulti.catalog.types import CatalogEntry, MessageKey, Origin, RawCatalog
from linguimulti.errors import ConfigurationError, SourceDirectoryError
from linguimulti.partition import build_ignore_pattern

__all__ = [
    "DEFAULT_METHOD_MAP",
    "BabelMessageExtractor",
    "JsonCatalogExtractor",
    "MessageExtractor",
]

logger = logging.getLogger(__name__)

DEFAULT_METHOD_MAP: tuple[tuple[str, str], ...] = (
    ("**.py", "python"),
    ("**.js", "javascript"),
    ("**.jsx", "javascript"),
    ("**.ts", "javascript"),
    ("**.tsx", "javascript"),
)
"""Babel method map: glob pattern -> extraction method."""


class MessageExtractor(Protocol):
    """Protocol for producing a raw catalog from source directories.

    Example:
        >>> class StaticExtractor:
        ...     def extract(self, src_dirs, ignore_patterns):
        ...         return {"Hello": CatalogEntry(origin=(Origin("a.js", 1),))}
    """

    def extract(self, src_dirs: Sequence[Path], ignore_patterns: Sequence[str]) -> RawCatalog:
        """Collect every message key used under src_dirs.

        Args:
            src_dirs: Source directories to scan
            ignore_patterns: Regular expressions; matching file paths are skipped

        Returns:
            Raw catalog with empty translations
        """


@dataclass(slots=True)
class _Collected:
    origin: list[Origin] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    context: str | None = None

    def to_entry(self) -> CatalogEntry:
        extra: dict[str, Any] = {}
        if self.context is not None:
            extra["context"] = self.context
        if self.comments:
            extra["extractedComments"] = list(self.comments)
        return CatalogEntry(origin=tuple(self.origin), extra=MappingProxyType(extra))


@dataclass(frozen=True, slots=True)
class BabelMessageExtractor:
    """Extract messages with babel.messages.extract.

    Origins are reported relative to root_dir with forward slashes, so the
    persisted catalogs do not depend on where the project is checked out.

    Attributes:
        root_dir: Directory origin paths are made relative to
        method_map: Babel (pattern, method) pairs
        keywords: Babel keyword specification (function name -> argument indices)
        comment_tags: Comment prefixes kept as extracted comments
    """

    root_dir: Path
    method_map: Sequence[tuple[str, str]] = DEFAULT_METHOD_MAP
    keywords: Mapping[str, Any] = field(default_factory=lambda: dict(DEFAULT_KEYWORDS))
    comment_tags: Sequence[str] = ()

    def _origin_path(self, src_dir: Path, filename: str) -> str:
        path = (src_dir / filename).resolve()
        try:
            return path.relative_to(self.root_dir.resolve()).as_posix()
        except ValueError:
            return path.as_posix()

    def extract(self, src_dirs: Sequence[Path], ignore_patterns: Sequence[str]) -> RawCatalog:
        """Scan every directory in src_dirs and collect message keys.

        Raises:
            ConfigurationError: If no source directory is configured
            SourceDirectoryError: If a source directory does not exist
        """
        if not src_dirs:
            msg = "no srcPathDirs in lingui config"
            raise ConfigurationError(msg)
        missing = [src_dir for src_dir in src_dirs if not src_dir.is_dir()]
        if missing:
            msg = f"source directory does not exist: {missing[0]}"
            raise SourceDirectoryError(msg)

        ignore = build_ignore_pattern(ignore_patterns)
        collected: dict[MessageKey, _Collected] = {}

        for src_dir in src_dirs:
            for filename, lineno, message, comments, context in extract_from_dir(
                str(src_dir),
                method_map=list(self.method_map),
                keywords=dict(self.keywords),
                comment_tags=tuple(self.comment_tags),
                strip_comment_tags=True,
            ):
                path = self._origin_path(src_dir, filename)
                if ignore is not None and ignore.search(path):
                    continue
                key = message[0] if isinstance(message, tuple) else message
                if not key:
                    continue
                item = collected.setdefault(key, _Collected())
                item.origin.append(Origin(path, lineno))
                item.comments.extend(c for c in comments if c not in item.comments)
                if item.context is None and context:
                    item.context = context

        logger.debug("Extracted %d message keys", len(collected))
        return {key: item.to_entry() for key, item in collected.items()}


@dataclass(frozen=True, slots=True)
class JsonCatalogExtractor:
    """Read a raw catalog previously collected by an external extractor.

    The file holds ``{key: {"origin": [[path, line], ...], ...}}``. Source
    directories and ignore patterns are not consulted.

    Attributes:
        path: Raw catalog JSON file
    """

    path: Path

    def extract(self, src_dirs: Sequence[Path], ignore_patterns: Sequence[str]) -> RawCatalog:
        """Load the raw catalog file.

        Raises:
            CatalogMissingError: If the file does not exist
            CatalogCorruptedError: If the file cannot be parsed
        """
        raw = parse_complete_catalog(read_json_object(self.path), self.path)
        return {key: entry.with_translation("") for key, entry in raw.items()}
