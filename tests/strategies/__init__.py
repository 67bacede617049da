"""Hypothesis strategies for lingui-multi property-based testing.

Usage:
    from tests.strategies import raw_catalogs, stored_catalogs
    from tests.strategies.catalogs import origin_paths
"""

from .catalogs import (
    message_keys,
    origin_paths,
    origins,
    raw_catalogs,
    raw_entries,
    stored_catalogs,
    translations,
)

__all__ = [
    "message_keys",
    "origin_paths",
    "origins",
    "raw_catalogs",
    "raw_entries",
    "stored_catalogs",
    "translations",
]
