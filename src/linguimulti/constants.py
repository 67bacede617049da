"""Shared constants for lingui-multi.

Centralizes on-disk names and defaults so the store, the orchestrator and
the command line agree on a single layout.

Layout per locale directory:
    messages.json            - minimal catalog (key -> translation)
    messages.metadata.json   - complete catalog (key -> translation + origin)
    messages.js              - compiled artifact for the complete catalog
    <name>.messages.js       - compiled artifact for sub-catalog <name>

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # File names
    "MINIMAL_CATALOG_FILENAME",
    "COMPLETE_CATALOG_FILENAME",
    "ARTIFACT_FILENAME",
    # Catalog names
    "COMPLETE_CATALOG_NAME",
    # Directory handling
    "IGNORED_LOCALE_DIRS",
    "ROOT_DIR_PLACEHOLDER",
    # CLI defaults
    "DEFAULT_PACKAGE_FILE",
    "DEFAULT_LOCALES_DIR",
    # Compilation
    "FALLBACK_PLURAL_LOCALE",
    "JSON_INDENT",
]

# ============================================================================
# FILE NAMES
# ============================================================================

MINIMAL_CATALOG_FILENAME: str = "messages.json"
COMPLETE_CATALOG_FILENAME: str = "messages.metadata.json"
ARTIFACT_FILENAME: str = "messages.js"

# ============================================================================
# CATALOG NAMES
# ============================================================================

# Reserved sub-catalog compiled without a name prefix. Always present,
# regardless of configuration, so one full-coverage artifact exists.
COMPLETE_CATALOG_NAME: str = "__lingui-multi"

# ============================================================================
# DIRECTORY HANDLING
# ============================================================================

# Build output that sometimes lands inside the locales directory.
IGNORED_LOCALE_DIRS: frozenset[str] = frozenset({"_build"})

# Placeholder in lingui.srcPathDirs replaced by the manifest's directory.
ROOT_DIR_PLACEHOLDER: str = "<rootDir>"

# ============================================================================
# CLI DEFAULTS
# ============================================================================

DEFAULT_PACKAGE_FILE: str = "./package.json"
DEFAULT_LOCALES_DIR: str = "./locale"

# ============================================================================
# COMPILATION
# ============================================================================

# Plural rules used when Babel has no CLDR data for a locale directory.
FALLBACK_PLURAL_LOCALE: str = "en"

JSON_INDENT: int = 2
