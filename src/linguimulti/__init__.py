"""lingui-multi - split a localization catalog into compiled sub-catalogs.

Keeps a complete catalog (translations plus source origins) and a minimal
catalog (translations only) per locale, merges fresh extractions into them
without losing translations, and compiles one artifact per configured
sub-catalog, each limited to the keys whose origins it does not ignore.

Public API:
    load_project_config - Read and validate the project manifest
    CatalogStore - Per-locale catalog files
    extract_catalogs - Merge a fresh extraction into every locale
    compile_catalogs - Partition and compile every sub-catalog
    merge_catalogs - Pure merge of raw and stored catalogs
    select_keys - Origin-based sub-catalog key selection
    verify_no_missing_translations - Strict completeness check

Exceptions:
    LinguiMultiError - Base exception class
    ConfigurationError - Manifest problems
    CatalogMissingError / CatalogCorruptedError - Unusable catalog files
    LocaleDirectoryError - Locales directory absent
    SourceDirectoryError - Configured source directory absent
    MissingTranslationsError - Strict mode failure
"""

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .catalog import CatalogEntry, CatalogStore, Origin
from .config import ProjectConfig, SubCatalogConfig, load_project_config
from .errors import (
    CatalogCorruptedError,
    CatalogFileError,
    CatalogMissingError,
    ConfigurationError,
    LinguiMultiError,
    LocaleDirectoryError,
    MissingTranslationsError,
    SourceDirectoryError,
)
from .merge import merge_catalogs
from .orchestrator import compile_catalogs, extract_catalogs
from .partition import select_keys
from .verify import verify_no_missing_translations

try:
    __version__ = _get_version("lingui-multi")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogCorruptedError",
    "CatalogEntry",
    "CatalogFileError",
    "CatalogMissingError",
    "CatalogStore",
    "ConfigurationError",
    "LinguiMultiError",
    "LocaleDirectoryError",
    "MissingTranslationsError",
    "Origin",
    "ProjectConfig",
    "SourceDirectoryError",
    "SubCatalogConfig",
    "__version__",
    "compile_catalogs",
    "extract_catalogs",
    "load_project_config",
    "merge_catalogs",
    "select_keys",
    "verify_no_missing_translations",
]
