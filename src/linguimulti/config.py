"""Project manifest configuration.

Reads the ``lingui`` and ``lingui-multi`` blocks of a package manifest into
typed, immutable configuration objects.

Validation returns a tagged result instead of raising, so callers can
inspect a rejected manifest without exception handling:

    match validate_config(data, root_dir):
        case ConfigValid(config):
            ...
        case ConfigInvalid(error):
            ...

load_project_config() is the raising convenience used by the command line.

Recognized keys:
    lingui.sourceLocale            - locale exempt from strict checks (required)
    lingui.srcPathDirs             - directories handed to the extractor
    lingui.srcPathIgnorePatterns   - ignore patterns applied to every sub-catalog
    lingui-multi.<name>            - declares a sub-catalog (at least one required)
    lingui-multi.<name>.srcPathIgnorePatterns - per-sub-catalog ignore patterns

Python 3.13+.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from linguimulti.constants import COMPLETE_CATALOG_NAME, ROOT_DIR_PLACEHOLDER
from linguimulti.errors import ConfigurationError

__all__ = [
    "ConfigInvalid",
    "ConfigResult",
    "ConfigValid",
    "ProjectConfig",
    "SubCatalogConfig",
    "load_project_config",
    "validate_config",
]


@dataclass(frozen=True, slots=True)
class SubCatalogConfig:
    """A named sub-catalog and its own ignore patterns.

    Attributes:
        name: Sub-catalog name, used as the artifact file prefix
        ignore_patterns: Regular expressions matched against origin paths
    """

    name: str
    ignore_patterns: tuple[str, ...] = ()

    @property
    def is_complete_catalog(self) -> bool:
        """True for the reserved full-coverage catalog."""
        return self.name == COMPLETE_CATALOG_NAME


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Validated lingui-multi project configuration.

    Attributes:
        source_locale: Authoring locale, exempt from completeness checks
        src_path_dirs: Source directories, with <rootDir> already resolved
        ignore_patterns: Global ignore patterns
        sub_catalogs: Configured sub-catalogs in manifest order
        root_dir: Directory containing the manifest
    """

    source_locale: str
    src_path_dirs: tuple[Path, ...]
    ignore_patterns: tuple[str, ...]
    sub_catalogs: tuple[SubCatalogConfig, ...]
    root_dir: Path

    @property
    def catalogs(self) -> tuple[SubCatalogConfig, ...]:
        """Configured sub-catalogs followed by the reserved complete catalog."""
        return (*self.sub_catalogs, SubCatalogConfig(COMPLETE_CATALOG_NAME))

    def ignore_patterns_for(self, catalog: SubCatalogConfig) -> tuple[str, ...]:
        """Global patterns followed by the catalog's own patterns."""
        return (*self.ignore_patterns, *catalog.ignore_patterns)


@dataclass(frozen=True, slots=True)
class ConfigValid:
    """Successful validation result."""

    config: ProjectConfig


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    """Failed validation result."""

    error: ConfigurationError


ConfigResult: TypeAlias = ConfigValid | ConfigInvalid


def _string_list(value: Any, what: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg = f"{what} must be a list of strings"
        raise ConfigurationError(msg)
    return tuple(value)


def _check_patterns(patterns: tuple[str, ...], what: str) -> None:
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            msg = f"invalid pattern in {what}: {pattern!r} ({e})"
            raise ConfigurationError(msg) from e


def _resolve_src_dir(src: str, root_dir: Path) -> Path:
    return Path(src.replace(ROOT_DIR_PLACEHOLDER, str(root_dir)))


def _build_config(data: Mapping[str, Any], root_dir: Path) -> ProjectConfig:
    if "lingui" not in data:
        msg = "no lingui config found"
        raise ConfigurationError(msg)
    lingui = data["lingui"]
    if not isinstance(lingui, dict):
        msg = "lingui config must be an object"
        raise ConfigurationError(msg)
    if "sourceLocale" not in lingui:
        msg = "no source locale in lingui config"
        raise ConfigurationError(msg)
    source_locale = lingui["sourceLocale"]
    if not isinstance(source_locale, str):
        msg = "lingui.sourceLocale must be a string"
        raise ConfigurationError(msg)

    if "lingui-multi" not in data:
        msg = "no lingui-multi config found"
        raise ConfigurationError(msg)
    multi = data["lingui-multi"]
    if not isinstance(multi, dict):
        msg = "lingui-multi config must be an object"
        raise ConfigurationError(msg)
    if not multi:
        msg = "no lingui-multi sub-catalog config found"
        raise ConfigurationError(msg)

    ignore_patterns = _string_list(
        lingui.get("srcPathIgnorePatterns"), "lingui.srcPathIgnorePatterns"
    )
    _check_patterns(ignore_patterns, "lingui.srcPathIgnorePatterns")
    src_dirs = _string_list(lingui.get("srcPathDirs"), "lingui.srcPathDirs")

    sub_catalogs = []
    for name, settings in multi.items():
        if name == COMPLETE_CATALOG_NAME:
            msg = f"sub-catalog name {name!r} is reserved"
            raise ConfigurationError(msg)
        if not isinstance(settings, dict):
            msg = f"lingui-multi.{name} must be an object"
            raise ConfigurationError(msg)
        what = f"lingui-multi.{name}.srcPathIgnorePatterns"
        patterns = _string_list(settings.get("srcPathIgnorePatterns"), what)
        _check_patterns(patterns, what)
        sub_catalogs.append(SubCatalogConfig(name=name, ignore_patterns=patterns))

    return ProjectConfig(
        source_locale=source_locale,
        src_path_dirs=tuple(_resolve_src_dir(src, root_dir) for src in src_dirs),
        ignore_patterns=ignore_patterns,
        sub_catalogs=tuple(sub_catalogs),
        root_dir=root_dir,
    )


def validate_config(data: Any, root_dir: Path) -> ConfigResult:
    """Validate a decoded manifest.

    Args:
        data: Decoded manifest JSON
        root_dir: Directory substituted for <rootDir> in srcPathDirs

    Returns:
        ConfigValid with the typed configuration, or ConfigInvalid with the
        first problem found
    """
    if not isinstance(data, dict):
        return ConfigInvalid(ConfigurationError("manifest must be a JSON object"))
    try:
        return ConfigValid(_build_config(data, root_dir))
    except ConfigurationError as e:
        return ConfigInvalid(e)


def load_project_config(path: Path) -> ProjectConfig:
    """Read and validate the manifest at path.

    Raises:
        ConfigurationError: If the file is absent, not valid JSON, or invalid
    """
    if not path.exists():
        msg = f"{path.name} does not exist"
        raise ConfigurationError(msg)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"{path.name} is not a valid JSON file"
        raise ConfigurationError(msg) from e

    match validate_config(data, path.resolve().parent):
        case ConfigValid(config):
            return config
        case ConfigInvalid(error):
            raise error
