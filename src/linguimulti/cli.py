"""lingui-multi command line.

Usage:
    lingui-multi extract [packageFile] [localesDirectory] [--raw-catalog FILE]
    lingui-multi compile [packageFile] [localesDirectory] [--strict]

Exit Codes:
    0: Success
    1: Any lingui-multi error (message printed to stderr)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from linguimulti import __version__
from linguimulti.catalog.store import CatalogStore
from linguimulti.compiler import JavaScriptCatalogCompiler
from linguimulti.config import load_project_config
from linguimulti.constants import DEFAULT_LOCALES_DIR, DEFAULT_PACKAGE_FILE
from linguimulti.errors import LinguiMultiError
from linguimulti.extraction import BabelMessageExtractor, JsonCatalogExtractor, MessageExtractor
from linguimulti.orchestrator import compile_catalogs, extract_catalogs

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "package_file",
        nargs="?",
        default=DEFAULT_PACKAGE_FILE,
        help=f"Project manifest (default: {DEFAULT_PACKAGE_FILE})",
    )
    parser.add_argument(
        "locales_dir",
        nargs="?",
        default=DEFAULT_LOCALES_DIR,
        help=f"Directory with one subdirectory per locale (default: {DEFAULT_LOCALES_DIR})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log per-file detail.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lingui-multi",
        description="Split a message catalog into sub-catalogs and compile them.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-file detail.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="Merge freshly extracted messages into every locale's catalogs.",
    )
    _add_common_arguments(extract)
    extract.add_argument(
        "--raw-catalog",
        type=Path,
        default=None,
        help="Merge a pre-collected raw catalog JSON instead of scanning sources.",
    )

    compile_ = subparsers.add_parser(
        "compile",
        help="Compile every sub-catalog for every locale.",
    )
    _add_common_arguments(compile_)
    compile_.add_argument(
        "--strict", "-s",
        action="store_true",
        help="Strict compilation: fail on missing translations.",
    )
    return parser


def _run_extract(args: argparse.Namespace) -> None:
    config = load_project_config(Path(args.package_file))
    store = CatalogStore(Path(args.locales_dir))
    extractor: MessageExtractor
    if args.raw_catalog is not None:
        extractor = JsonCatalogExtractor(args.raw_catalog)
    else:
        extractor = BabelMessageExtractor(root_dir=config.root_dir)
    extract_catalogs(config, store, extractor)


def _run_compile(args: argparse.Namespace) -> None:
    config = load_project_config(Path(args.package_file))
    store = CatalogStore(Path(args.locales_dir))
    compile_catalogs(config, store, JavaScriptCatalogCompiler(), strict=args.strict)


def main(argv: list[str] | None = None) -> int:
    """Run the lingui-multi command line."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    try:
        if args.command == "extract":
            _run_extract(args)
        else:
            _run_compile(args)
    except LinguiMultiError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
