"""Options shared by the ``paths`` and ``routes`` commands."""

import argparse
import sys
from typing import Any, NoReturn

from trill.config import DocsConfig


def add_tree_options(parser: argparse.ArgumentParser) -> None:
    """Tree argument plus the filters deciding which routes are documented."""
    parser.add_argument(
        "tree",
        help="Import string of the route tree (e.g. myapp:routing)",
    )
    parser.add_argument(
        "--swagger-url",
        default=None,
        help="Documentation UI path whose own routes are left out",
    )
    parser.add_argument(
        "--forward-root",
        action="store_true",
        help="Leave out '/' as well (it forwards to the documentation UI)",
    )


def docs_config(args: argparse.Namespace) -> DocsConfig:
    overrides: dict[str, Any] = {"forward_root": args.forward_root}
    if args.swagger_url is not None:
        overrides["swagger_url"] = args.swagger_url
    return DocsConfig(**overrides)


def fail(exc: Exception) -> NoReturn:
    """Print *exc* as a one-line error and exit with status 1."""
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc
