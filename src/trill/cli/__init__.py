"""Trill CLI: print the OpenAPI paths or the route table of a route tree.

Entry point registered as ``trill`` in ``pyproject.toml``::

    [project.scripts]
    trill = "trill.cli:main"
"""

import argparse
import logging
import sys

from trill.cli._options import add_tree_options


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``trill`` command."""
    parser = argparse.ArgumentParser(
        prog="trill",
        description="trill: OpenAPI paths from route trees.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every route as it is documented",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- trill paths ------------------------------------------------------
    paths_parser = subparsers.add_parser("paths", help="Print the OpenAPI paths document")
    add_tree_options(paths_parser)
    paths_parser.add_argument(
        "--format",
        choices=("json", "yaml"),
        default="json",
        help="Output format (default: json)",
    )
    paths_parser.add_argument("--title", default="API", help="info.title of the document")
    paths_parser.add_argument("--version", default="1.0.0", help="info.version of the document")
    paths_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write to this file instead of stdout",
    )

    # -- trill routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List documented routes")
    add_tree_options(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("trill").setLevel(logging.DEBUG)

    if args.command == "paths":
        from trill.cli._paths import run_paths

        run_paths(args)
    elif args.command == "routes":
        from trill.cli._routes import run_routes

        run_routes(args)
