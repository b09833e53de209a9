"""``trill routes``: list the routes that end up in the documentation.

Takes the same filters as ``trill paths`` and prints one row per
documented route with method, path, and whether its operation requires
authentication.
"""

import argparse

from trill.cli._options import docs_config, fail
from trill.cli._resolve import load_tree
from trill.errors import TrillError
from trill.openapi.paths import PathsGenerator


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH, and AUTH for a route tree."""
    try:
        records = PathsGenerator(docs_config(args)).collect(load_tree(args.tree))
    except TrillError as exc:
        fail(exc)

    if not records:
        print("No routes registered.")
        return

    rows = [(r.method, r.path or "/", "yes" if r.effective_protected else "") for r in records]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "AUTH"))
    print("-" * min(max_method + max_path + 8, 80))
    for method, path, auth in rows:
        print(fmt.format(method, path, auth))
