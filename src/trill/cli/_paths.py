"""``trill paths``: print the OpenAPI paths of a route tree.

Loads the route tree from an import string, generates its paths and
writes them as a minimal OpenAPI document in JSON or YAML.
"""

import argparse
import logging
import sys
from pathlib import Path

from trill.cli._options import docs_config, fail
from trill.cli._resolve import load_tree
from trill.errors import TrillError
from trill.openapi.paths import PathsGenerator
from trill.openapi.serialize import openapi_document, to_json, to_yaml

logger = logging.getLogger("trill.cli")


def run_paths(args: argparse.Namespace) -> None:
    """Generate and print (or write) the paths document.

    Exits with code 1 when the tree cannot be loaded, is not valid for
    documentation, or the output file cannot be written.
    """
    try:
        paths = PathsGenerator(docs_config(args)).generate(load_tree(args.tree))
    except TrillError as exc:
        fail(exc)

    document = openapi_document(paths, title=args.title, version=args.version)
    text = to_yaml(document) if args.format == "yaml" else to_json(document)

    if not args.output:
        sys.stdout.write(text)
        return
    try:
        Path(args.output).write_text(text, encoding="utf-8")
    except OSError as exc:
        fail(exc)
    logger.info("Wrote %d paths to %s", len(paths), args.output)
