"""Loads the route tree named on the command line.

``"pkg.module:attr"`` names a module attribute holding the tree. The
attribute may be the root ``RouteNode`` itself, an object carrying one
on ``.routing`` (an application, a plugin), or a zero-argument factory
returning either.
"""

import importlib

from trill.errors import TreeImportError
from trill.routing.node import RouteNode

DEFAULT_ATTRIBUTE = "routing"


def _unwrap(obj: object) -> RouteNode | None:
    if isinstance(obj, RouteNode):
        return obj
    routing = getattr(obj, "routing", None)
    return routing if isinstance(routing, RouteNode) else None


def load_tree(import_string: str) -> RouteNode:
    """Return the root of the route tree named by *import_string*.

    Every failure (bad module, missing attribute, factory error, object
    that is not a tree) raises ``TreeImportError``.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not module_path:
        msg = f"Import string {import_string!r} names no module (expected 'module:attribute')"
        raise TreeImportError(msg)

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        msg = f"Cannot import {module_path!r}: {exc}"
        raise TreeImportError(msg) from exc

    attr_name = attr_name or DEFAULT_ATTRIBUTE
    if not hasattr(module, attr_name):
        msg = f"Module {module_path!r} has no attribute {attr_name!r}"
        raise TreeImportError(msg)
    obj = getattr(module, attr_name)

    tree = _unwrap(obj)
    if tree is None and callable(obj):
        try:
            tree = _unwrap(obj())
        except Exception as exc:
            msg = f"Calling {import_string!r} failed: {exc}"
            raise TreeImportError(msg) from exc

    if tree is None:
        msg = f"{import_string!r} is a {type(obj).__name__}, not a route tree or an object with .routing"
        raise TreeImportError(msg)
    return tree
