"""Trill: OpenAPI Paths from route trees.

Walks a server's route tree and produces the OpenAPI ``paths`` section:
one entry per path template, one operation per HTTP method, merged with
the documentation attached along the way.

Basic usage::

    from trill import DocsConfig, RouteNode, generate_paths

    routing = RouteNode.root()
    users = routing.route("/users")
    users.get()
    users.post()

    paths = generate_paths(routing, DocsConfig(swagger_url="docs"))
    paths["/users"].get

Command line::

    trill paths myapp:routing --format yaml
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "DocsConfig",
    "Operation",
    "ParameterDoc",
    "PathItem",
    "PathsDocument",
    "PathsGenerator",
    "ResponseDoc",
    "RouteDocumentation",
    "RouteNode",
    "RouteRecord",
    "TreeDepthError",
    "TreeImportError",
    "TrillError",
    "generate_paths",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import trill`` fast while providing a clean top-level API.
    """
    if name == "RouteNode":
        from trill.routing.node import RouteNode

        return RouteNode

    if name == "DocsConfig":
        from trill.config import DocsConfig

        return DocsConfig

    if name in ("ParameterDoc", "ResponseDoc", "RouteDocumentation"):
        from trill import documentation as _doc

        return getattr(_doc, name)

    if name in ("Operation", "PathItem", "PathsDocument"):
        from trill.openapi import models as _models

        return getattr(_models, name)

    if name in ("PathsGenerator", "RouteRecord", "generate_paths"):
        from trill.openapi import paths as _paths

        return getattr(_paths, name)

    if name in ("ConfigurationError", "TreeDepthError", "TreeImportError", "TrillError"):
        from trill import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
