"""Route tree to OpenAPI Paths.

Walks the route tree, rebuilds each endpoint's path template and
metadata from its ancestors, drops the documentation UI's own routes,
and merges the generated operations into one ``PathsDocument``::

    generator = PathsGenerator(DocsConfig(swagger_url="docs"))
    paths = generator.generate(routing)
    paths["/users"].get

Climbing and traversal are iterative and bounded by
``DocsConfig.max_depth``; a tree deeper than that raises
``TreeDepthError`` instead of looping forever on a bad parent link.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from trill.config import DocsConfig
from trill.documentation import RouteDocumentation
from trill.errors import ConfigurationError, TreeDepthError
from trill.openapi.models import HTTP_METHODS, PathItem, PathsDocument
from trill.openapi.operation import OperationGenerator, generate_path_item
from trill.routing.node import RouteNode
from trill.routing.selectors import (
    AuthWrapper,
    DocumentationWrapper,
    HttpMethod,
    Other,
    Root,
    Segment,
    TrailingSlash,
    classify,
)

logger = logging.getLogger("trill.openapi")

_DEFAULT_MAX_DEPTH = DocsConfig().max_depth


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """An endpoint found in the tree, with everything its ancestors say about it."""

    node: RouteNode
    method: str
    path: str
    documentation: RouteDocumentation
    protected: bool

    @property
    def effective_protected(self) -> bool:
        """Protection after the documentation's ``protected`` override."""
        if self.documentation.protected is not None:
            return self.documentation.protected
        return self.protected


def _ancestors(node: RouteNode, max_depth: int) -> Iterator[RouteNode]:
    """Yield *node*, its parent, and so on up to the root."""
    current: RouteNode | None = node
    depth = 0
    while current is not None:
        depth += 1
        if depth > max_depth:
            raise TreeDepthError(max_depth)
        yield current
        current = current.parent


def reconstruct_path(node: RouteNode, max_depth: int = _DEFAULT_MAX_DEPTH) -> str:
    """Rebuild the path template that leads to *node*.

    Root contributes nothing and a trailing slash resets the path to
    ``"/"``; both stop the climb. Method terminators and wrappers are
    transparent. Every other node appends ``/<segment>``.
    """
    segments: list[str] = []
    base = ""
    for current in _ancestors(node, max_depth):
        match classify(current):
            case TrailingSlash():
                base = "/"
                break
            case Root():
                break
            case DocumentationWrapper() | HttpMethod() | AuthWrapper():
                continue
            case Segment(literal=raw) | Other(raw=raw):
                segments.append(raw)
    return base + "".join(f"/{segment}" for segment in reversed(segments))


def resolve_documentation(
    node: RouteNode, max_depth: int = _DEFAULT_MAX_DEPTH
) -> RouteDocumentation:
    """Documentation of the nearest documented ancestor (or *node* itself)."""
    for current in _ancestors(node, max_depth):
        match classify(current):
            case DocumentationWrapper(doc=doc):
                return doc
    return RouteDocumentation()


def resolve_protected(node: RouteNode, max_depth: int = _DEFAULT_MAX_DEPTH) -> bool:
    """True if *node* or any ancestor wraps it in authentication."""
    return any(isinstance(classify(current), AuthWrapper) for current in _ancestors(node, max_depth))


def collect_routes(root: RouteNode, max_depth: int = _DEFAULT_MAX_DEPTH) -> list[RouteNode]:
    """Return every method terminator under *root*, in pre-order."""
    routes: list[RouteNode] = []
    stack: list[tuple[RouteNode, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            raise TreeDepthError(max_depth)
        if isinstance(classify(node), HttpMethod):
            routes.append(node)
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return routes


def _route_method(node: RouteNode, path: str) -> str:
    """Upper-case HTTP method of a method terminator.

    Raises ``ConfigurationError`` when the terminator has no method that
    fits a Path Item slot.
    """
    kind = classify(node)
    method = kind.method if isinstance(kind, HttpMethod) else None
    if not isinstance(method, str) or method.strip().lower() not in HTTP_METHODS:
        msg = (
            f"Route {path or '/'!r} has method terminator {node.selector!r} "
            f"without a supported HTTP method (expected one of {', '.join(HTTP_METHODS)})"
        )
        raise ConfigurationError(msg)
    return method.strip().upper()


def build_route_records(root: RouteNode, max_depth: int = _DEFAULT_MAX_DEPTH) -> list[RouteRecord]:
    """Collect every endpoint under *root* as a ``RouteRecord``."""
    records: list[RouteRecord] = []
    for node in collect_routes(root, max_depth):
        path = reconstruct_path(node, max_depth)
        records.append(
            RouteRecord(
                node=node,
                method=_route_method(node, path),
                path=path,
                documentation=resolve_documentation(node, max_depth),
                protected=resolve_protected(node, max_depth),
            )
        )
    return records


def _strip_leading_slash(value: str) -> str:
    return value.removeprefix("/")


def filter_reserved(
    records: Iterable[RouteRecord], swagger_url: str, forward_root: bool
) -> list[RouteRecord]:
    """Drop the documentation UI's own routes.

    Those are the UI page, its static files and its schema files. With
    *forward_root*, ``"/"`` belongs to the UI as well.
    """
    reserved = {
        _strip_leading_slash(swagger_url),
        _strip_leading_slash(f"{swagger_url}/{{filename}}"),
        _strip_leading_slash(f"{swagger_url}/schemas/{{schemaname}}"),
    }
    kept: list[RouteRecord] = []
    for record in records:
        if _strip_leading_slash(record.path) in reserved or (forward_root and record.path == "/"):
            logger.debug("Skip reserved path: %s %s", record.method, record.path)
            continue
        kept.append(record)
    return kept


def merge_path_item(paths: dict[str, PathItem], path: str, item: PathItem) -> None:
    """Fold *item* into *paths* at *path*.

    A new path gets a copy of *item*. An existing one takes each method
    slot that *item* populates and keeps the rest.
    """
    existing = paths.get(path)
    if existing is None:
        paths[path] = replace(item)
        return
    for method in HTTP_METHODS:
        incoming = getattr(item, method)
        if incoming is None:
            continue
        current = getattr(existing, method)
        if current is not None and current != incoming:
            logger.debug("Replacing %s operation at %s", method.upper(), path)
        setattr(existing, method, incoming)


class PathsGenerator:
    """Generates the OpenAPI Paths of a route tree.

    The per-route operation comes from *operation_generator*; by default
    ``generate_path_item``. Each ``generate()`` call builds its own
    document, so one generator may serve several trees.
    """

    __slots__ = ("_config", "_operation_generator")

    def __init__(
        self,
        config: DocsConfig | None = None,
        operation_generator: OperationGenerator = generate_path_item,
    ) -> None:
        self._config = config or DocsConfig()
        self._operation_generator = operation_generator

    @property
    def config(self) -> DocsConfig:
        return self._config

    def collect(self, root: RouteNode) -> list[RouteRecord]:
        """Route records that belong in the documentation."""
        config = self._config
        records = filter_reserved(
            build_route_records(root, config.max_depth),
            config.swagger_url,
            config.forward_root,
        )
        visible: list[RouteRecord] = []
        for record in records:
            if record.documentation.hidden:
                logger.debug("Skip hidden route: %s %s", record.method, record.path)
                continue
            visible.append(record)
        return visible

    def generate(self, root: RouteNode) -> PathsDocument:
        """Build the ``PathsDocument`` for the tree under *root*."""
        config = self._config
        paths: dict[str, PathItem] = {}
        for record in self.collect(root):
            logger.debug("Configure path: %s %s", record.method, record.path)
            path, item = self._operation_generator(
                record,
                config.default_unauthorized_response,
                config.default_security_scheme_name,
                config.automatic_tag_generator,
            )
            merge_path_item(paths, path, item)
        return PathsDocument(paths)


def generate_paths(root: RouteNode, config: DocsConfig | None = None) -> PathsDocument:
    """Shortcut for ``PathsGenerator(config).generate(root)``."""
    return PathsGenerator(config).generate(root)
