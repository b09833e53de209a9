"""Route selectors and their structural classification.

Every ``RouteNode`` carries a selector. The selector's type is the node's
tag: it says whether the node is a literal segment, a parameter capture,
an HTTP method terminator, an authentication or documentation wrapper,
and so on. ``classify()`` folds those types into the closed
``SelectorKind`` union the paths generator dispatches on.

Selectors from other routing layers are welcome on the tree. Anything
``classify()`` does not recognize becomes ``Other(raw=str(selector))``
and is treated as an ordinary path segment.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from trill.documentation import RouteDocumentation

if TYPE_CHECKING:
    from trill.routing.node import RouteNode


# -- Selectors (node tags) ---------------------------------------------------


@dataclass(frozen=True, slots=True)
class RootSelector:
    """Top of the routing tree."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class TrailingSlashSelector:
    """Explicit trailing-slash route (``/``)."""

    def __str__(self) -> str:
        return "/"


@dataclass(frozen=True, slots=True)
class PathSegmentSelector:
    """Constant path segment: ``users``."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ParameterSelector:
    """Path parameter capture: ``{id}``, or ``{id?}`` when optional."""

    name: str
    optional: bool = False

    def __str__(self) -> str:
        return f"{{{self.name}?}}" if self.optional else f"{{{self.name}}}"


@dataclass(frozen=True, slots=True)
class WildcardSelector:
    """Matches any single segment: ``*``."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True, slots=True)
class TailcardSelector:
    """Consumes the rest of the path: ``{name...}``."""

    name: str = ""

    def __str__(self) -> str:
        return f"{{{self.name}...}}"


@dataclass(frozen=True, slots=True)
class HttpMethodSelector:
    """Method terminator. Nodes tagged with it are route endpoints."""

    method: str

    def __str__(self) -> str:
        return f"(method:{self.method})"


@dataclass(frozen=True, slots=True)
class AuthenticationSelector:
    """Marks everything below as requiring authentication."""

    names: tuple[str | None, ...] = ()

    def __str__(self) -> str:
        return f"(authenticate {', '.join(str(n) for n in self.names)})"


@dataclass(frozen=True, slots=True)
class DocumentedSelector:
    """Attaches ``RouteDocumentation`` to everything below."""

    documentation: RouteDocumentation

    def __str__(self) -> str:
        return "(documented)"


# -- Selector kinds ----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Root:
    pass


@dataclass(frozen=True, slots=True)
class TrailingSlash:
    pass


@dataclass(frozen=True, slots=True)
class Segment:
    literal: str


@dataclass(frozen=True, slots=True)
class HttpMethod:
    method: str


@dataclass(frozen=True, slots=True)
class AuthWrapper:
    pass


@dataclass(frozen=True, slots=True)
class DocumentationWrapper:
    doc: RouteDocumentation


@dataclass(frozen=True, slots=True)
class Other:
    raw: str


type SelectorKind = (
    Root | TrailingSlash | Segment | HttpMethod | AuthWrapper | DocumentationWrapper | Other
)

# Selector types that contribute a path segment spelled by str(selector)
_SEGMENT_SELECTORS = (PathSegmentSelector, ParameterSelector, WildcardSelector, TailcardSelector)


def classify(node: "RouteNode") -> SelectorKind:
    """Return the structural kind of *node*.

    Looks only at the node's own selector, never at its parent or
    children. Never raises: unknown selector types map to ``Other``.
    """
    selector = node.selector
    match selector:
        case RootSelector():
            return Root()
        case TrailingSlashSelector():
            return TrailingSlash()
        case HttpMethodSelector(method=method):
            return HttpMethod(method)
        case AuthenticationSelector():
            return AuthWrapper()
        case DocumentedSelector(documentation=doc):
            return DocumentationWrapper(doc)
        case _ if isinstance(selector, _SEGMENT_SELECTORS):
            return Segment(str(selector))
        case _:
            return Other(str(selector))
