"""Path string parsing for the route tree builder.

Turns ``"/users/{id:int}/files/{rest...}"`` into the selectors
``RouteNode.route()`` attaches, one per segment.
"""

from trill.errors import ConfigurationError
from trill.routing.selectors import (
    ParameterSelector,
    PathSegmentSelector,
    TailcardSelector,
    WildcardSelector,
)

type SegmentSelector = (
    PathSegmentSelector | ParameterSelector | WildcardSelector | TailcardSelector
)

# Converter names accepted after a colon: {id:int}. Documentation only
# cares about the name; "path" consumes the rest of the URL.
CONVERTERS = frozenset({"str", "int", "float", "path"})


def parse_segment(part: str) -> SegmentSelector:
    """Parse a single path segment into its selector.

    Examples::

        "users"        -> PathSegmentSelector("users")
        "{id}"         -> ParameterSelector("id")
        "{id:int}"     -> ParameterSelector("id")
        "{id?}"        -> ParameterSelector("id", optional=True)
        "{rest...}"    -> TailcardSelector("rest")
        "{file:path}"  -> TailcardSelector("file")
        "*"            -> WildcardSelector()
    """
    if part == "*":
        return WildcardSelector()
    if part.startswith("<") and part.endswith(">"):
        msg = f"Unsupported <param> syntax in segment {part!r}; use {{param}} instead."
        raise ConfigurationError(msg)
    if not (part.startswith("{") and part.endswith("}")):
        return PathSegmentSelector(part)

    inner = part[1:-1]
    if inner.endswith("..."):
        return TailcardSelector(inner[:-3])
    optional = inner.endswith("?")
    if optional:
        inner = inner[:-1]
    if ":" in inner:
        name, converter = inner.split(":", 1)
        if converter not in CONVERTERS:
            msg = f"Unknown converter {converter!r} in segment {part!r}."
            raise ConfigurationError(msg)
        if converter == "path":
            return TailcardSelector(name)
    else:
        name = inner
    if not name:
        msg = f"Empty parameter name in segment {part!r}."
        raise ConfigurationError(msg)
    return ParameterSelector(name, optional=optional)


def parse_path(path: str) -> list[SegmentSelector]:
    """Parse a route path string into selectors, outermost first.

    Empty segments are skipped, so leading, trailing and doubled slashes
    do not create nodes. Use ``RouteNode.trailing_slash()`` for an
    explicit trailing-slash route.
    """
    return [parse_segment(part) for part in path.strip("/").split("/") if part]
