"""Per-route documentation attached to the route tree.

``RouteDocumentation`` rides on ``DocumentedSelector`` nodes. The paths
generator only locates it and hands it to the operation generator, which
is the one place its fields are read.

Usage::

    docs = RouteDocumentation(
        summary="List users",
        tags=("users",),
        responses={"200": ResponseDoc("All users", schema={"type": "array"})},
    )
    root.route("users").documented(docs).get()
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from trill.errors import ConfigurationError

# OpenAPI parameter locations
PARAMETER_LOCATIONS = frozenset({"path", "query", "header", "cookie"})


@dataclass(frozen=True, slots=True)
class ParameterDoc:
    """A documented request parameter."""

    name: str
    location: str = "query"
    description: str | None = None
    required: bool = False
    schema: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.location not in PARAMETER_LOCATIONS:
            msg = f"Parameter {self.name!r} has unknown location {self.location!r}"
            raise ConfigurationError(msg)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "in": self.location}
        if self.description:
            result["description"] = self.description
        # OpenAPI requires path parameters to be required
        if self.required or self.location == "path":
            result["required"] = True
        result["schema"] = dict(self.schema) if self.schema is not None else {"type": "string"}
        return result


@dataclass(frozen=True, slots=True)
class ResponseDoc:
    """A documented response for one status code."""

    description: str
    content_type: str = "application/json"
    schema: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"description": self.description}
        if self.schema is not None:
            result["content"] = {self.content_type: {"schema": dict(self.schema)}}
        return result


@dataclass(frozen=True, slots=True)
class RouteDocumentation:
    """Documentation for every route below a ``DocumentedSelector``.

    ``protected`` overrides the tree-derived protection flag when set.
    ``hidden`` routes are left out of the generated paths entirely.
    """

    tags: tuple[str, ...] = ()
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = None
    security_scheme_names: tuple[str, ...] = ()
    protected: bool | None = None
    parameters: tuple[ParameterDoc, ...] = ()
    request_body: Mapping[str, Any] | None = None
    responses: Mapping[str, ResponseDoc] = field(default_factory=dict)
    deprecated: bool = False
    hidden: bool = False
