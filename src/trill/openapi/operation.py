"""Default per-route operation generator.

Turns one ``RouteRecord`` into the ``(path, PathItem)`` pair the paths
generator merges. Any callable with the ``OperationGenerator`` shape can
replace it.
"""

import re
from typing import TYPE_CHECKING, Any, Protocol

from trill.config import TagGenerator
from trill.documentation import ParameterDoc, ResponseDoc
from trill.openapi.models import Operation, PathItem

if TYPE_CHECKING:
    from trill.openapi.paths import RouteRecord

# {id}, {id?} and {rest...} placeholders in a path template
_PLACEHOLDER = re.compile(r"\{([^{}/?.]+)(?:\?|\.\.\.)?\}")


class OperationGenerator(Protocol):
    """Produces the path item for a single route record."""

    def __call__(
        self,
        record: "RouteRecord",
        default_unauthorized_response: ResponseDoc | None,
        default_security_scheme_name: str | None,
        tag_generator: TagGenerator | None,
    ) -> tuple[str, PathItem]: ...


def path_parameter_names(path: str) -> list[str]:
    """Names of the placeholders in *path*, in order of appearance."""
    return _PLACEHOLDER.findall(path)


def _tags(record: "RouteRecord", tag_generator: TagGenerator | None) -> tuple[str, ...]:
    tags = list(record.documentation.tags)
    if tag_generator is not None:
        auto_tag = tag_generator([part for part in record.path.split("/") if part])
        if auto_tag and auto_tag not in tags:
            tags.append(auto_tag)
    return tuple(tags)


def _parameters(record: "RouteRecord") -> tuple[dict[str, Any], ...]:
    documented = record.documentation.parameters
    known = {p.name for p in documented if p.location == "path"}
    implicit = [
        ParameterDoc(name, location="path", required=True)
        for name in path_parameter_names(record.path)
        if name not in known
    ]
    return tuple(p.to_dict() for p in (*documented, *implicit))


def generate_path_item(
    record: "RouteRecord",
    default_unauthorized_response: ResponseDoc | None,
    default_security_scheme_name: str | None,
    tag_generator: TagGenerator | None,
) -> tuple[str, PathItem]:
    """Build the path item holding *record*'s operation.

    Protected operations get the default unauthorized response as
    ``401`` (unless one is documented) and a security requirement for
    each documented scheme, falling back to the default scheme name.
    """
    doc = record.documentation
    protected = record.effective_protected

    responses = {status: response.to_dict() for status, response in doc.responses.items()}
    security: tuple[dict[str, list[str]], ...] = ()
    if protected:
        if default_unauthorized_response is not None and "401" not in responses:
            responses["401"] = default_unauthorized_response.to_dict()
        scheme_names = doc.security_scheme_names or (
            (default_security_scheme_name,) if default_security_scheme_name else ()
        )
        security = tuple({name: []} for name in scheme_names)

    operation = Operation(
        tags=_tags(record, tag_generator),
        summary=doc.summary,
        description=doc.description,
        operation_id=doc.operation_id,
        parameters=_parameters(record),
        request_body=dict(doc.request_body) if doc.request_body is not None else None,
        responses=responses,
        security=security,
        deprecated=doc.deprecated,
    )
    item = PathItem()
    setattr(item, record.method.lower(), operation)
    return record.path, item
