"""OpenAPI objects produced by the paths generator.

``Operation`` is frozen. ``PathItem`` is mutable because the merger fills
its method slots in place while one generation call is running.
``PathsDocument`` is the read-only result handed back to callers.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Method slots of an OpenAPI Path Item, in document order
HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclass(frozen=True, slots=True)
class Operation:
    """A single OpenAPI operation object."""

    tags: tuple[str, ...] = ()
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = None
    parameters: tuple[dict[str, Any], ...] = ()
    request_body: dict[str, Any] | None = None
    responses: dict[str, dict[str, Any]] = field(default_factory=dict)
    security: tuple[dict[str, list[str]], ...] = ()
    deprecated: bool = False

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.tags:
            result["tags"] = list(self.tags)
        if self.summary:
            result["summary"] = self.summary
        if self.description:
            result["description"] = self.description
        if self.operation_id:
            result["operationId"] = self.operation_id
        if self.parameters:
            result["parameters"] = [dict(p) for p in self.parameters]
        if self.request_body is not None:
            result["requestBody"] = dict(self.request_body)
        result["responses"] = {status: dict(body) for status, body in self.responses.items()}
        if self.security:
            result["security"] = [dict(req) for req in self.security]
        if self.deprecated:
            result["deprecated"] = True
        return result


@dataclass(slots=True)
class PathItem:
    """Operations available at one path, at most one per HTTP method."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield ``(method, operation)`` for every populated slot."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation

    def to_dict(self) -> dict[str, Any]:
        return {method: operation.to_dict() for method, operation in self.operations()}


class PathsDocument(Mapping[str, PathItem]):
    """Read-only mapping of path template to ``PathItem``.

    Keys keep first-seen order. Returned by ``PathsGenerator.generate()``;
    there is no public way to add or replace entries afterwards.
    """

    __slots__ = ("_items",)

    def __init__(self, items: dict[str, PathItem] | None = None) -> None:
        self._items: dict[str, PathItem] = dict(items or {})

    def __getitem__(self, path: str) -> PathItem:
        return self._items[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PathsDocument({list(self._items)!r})"

    def to_dict(self) -> dict[str, Any]:
        return {path: item.to_dict() for path, item in self._items.items()}
