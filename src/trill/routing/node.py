"""RouteNode: one element of the routing tree.

The tree is built once during setup and read by the paths generator.
Builder methods return the child they create (or reuse), so routes
chain naturally::

    routing = RouteNode.root()
    users = routing.route("/users")
    users.get()
    users.post()
    users.route("{id}").authenticate("jwt").get()
"""

from typing import Any

from trill.documentation import RouteDocumentation
from trill.routing.params import parse_path
from trill.routing.selectors import (
    AuthenticationSelector,
    DocumentedSelector,
    HttpMethodSelector,
    RootSelector,
    TrailingSlashSelector,
)


class RouteNode:
    """A node in the route tree. Mutable during setup only.

    ``selector`` may be any object; its type decides how the node is
    classified. Children keep insertion order.
    """

    __slots__ = ("_children", "parent", "selector")

    def __init__(self, selector: Any, parent: "RouteNode | None" = None) -> None:
        self.selector = selector
        self.parent = parent
        self._children: list[RouteNode] = []

    @classmethod
    def root(cls) -> "RouteNode":
        """Create an empty tree and return its root."""
        return cls(RootSelector())

    @property
    def children(self) -> tuple["RouteNode", ...]:
        return tuple(self._children)

    def child(self, selector: Any) -> "RouteNode":
        """Return the child tagged *selector*, creating it if needed."""
        for existing in self._children:
            if existing.selector == selector:
                return existing
        node = RouteNode(selector, parent=self)
        self._children.append(node)
        return node

    def route(self, path: str) -> "RouteNode":
        """Descend through *path*, one child per segment."""
        node = self
        for selector in parse_path(path):
            node = node.child(selector)
        return node

    def method(self, method: str) -> "RouteNode":
        return self.child(HttpMethodSelector(method))

    def get(self) -> "RouteNode":
        return self.method("GET")

    def put(self) -> "RouteNode":
        return self.method("PUT")

    def post(self) -> "RouteNode":
        return self.method("POST")

    def delete(self) -> "RouteNode":
        return self.method("DELETE")

    def options(self) -> "RouteNode":
        return self.method("OPTIONS")

    def head(self) -> "RouteNode":
        return self.method("HEAD")

    def patch(self) -> "RouteNode":
        return self.method("PATCH")

    def trace(self) -> "RouteNode":
        return self.method("TRACE")

    def authenticate(self, *names: str | None) -> "RouteNode":
        """Wrap everything below in authentication."""
        return self.child(AuthenticationSelector(tuple(names)))

    def documented(self, documentation: RouteDocumentation) -> "RouteNode":
        """Attach *documentation* to everything below."""
        return self.child(DocumentedSelector(documentation))

    def trailing_slash(self) -> "RouteNode":
        return self.child(TrailingSlashSelector())

    def __repr__(self) -> str:
        return f"RouteNode({self.selector!r})"
