"""Trill exception hierarchy.

Shared across the route tree, the paths generator, and the CLI so every
module raises and catches the same types.
"""


class TrillError(Exception):
    """Base for all trill-specific errors."""


class ConfigurationError(TrillError):
    """Raised when generator configuration or the route tree is invalid.

    Typically surfaces from ``PathsGenerator.generate()`` when a method
    terminator carries no usable HTTP method.
    """


class TreeDepthError(ConfigurationError):
    """Route tree deeper than ``DocsConfig.max_depth``.

    Either the tree really is that deep or a parent link loops back on
    itself. Raise ``max_depth`` for the former.
    """

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Route tree exceeds max_depth={max_depth} (too deep or possibly cyclic)")


class TreeImportError(TrillError):
    """An import string did not lead to a route tree."""
