"""Generator configuration.

DocsConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from trill.documentation import ResponseDoc
from trill.errors import ConfigurationError

# Called with the non-empty segments of a route path; returns a tag or None
type TagGenerator = Callable[[Sequence[str]], str | None]


@dataclass(frozen=True, slots=True)
class DocsConfig:
    """Paths generator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DocsConfig(
            swagger_url="docs",
            default_security_scheme_name="jwt",
            default_unauthorized_response=ResponseDoc("Missing or invalid token"),
        )
    """

    # Documentation UI, whose own endpoints are left out of the paths
    swagger_url: str = "swagger-ui"
    forward_root: bool = False  # "/" redirects to the UI and is left out too

    # Forwarded to the operation generator
    default_unauthorized_response: ResponseDoc | None = None
    default_security_scheme_name: str | None = None
    automatic_tag_generator: TagGenerator | None = None

    # Tree walking
    max_depth: int = 512

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1, got {self.max_depth}"
            raise ConfigurationError(msg)
