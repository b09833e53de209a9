"""Tests for trill.config: DocsConfig frozen dataclass."""

import pytest

from trill.config import DocsConfig
from trill.documentation import ResponseDoc
from trill.errors import ConfigurationError


class TestDocsConfig:
    def test_defaults(self) -> None:
        cfg = DocsConfig()

        assert cfg.swagger_url == "swagger-ui"
        assert cfg.forward_root is False
        assert cfg.default_unauthorized_response is None
        assert cfg.default_security_scheme_name is None
        assert cfg.automatic_tag_generator is None
        assert cfg.max_depth == 512

    def test_override(self) -> None:
        unauthorized = ResponseDoc("Missing token")
        cfg = DocsConfig(
            swagger_url="docs",
            forward_root=True,
            default_unauthorized_response=unauthorized,
            default_security_scheme_name="jwt",
        )

        assert cfg.swagger_url == "docs"
        assert cfg.forward_root is True
        assert cfg.default_unauthorized_response is unauthorized
        assert cfg.default_security_scheme_name == "jwt"

    def test_frozen(self) -> None:
        cfg = DocsConfig()

        with pytest.raises(AttributeError):
            cfg.forward_root = True  # type: ignore[misc]

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ConfigurationError, match="max_depth"):
            DocsConfig(max_depth=0)
