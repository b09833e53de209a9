"""Tests for trill.routing.params: path string parsing."""

import pytest

from trill.errors import ConfigurationError
from trill.routing.params import parse_path, parse_segment
from trill.routing.selectors import (
    ParameterSelector,
    PathSegmentSelector,
    TailcardSelector,
    WildcardSelector,
)


class TestParseSegment:
    def test_static(self) -> None:
        assert parse_segment("users") == PathSegmentSelector("users")

    def test_param(self) -> None:
        assert parse_segment("{id}") == ParameterSelector("id")

    def test_typed_param(self) -> None:
        assert parse_segment("{id:int}") == ParameterSelector("id")

    def test_optional_param(self) -> None:
        assert parse_segment("{id?}") == ParameterSelector("id", optional=True)

    def test_tailcard(self) -> None:
        assert parse_segment("{rest...}") == TailcardSelector("rest")

    def test_path_converter_is_tailcard(self) -> None:
        assert parse_segment("{filepath:path}") == TailcardSelector("filepath")

    def test_wildcard(self) -> None:
        assert parse_segment("*") == WildcardSelector()

    def test_rejects_flask_style_param(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_segment("<slug>")
        assert "<param>" in str(exc_info.value)
        assert "{param}" in str(exc_info.value)

    def test_rejects_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError, match="uuid"):
            parse_segment("{id:uuid}")

    def test_rejects_empty_name(self) -> None:
        with pytest.raises(ConfigurationError, match="Empty parameter name"):
            parse_segment("{}")


class TestParsePath:
    def test_multi_segment(self) -> None:
        assert parse_path("/api/v2/users/{id}") == [
            PathSegmentSelector("api"),
            PathSegmentSelector("v2"),
            PathSegmentSelector("users"),
            ParameterSelector("id"),
        ]

    def test_root(self) -> None:
        assert parse_path("/") == []

    def test_skips_empty_segments(self) -> None:
        assert parse_path("//users/") == [PathSegmentSelector("users")]
