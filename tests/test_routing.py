"""Routing tests."""

import pytest
from navroute_core.routing.pattern import PathSegment, RoutePattern
from navroute_core.routing.matcher import RouteRegistry
from navroute_core.utils.helpers import split_input


class TestRoutePattern:
    """Test route pattern parsing and matching."""

    def test_parse_segments(self):
        """Test literal and param segments."""
        pattern = RoutePattern("/user/:id/comments")
        assert [s.value for s in pattern.segments] == ["user", ":id", "comments"]
        assert pattern.segments[1] == PathSegment(":id", is_param=True)
        assert pattern.param_names == ["id"]
        assert pattern.is_wildcard is False

    def test_wildcard_marker_not_a_segment(self):
        """Test wildcard parsing."""
        pattern = RoutePattern("/settings/*")
        assert [s.value for s in pattern.segments] == ["settings"]
        assert pattern.is_wildcard is True

    def test_empty_pattern(self):
        """Test that empty patterns are accepted."""
        pattern = RoutePattern("")
        assert pattern.segments == ()
        assert pattern.matches([]) is True

    def test_exact_match_requires_same_length(self):
        """Test segment count check."""
        pattern = RoutePattern("/user/settings")
        assert pattern.matches(["user", "settings"]) is True
        assert pattern.matches(["user"]) is False
        assert pattern.matches(["user", "settings", "extra"]) is False

    def test_param_matches_any_value(self):
        """Test param segments."""
        pattern = RoutePattern("/user/:id")
        assert pattern.matches(["user", "123"]) is True
        assert pattern.matches(["users", "123"]) is False

    def test_wildcard_prefix(self):
        """Test wildcard suffix matching."""
        pattern = RoutePattern("/settings/*")
        assert pattern.matches(["settings", "anything", "deep"]) is True
        assert pattern.matches(["settings"]) is True
        assert pattern.matches(["profile", "x"]) is False

    def test_wildcard_path_shorter_than_prefix(self):
        """Test wildcard against a short path."""
        pattern = RoutePattern("/a/b/*")
        assert pattern.matches(["a"]) is False

    def test_wildcard_param_segment_compares_literally(self):
        """Test a param before the wildcard only matches its own text."""
        pattern = RoutePattern("/a/:id/*")
        assert pattern.is_wildcard is True
        assert pattern.matches(["a", "7", "x"]) is False
        assert pattern.matches(["a", ":id", "x"]) is True
        assert pattern.extract_parameters(["a", ":id", "x"]) == {"id": ":id"}

    def test_wildcard_param_pattern_in_registry(self):
        """Test registry falls through a wildcard param pattern."""
        registry = RouteRegistry()
        registry.add_route("/a/:id/*")
        registry.add_route("/a/:id/:rest")
        result = registry.match_route("/a/7/x")
        assert result.pattern == "/a/:id/:rest"
        assert result.path_parameters == {"id": "7", "rest": "x"}

    def test_extract_parameters_in_order(self):
        """Test parameter extraction."""
        pattern = RoutePattern("/project/:projectId/task/:taskId/detail")
        params = pattern.extract_parameters(["project", "42", "task", "108", "detail"])
        assert params == {"projectId": "42", "taskId": "108"}
        assert list(params) == ["projectId", "taskId"]

    def test_identical_patterns_are_distinct(self):
        """Test identity semantics."""
        assert RoutePattern("/home") != RoutePattern("/home")


class TestSplitInput:
    """Test input splitting."""

    def test_query_string(self):
        """Test path and query separation."""
        path, query = split_input("/search?foo=bar&baz=qux")
        assert path == "/search"
        assert query == {"foo": "bar", "baz": "qux"}

    def test_duplicate_key_last_wins(self):
        """Test duplicate query keys."""
        _, query = split_input("/search?a=1&a=2")
        assert query == {"a": "2"}

    def test_percent_decoding(self):
        """Test decoded query values."""
        _, query = split_input("/search?q=hello%20world")
        assert query == {"q": "hello world"}


class TestRouteRegistry:
    """Test route registry."""

    def test_add_and_match(self):
        """Test basic registration."""
        registry = RouteRegistry()
        registry.add_route("user/:id")
        registry.add_route("profile/followers")
        registry.add_route("home/feed/photos")

        assert registry.match_route("user/123") is not None
        assert registry.match_route("profile/followers") is not None
        assert registry.match_route("home/feed/photos") is not None

    def test_match_extracts_parameters(self):
        """Test match result contents."""
        registry = RouteRegistry()
        registry.add_route("/user/:id")
        result = registry.match_route("/user/123?foo=bar&baz=qux")

        assert result.pattern == "/user/:id"
        assert result.clean_path == "/user/123"
        assert result.path_parameters == {"id": "123"}
        assert result.query_parameters == {"foo": "bar", "baz": "qux"}

    def test_query_without_leading_slash(self):
        """Test relative input with query."""
        registry = RouteRegistry()
        registry.add_route("/user")
        result = registry.match_route("user?foo=bar")
        assert result.pattern == "/user"
        assert result.query_parameters == {"foo": "bar"}

    def test_query_independent_of_path(self):
        """Test query parsing on a literal route."""
        registry = RouteRegistry()
        registry.add_route("/search")
        result = registry.match_route("/search?foo=bar&baz=qux")
        assert result.path_parameters == {}
        assert result.query_parameters == {"foo": "bar", "baz": "qux"}

    def test_root_route(self):
        """Test root pattern."""
        registry = RouteRegistry()
        registry.add_route("/")
        assert registry.match_route("/") is not None

    def test_first_match_wins(self):
        """Test that registration order beats specificity."""
        registry = RouteRegistry()
        first = registry.add_route("/user/:id")
        registry.add_route("/user/settings")

        result = registry.match_route("/user/settings")
        assert result.matched_pattern is first
        assert result.path_parameters == {"id": "settings"}

    def test_duplicate_patterns_kept(self):
        """Test no dedup on registration."""
        registry = RouteRegistry()
        first = registry.add_route("/home")
        registry.add_route("/home")
        assert len(registry) == 2
        assert registry.match_route("/home").matched_pattern is first

    def test_wildcard_binds_nothing(self):
        """Test wildcard match result."""
        registry = RouteRegistry()
        registry.add_route("/settings/*")
        result = registry.match_route("/settings/anything/deep")
        assert result.pattern == "/settings/*"
        assert result.path_parameters == {}

    @pytest.mark.parametrize("path", [
        "product/abc",
        "settings",
        "user",
        "user/settings/extra",
        "user/1234/feed",
    ])
    def test_no_match(self, path):
        """Test unmatched inputs."""
        registry = RouteRegistry()
        registry.add_route("user/:id/comments")
        registry.add_route("user/settings")
        registry.add_route("home")
        assert registry.match_route(path) is None
        assert registry.is_registered(path) is False

    def test_segment_order_matters(self):
        """Test incorrectly ordered segments."""
        registry = RouteRegistry()
        registry.add_route("/admin/dashboard/reports/finance/summary")
        assert registry.match_route("/admin/dashboard/finance/reports/summary") is None

    def test_match_result_is_immutable(self):
        """Test match result immutability."""
        registry = RouteRegistry()
        registry.add_route("/user/:id")
        result = registry.match_route("/user/1")
        with pytest.raises(TypeError):
            result.path_parameters["id"] = "2"

    def test_match_result_hashable(self):
        """Test equal match results hash alike."""
        registry = RouteRegistry()
        registry.add_route("/user/:id")
        first = registry.match_route("/user/1?a=1&b=2")
        second = registry.match_route("/user/1?b=2&a=1")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_match_result_str(self):
        """Test string representation."""
        registry = RouteRegistry()
        registry.add_route("/user/:id")
        result = registry.match_route("/user/123?query=value")
        assert str(result) == (
            "MatchResult(pattern: /user/:id, clean_path: /user/123, "
            "path_parameters: {'id': '123'}, query_parameters: {'query': 'value'})"
        )
