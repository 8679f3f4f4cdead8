"""Tests for routepath.paths — absolute check and joining."""

from routepath.paths import is_absolute, join


class TestIsAbsolute:
    def test_absolute(self) -> None:
        assert is_absolute("/users") is True

    def test_relative(self) -> None:
        assert is_absolute("users") is False

    def test_empty(self) -> None:
        assert is_absolute("") is False


class TestJoin:
    def test_adds_slash(self) -> None:
        assert join("/users", "42") == "/users/42"

    def test_keeps_single_slash(self) -> None:
        assert join("/users/", "42") == "/users/42"

    def test_collapses_trailing_slashes(self) -> None:
        assert join("/users///", "42") == "/users/42"

    def test_empty_left(self) -> None:
        assert join("", "a") == "/a"

    def test_right_side_untouched(self) -> None:
        assert join("/a", "/b") == "/a//b"
