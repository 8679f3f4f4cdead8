"""Tests for routepath.config — PathConfig frozen dataclass."""

import pytest

from routepath.config import DEFAULT_CONFIG, PathConfig


class TestPathConfig:
    def test_defaults(self) -> None:
        cfg = PathConfig()

        assert cfg.case_sensitive is False
        assert cfg.collapse_slashes is True
        assert cfg.strict_groups is False
        assert cfg.array_format == "brackets"

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == PathConfig()

    def test_override(self) -> None:
        cfg = PathConfig(case_sensitive=True, strict_groups=True, array_format="repeat")

        assert cfg.case_sensitive is True
        assert cfg.strict_groups is True
        assert cfg.array_format == "repeat"

    def test_frozen(self) -> None:
        cfg = PathConfig()

        with pytest.raises(AttributeError):
            cfg.case_sensitive = True  # type: ignore[misc]

    def test_unknown_array_format(self) -> None:
        with pytest.raises(ValueError, match="array_format"):
            PathConfig(array_format="comma")
