"""Shared fixtures for routepath tests."""

import pytest

from routepath.pattern.compiler import PatternCache


@pytest.fixture
def fresh_cache() -> PatternCache:
    """An isolated pattern cache, so tests never share compiled state."""
    return PatternCache()
