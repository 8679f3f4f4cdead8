"""Plain path helpers."""

import re

_TRAILING_SLASHES_RE = re.compile(r"/*\Z")


def is_absolute(path: str) -> bool:
    """Return True if *path* starts with ``/``."""
    return path.startswith("/")


def join(a: str, b: str) -> str:
    """Join two URL paths with exactly one ``/`` after *a*.

    Examples::

        >>> join("/users", "42")
        '/users/42'
        >>> join("/users///", "42")
        '/users/42'
    """
    return _TRAILING_SLASHES_RE.sub("/", a, count=1) + b
