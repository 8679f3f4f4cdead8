"""Query string extraction, parsing, and merging.

Keys may use bracket notation for lists and nested mappings::

    "tag[]=a&tag[]=b"    -> {"tag": ["a", "b"]}
    "tag=a&tag=b"        -> {"tag": ["a", "b"]}
    "user[name]=ann"     -> {"user": {"name": "ann"}}
    "ids[0]=7&ids[1]=9"  -> {"ids": ["7", "9"]}

``stringify_query`` is the inverse and defaults to the ``brackets``
array format.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, quote

from routepath.config import DEFAULT_CONFIG, PathConfig

_QUERY_RE = re.compile(r"\?(.*)\Z", re.DOTALL)
_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)\Z")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


def _split_key(key: str) -> list[str]:
    """``"a[b][]"`` -> ``["a", "b", ""]``. Malformed keys stay whole."""
    match = _KEY_RE.match(key)
    if match is None:
        return [key]
    return [match.group(1), *_SEGMENT_RE.findall(match.group(2))]


def _assign(container: dict[str, Any], segments: list[str], value: str) -> None:
    key, rest = segments[0], segments[1:]

    if not rest:
        if key not in container:
            container[key] = value
        elif isinstance(container[key], list):
            container[key].append(value)
        else:
            container[key] = [container[key], value]
        return

    if rest[0] == "":
        items = container.get(key)
        if not isinstance(items, list):
            items = [] if items is None else [items]
            container[key] = items
        if len(rest) == 1:
            items.append(value)
        else:
            child: dict[str, Any] = {}
            items.append(child)
            _assign(child, rest[1:], value)
        return

    existing = container.get(key)
    if isinstance(existing, dict):
        child = existing
    elif isinstance(existing, list):
        child = {str(i): item for i, item in enumerate(existing)}
    else:
        # A later structured key replaces a plain value of the same name
        child = {}
    container[key] = child
    _assign(child, rest, value)


def _compact(value: Any) -> Any:
    """Turn dicts keyed only by integers into lists, recursively."""
    if isinstance(value, list):
        return [_compact(item) for item in value]
    if not isinstance(value, dict):
        return value
    compacted = {key: _compact(item) for key, item in value.items()}
    if compacted and all(key.isdigit() for key in compacted):
        return [compacted[key] for key in sorted(compacted, key=int)]
    return compacted


def parse_query(query_string: str) -> dict[str, Any]:
    """Parse *query_string* (without the leading ``?``) into a dict.

    Values are strings, lists, or nested dicts. Blank values are kept.
    """
    result: dict[str, Any] = {}
    for key, value in parse_qsl(query_string, keep_blank_values=True):
        _assign(result, _split_key(key), value)
    return {key: _compact(value) for key, value in result.items()}


def _flatten(key: str, value: Any, pairs: list[tuple[str, str]], array_format: str) -> None:
    if value is None:
        pairs.append((key, ""))
    elif isinstance(value, bool):
        pairs.append((key, "true" if value else "false"))
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs, array_format)
    elif isinstance(value, list | tuple):
        for index, item in enumerate(value):
            if array_format == "brackets":
                item_key = f"{key}[]"
            elif array_format == "indices":
                item_key = f"{key}[{index}]"
            else:
                item_key = key
            _flatten(item_key, item, pairs, array_format)
    else:
        pairs.append((key, str(value)))


def stringify_query(query: Mapping[str, Any], array_format: str = "brackets") -> str:
    """Serialize *query* to a percent-encoded query string (no ``?``).

    ``None`` values serialize as ``key=``; booleans become ``true``/``false``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        _flatten(str(key), value, pairs, array_format)
    return "&".join(f"{quote(k, safe='')}={quote(v, safe='')}" for k, v in pairs)


def extract_query(path: str) -> dict[str, Any] | None:
    """Return the parsed query string of *path*, or ``None`` if it has no ``?``."""
    match = _QUERY_RE.search(path)
    if match is None:
        return None
    return parse_query(match.group(1))


def without_query(path: str) -> str:
    """Return *path* with any ``?...`` suffix removed."""
    return _QUERY_RE.sub("", path, count=1)


def with_query(
    path: str,
    query: Mapping[str, Any] | None = None,
    *,
    config: PathConfig | None = None,
) -> str:
    """Return *path* with *query* merged over its existing query string.

    Keys in *query* win over keys already in *path*. The ``?`` is dropped
    when the merged query is empty::

        >>> with_query("/a?x=1", {"y": 2})
        '/a?x=1&y=2'
    """
    config = config or DEFAULT_CONFIG
    existing = extract_query(path)
    if existing is not None:
        query = {**existing, **query} if query else existing

    query_string = stringify_query(query or {}, config.array_format)
    if query_string:
        return f"{without_query(path)}?{query_string}"
    return without_query(path)
