"""Parameter injection — build a concrete path from a pattern.

Injection walks the raw tokens of a compiled pattern, not its regex.
Parameters and splats inside an optional group may be omitted; outside
any group they are required. Literal text is always emitted, even when
the parameter next to it inside a group was omitted::

    inject_params("/a(/:id)/b", {})          -> "/a/b"   ("/a//b" collapsed)
    inject_params("/a(/:id)/b", {"id": "5"}) -> "/a/5/b"
    inject_params("/a/:id", {})              -> MissingRequiredValue
"""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from routepath.config import DEFAULT_CONFIG, PathConfig
from routepath.errors import MissingRequiredValue
from routepath.pattern.compiler import PatternCache, check_groups, compile_pattern
from routepath.pattern.tokens import SPLAT_NAME

logger = logging.getLogger("routepath.inject")

_SLASHES_RE = re.compile(r"/+")


@dataclass(frozen=True, slots=True)
class SplatScalar:
    """One splat value shared by every ``*`` in the pattern."""

    value: Any

    def resolve(self, index: int) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class SplatSequence:
    """Positional splat values: the n-th ``*`` takes ``values[n]``."""

    values: tuple[Any, ...]

    def resolve(self, index: int) -> Any:
        if index < len(self.values):
            return self.values[index]
        return None


Splat = SplatScalar | SplatSequence


def as_splat(value: Any) -> Splat:
    """Coerce a raw ``"splat"`` parameter into a splat variant.

    Lists and tuples become ``SplatSequence``; anything else (strings
    included) becomes ``SplatScalar``. Variants pass through unchanged.
    """
    if isinstance(value, SplatScalar | SplatSequence):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return SplatSequence(tuple(value))
    return SplatScalar(value)


@dataclass(frozen=True, slots=True)
class InjectionResult:
    """The outcome of injecting parameters into a pattern.

    Truthy on success, so you can write::

        result = inject_params("/users/:id", params)
        if not result:
            log.warning("cannot link: %s", result.error)
    """

    path: str | None = None
    error: MissingRequiredValue | None = None

    @property
    def ok(self) -> bool:
        """True if every required value was present."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> str:
        """Return the path, or raise the ``MissingRequiredValue``."""
        if self.error is not None:
            raise self.error
        assert self.path is not None
        return self.path


def inject_params(
    pattern: str,
    params: Mapping[str, Any] | None = None,
    *,
    config: PathConfig | None = None,
    cache: PatternCache | None = None,
) -> InjectionResult:
    """Return *pattern* with *params* interpolated.

    ``params["splat"]`` may be a single value (reused for every ``*``), a
    list/tuple (consumed positionally), or an explicit ``SplatScalar`` /
    ``SplatSequence``. ``None`` counts as missing.

    Raises ``PatternSyntaxError`` only when ``config.strict_groups`` is
    set and the pattern is unbalanced. A missing required value is
    reported through the result, not raised.
    """
    config = config or DEFAULT_CONFIG
    params = params or {}
    compiled = compile_pattern(pattern, cache=cache)
    if config.strict_groups:
        check_groups(compiled)

    splat = as_splat(params.get(SPLAT_NAME))
    paren_count = 0
    splat_index = 0
    parts: list[str] = []

    for token in compiled.tokens:
        if token.kind == "open":
            paren_count += 1
            continue
        if token.kind == "close":
            paren_count -= 1
            continue
        if not token.is_value:
            parts.append(token.text)
            continue

        assert token.name is not None
        if token.kind == "splat":
            position: int | None = splat_index
            value = splat.resolve(splat_index)
            splat_index += 1
        else:
            position = None
            value = params.get(token.name)

        if value is None:
            if paren_count <= 0:
                return InjectionResult(error=MissingRequiredValue(pattern, token.name, position))
            logger.debug("Omitting optional %s in %r", token.text, pattern)
            continue

        parts.append(str(value))

    path = "".join(parts)
    if config.collapse_slashes:
        path = _SLASHES_RE.sub("/", path)
    return InjectionResult(path=path)


def build_path(
    pattern: str,
    params: Mapping[str, Any] | None = None,
    *,
    config: PathConfig | None = None,
    cache: PatternCache | None = None,
) -> str:
    """Like ``inject_params`` but raises ``MissingRequiredValue`` on failure."""
    return inject_params(pattern, params, config=config, cache=cache).unwrap()
