"""Parameter extraction — match a concrete path against a pattern."""

from routepath.config import DEFAULT_CONFIG, PathConfig
from routepath.pattern.compiler import PatternCache, check_groups, compile_pattern


def extract_param_names(pattern: str, *, cache: PatternCache | None = None) -> tuple[str, ...]:
    """Return the parameter names of *pattern*, left to right.

    Every ``*`` contributes ``"splat"``::

        >>> extract_param_names("/:user/files/*.*")
        ('user', 'splat', 'splat')
    """
    return compile_pattern(pattern, cache=cache).param_names


def extract_values(
    pattern: str,
    path: str,
    *,
    config: PathConfig | None = None,
    cache: PatternCache | None = None,
) -> tuple[str | None, ...] | None:
    """Return the captures for *path* in pattern order, or ``None`` on no match.

    Unlike ``extract_params`` this keeps every splat capture. Groups
    inside an optional section that did not match are ``None``.
    """
    config = config or DEFAULT_CONFIG
    compiled = compile_pattern(pattern, cache=cache)
    if config.strict_groups:
        check_groups(compiled)

    match = compiled.regex(config.case_sensitive).match(path)
    if match is None:
        return None
    return match.groups()


def extract_params(
    pattern: str,
    path: str,
    *,
    config: PathConfig | None = None,
    cache: PatternCache | None = None,
) -> dict[str, str | None] | None:
    """Extract the portions of *path* that match *pattern*.

    Returns a ``{name: value}`` dict, or ``None`` if the pattern does not
    match. Matching is anchored at both ends and case-insensitive unless
    ``config.case_sensitive`` is set. When several wildcards share the
    name ``splat`` the last capture wins; use ``extract_values`` to get
    them all.
    """
    values = extract_values(pattern, path, config=config, cache=cache)
    if values is None:
        return None

    names = compile_pattern(pattern, cache=cache).param_names
    params: dict[str, str | None] = {}
    for name, value in zip(names, values, strict=True):
        params[name] = value
    return params
