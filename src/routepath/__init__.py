"""routepath — compile URL patterns, extract params from paths, build paths from params.

Patterns mix literal text, named parameters, wildcards, and optional groups.

Basic usage::

    from routepath import build_path, extract_params

    extract_params("/users/:id(/*)", "/users/7/photos/1")
    # {'id': '7', 'splat': 'photos/1'}

    build_path("/users/:id(/*)", {"id": 7})
    # '/users/7'

Query strings::

    from routepath import with_query

    with_query("/search?q=owls", {"page": 2})
    # '/search?q=owls&page=2'
"""

__version__ = "0.1.0-dev"
__all__ = [
    "CompiledPattern",
    "InjectionResult",
    "MissingRequiredValue",
    "PathConfig",
    "PatternCache",
    "PatternSyntaxError",
    "RoutePathError",
    "SplatScalar",
    "SplatSequence",
    "build_path",
    "compile_pattern",
    "extract_param_names",
    "extract_params",
    "extract_query",
    "extract_values",
    "inject_params",
    "is_absolute",
    "join",
    "with_query",
    "without_query",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routepath`` fast while providing a clean top-level API.
    """
    if name in ("CompiledPattern", "PatternCache", "compile_pattern"):
        from routepath.pattern import compiler as _compiler

        return getattr(_compiler, name)

    if name in ("extract_param_names", "extract_params", "extract_values"):
        from routepath.pattern import extract as _extract

        return getattr(_extract, name)

    if name in ("InjectionResult", "SplatScalar", "SplatSequence", "build_path", "inject_params"):
        from routepath.pattern import inject as _inject

        return getattr(_inject, name)

    if name in ("MissingRequiredValue", "PatternSyntaxError", "RoutePathError"):
        from routepath import errors as _errors

        return getattr(_errors, name)

    if name == "PathConfig":
        from routepath.config import PathConfig

        return PathConfig

    if name in ("is_absolute", "join"):
        from routepath import paths as _paths

        return getattr(_paths, name)

    if name in ("extract_query", "with_query", "without_query"):
        from routepath import query as _query

        return getattr(_query, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
