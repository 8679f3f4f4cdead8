"""routepath exception hierarchy.

Shared across the compiler, injector, and CLI so every module raises and
catches the same types.
"""

from dataclasses import dataclass


class RoutePathError(Exception):
    """Base for all routepath-specific errors."""


class PatternSyntaxError(RoutePathError):
    """Raised when a pattern has unbalanced optional groups.

    Only raised in strict mode (``PathConfig(strict_groups=True)``).
    Compilation itself accepts any string.
    """


@dataclass(frozen=True, slots=True)
class MissingRequiredValue(RoutePathError):
    """A required parameter or splat had no value during injection.

    Carried by ``InjectionResult.error`` and raised by
    ``InjectionResult.unwrap()``. ``splat_index`` is the zero-based
    position of the wildcard for splats and ``None`` for named params.
    """

    pattern: str
    name: str
    splat_index: int | None = None

    def __str__(self) -> str:
        if self.splat_index is not None:
            return f'Missing splat #{self.splat_index + 1} for path "{self.pattern}"'
        return f'Missing "{self.name}" parameter for path "{self.pattern}"'
