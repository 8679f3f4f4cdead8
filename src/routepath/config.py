"""Matching and injection configuration.

PathConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

ARRAY_FORMATS = frozenset({"brackets", "indices", "repeat"})


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Pattern behavior switches. Immutable after creation.

    The defaults reproduce the classic behavior. Override what you need::

        config = PathConfig(case_sensitive=True, strict_groups=True)
    """

    # Extraction
    case_sensitive: bool = False

    # Injection
    collapse_slashes: bool = True  # "/a//b" -> "/a/b" after omitted groups

    # Reject unclosed "(" and stray ")" before extracting or injecting
    strict_groups: bool = False

    # Query strings: "brackets" (a[]=1), "indices" (a[0]=1) or "repeat" (a=1)
    array_format: str = "brackets"

    def __post_init__(self) -> None:
        if self.array_format not in ARRAY_FORMATS:
            allowed = ", ".join(sorted(ARRAY_FORMATS))
            msg = f"Unknown array_format {self.array_format!r}. Expected one of: {allowed}"
            raise ValueError(msg)


DEFAULT_CONFIG = PathConfig()
