"""Token value type for compiled patterns."""

from dataclasses import dataclass
from typing import Literal

TokenKind = Literal["literal", "param", "splat", "open", "close"]

SPLAT_NAME = "splat"


@dataclass(frozen=True, slots=True)
class Token:
    """One raw unit of a pattern, in document order.

    Literal:  ``/users/``  (kind="literal")
    Param:    ``:id``      (kind="param", name="id")
    Splat:    ``*``        (kind="splat", name="splat")
    Group:    ``(`` / ``)`` (kind="open" / "close")
    """

    text: str
    kind: TokenKind = "literal"
    name: str | None = None

    @property
    def is_value(self) -> bool:
        """True for tokens that are filled from the parameter mapping."""
        return self.kind in ("param", "splat")
