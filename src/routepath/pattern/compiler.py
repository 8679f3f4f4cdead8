"""Pattern compiler with a memoizing, thread-safe cache.

A pattern is scanned once, left to right. Special tokens are ``:name``,
``*``, ``(`` and ``)``; everything between them is literal text::

    "/users/:id(/*)" -> "/users/" ":id" "(" "/" "*" ")"

Each distinct pattern string is compiled on first use and the result is
kept for the life of its ``PatternCache``.
"""

import logging
import re
import threading
from dataclasses import dataclass

from routepath.errors import PatternSyntaxError
from routepath.pattern.tokens import SPLAT_NAME, Token

logger = logging.getLogger("routepath.compiler")

TOKEN_RE = re.compile(r":([a-zA-Z_$][a-zA-Z0-9_$]*)|\*|\(|\)")

# Regex source emitted for each special token kind
PARAM_SOURCE = r"([^/?#]+)"
SPLAT_SOURCE = r"([\s\S]*?)"
OPEN_SOURCE = "(?:"
CLOSE_SOURCE = ")?"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """The cached result of compiling one pattern string.

    ``source`` is the token-by-token regex translation of the pattern.
    ``matcher_source`` is the same translation with unclosed groups
    closed at the end and stray ``)`` dropped, so that it always
    compiles. For balanced patterns the two are identical.
    """

    pattern: str
    source: str
    param_names: tuple[str, ...]
    tokens: tuple[Token, ...]
    matcher_source: str
    unclosed_groups: int = 0
    stray_closes: int = 0

    @property
    def is_balanced(self) -> bool:
        """True when every ``(`` has a matching ``)``."""
        return not self.unclosed_groups and not self.stray_closes

    def regex(self, case_sensitive: bool = False) -> re.Pattern[str]:
        """Return the full-string anchored matcher."""
        flags = 0 if case_sensitive else re.IGNORECASE
        return re.compile(f"^{self.matcher_source}\\Z", flags)


def tokenize(pattern: str) -> list[Token]:
    """Split *pattern* into raw tokens.

    Examples::

        ":id"        -> [Token(":id", "param", "id")]
        "/files/*"   -> [Token("/files/"), Token("*", "splat", "splat")]
        "/a(/:id)"   -> [Token("/a"), Token("(", "open"), Token("/"),
                         Token(":id", "param", "id"), Token(")", "close")]
    """
    tokens: list[Token] = []
    last_index = 0

    for match in TOKEN_RE.finditer(pattern):
        if match.start() != last_index:
            tokens.append(Token(pattern[last_index : match.start()]))

        text = match.group(0)
        if match.group(1):
            tokens.append(Token(text, "param", match.group(1)))
        elif text == "*":
            tokens.append(Token(text, "splat", SPLAT_NAME))
        elif text == "(":
            tokens.append(Token(text, "open"))
        else:
            tokens.append(Token(text, "close"))

        last_index = match.end()

    if last_index != len(pattern):
        tokens.append(Token(pattern[last_index:]))

    return tokens


def _compile(pattern: str) -> CompiledPattern:
    tokens = tokenize(pattern)
    source: list[str] = []
    matcher: list[str] = []
    param_names: list[str] = []
    depth = 0
    stray_closes = 0

    for token in tokens:
        if token.kind == "param":
            part = PARAM_SOURCE
        elif token.kind == "splat":
            part = SPLAT_SOURCE
        elif token.kind == "open":
            part = OPEN_SOURCE
            depth += 1
        elif token.kind == "close":
            source.append(CLOSE_SOURCE)
            if depth == 0:
                stray_closes += 1
            else:
                depth -= 1
                matcher.append(CLOSE_SOURCE)
            continue
        else:
            part = re.escape(token.text)

        if token.name is not None:
            param_names.append(token.name)
        source.append(part)
        matcher.append(part)

    matcher.append(CLOSE_SOURCE * depth)

    return CompiledPattern(
        pattern=pattern,
        source="".join(source),
        param_names=tuple(param_names),
        tokens=tuple(tokens),
        matcher_source="".join(matcher),
        unclosed_groups=depth,
        stray_closes=stray_closes,
    )


class PatternCache:
    """Insert-once store of compiled patterns, keyed by exact pattern string.

    Entries are never evicted. Create a fresh instance to get an
    isolated cache (tests do this); everything else shares the module
    default via ``compile_pattern(pattern)``.

    Free-threading safety:
        - CompiledPattern is a frozen dataclass (immutable, safe to share)
        - The dict is only written under ``_lock``
        - Compilation runs outside the lock; the first stored result wins
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._entries: dict[str, CompiledPattern] = {}
        self._lock = threading.Lock()

    def get(self, pattern: str) -> CompiledPattern:
        """Return the compiled form of *pattern*, compiling on first use."""
        compiled = self._entries.get(pattern)
        if compiled is not None:
            return compiled

        compiled = _compile(pattern)
        with self._lock:
            existing = self._entries.setdefault(pattern, compiled)
        if existing is compiled:
            logger.debug(
                "Compiled pattern %r (params: %s)",
                pattern,
                ", ".join(compiled.param_names) or "-",
            )
        return existing

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PatternCache({len(self)} patterns)"


_default_cache = PatternCache()


def default_cache() -> PatternCache:
    """Return the process-wide cache used when no cache is passed."""
    return _default_cache


def compile_pattern(pattern: str, *, cache: PatternCache | None = None) -> CompiledPattern:
    """Compile *pattern* through *cache* (the process-wide one by default).

    Never raises: any string compiles. Use ``check_groups`` to reject
    unbalanced optional groups.
    """
    if cache is None:
        cache = _default_cache
    return cache.get(pattern)


def check_groups(compiled: CompiledPattern) -> None:
    """Raise ``PatternSyntaxError`` if *compiled* has unbalanced groups."""
    if compiled.unclosed_groups:
        msg = (
            f"Pattern {compiled.pattern!r} has {compiled.unclosed_groups} "
            "unclosed optional group(s)."
        )
        raise PatternSyntaxError(msg)
    if compiled.stray_closes:
        msg = f"Pattern {compiled.pattern!r} has {compiled.stray_closes} unmatched ')'."
        raise PatternSyntaxError(msg)
