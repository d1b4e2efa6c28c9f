"""Pattern registry: the ordered set of token definitions.

Registration order is priority order. The matching engine tries definitions
first to last and the first one that matches wins, even when a later one
would match more text. Register specific patterns (keywords) before general
ones (identifiers).

Thread Safety:
PatternRegistry is immutable after creation. Safe to share.
Use PatternRegistryBuilder for mutable construction.

Example:
    >>> builder = PatternRegistryBuilder()
    >>> builder.define("WHITESPACE", r"\\s+", skip=True)
    >>> builder.define_keyword("function")
    >>> builder.define("ID", r"[a-zA-Z_][a-zA-Z0-9_]*")
    >>> registry = builder.build()
    >>> registry.kinds
    ('WHITESPACE', 'function', 'ID')
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from regulex.errors import PatternError
from regulex.tokens import RESERVED_KINDS
from regulex.utils.logger import get_logger

logger = get_logger(__name__)


def needs_remaining_input(pattern_source: str) -> bool:
    """Check whether a pattern must be matched against source[pos:].

    Pattern.match(source, pos) lets "^", "\\A", "\\b", "\\B" and lookbehind
    inspect text before pos. Patterns using them outside a character class
    are matched on the remaining input instead. A trailing "\\b" (keywords)
    only depends on text inside the match and what follows it.
    """
    src = pattern_source
    n = len(src)
    in_class = False
    i = 0
    while i < n:
        c = src[i]
        if c == "\\":
            nxt = src[i + 1 : i + 2]
            if not in_class and nxt in ("A", "b", "B") and not (nxt == "b" and i + 2 == n):
                return True
            i += 2
            continue
        if in_class:
            if c == "]":
                in_class = False
        elif c == "[":
            in_class = True
            i += 1
            # "^" negates and a "]" right after the opening is literal
            if src[i : i + 1] == "^":
                i += 1
            if src[i : i + 1] == "]":
                i += 1
            continue
        elif c == "^" or src.startswith(("(?<=", "(?<!"), i):
            return True
        i += 1
    return False


@dataclass(frozen=True, slots=True)
class PatternDefinition:
    """One named pattern.

    Attributes:
        name: Token kind reported for matches
        pattern: Compiled pattern, matched anchored at the probe offset
        skip: Matches are folded into the next significant token
        sliced: Match against source[pos:] so that "^", "\\A", "\\b" and
            lookbehind treat the probe offset as the start of input

    """

    name: str
    pattern: re.Pattern[str]
    skip: bool = False
    sliced: bool = False

    def match(self, source: str, pos: int) -> str | None:
        """Return the text matched at exactly pos, or None."""
        if self.sliced:
            m = self.pattern.match(source[pos:])
        else:
            m = self.pattern.match(source, pos)
        if m is None:
            return None
        return m.group(0)


def compile_definition(
    name: str, pattern: str | re.Pattern[str], skip: bool = False, flags: int = 0
) -> PatternDefinition:
    """Validate and compile a single definition.

    Raises:
        PatternError: If the name is empty or reserved, or the pattern is
            empty or does not compile
    """
    if not name:
        raise PatternError(name, "token kind must be a non-empty string")
    if name in RESERVED_KINDS:
        raise PatternError(name, "token kind is reserved")

    if isinstance(pattern, re.Pattern):
        if not pattern.pattern:
            raise PatternError(name, "empty pattern")
        if flags:
            raise PatternError(name, "flags cannot be combined with a compiled pattern")
        return PatternDefinition(name, pattern, skip, needs_remaining_input(pattern.pattern))

    if not pattern:
        raise PatternError(name, "empty pattern")

    # A leading "^" is implied by anchored matching.
    source = pattern[1:] if pattern.startswith("^") else pattern
    if not source:
        raise PatternError(name, "empty pattern")

    try:
        compiled = re.compile(source, flags)
    except re.error as e:
        raise PatternError(name, str(e)) from e
    return PatternDefinition(name, compiled, skip, needs_remaining_input(source))


class PatternRegistry:
    """Immutable, ordered collection of pattern definitions.

    Iteration yields definitions in priority order.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: tuple[PatternDefinition, ...]) -> None:
        """Initialize registry with pre-built definitions.

        Use PatternRegistryBuilder to create instances.
        """
        self._definitions = definitions

    @property
    def definitions(self) -> tuple[PatternDefinition, ...]:
        """Get all definitions in priority order."""
        return self._definitions

    @property
    def kinds(self) -> tuple[str, ...]:
        """Get registered kinds in first-registration order, without duplicates."""
        return tuple(dict.fromkeys(d.name for d in self._definitions))

    def __iter__(self) -> Iterator[PatternDefinition]:
        return iter(self._definitions)

    def __contains__(self, kind: str) -> bool:
        """Support 'kind in registry' syntax."""
        return any(d.name == kind for d in self._definitions)

    def __len__(self) -> int:
        """Number of definitions (a kind may be defined more than once)."""
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"PatternRegistry({list(self.kinds)!r})"


class PatternRegistryBuilder:
    """Mutable builder for PatternRegistry.

    Definitions are appended in call order, which is the priority order used
    during matching. Invalid definitions fail immediately rather than on the
    first scan.

    Example:
        >>> builder = PatternRegistryBuilder()
        >>> builder.define("NUMBER", r"[0-9]+").define_operator("+")
        >>> registry = builder.build()
    """

    __slots__ = ("_definitions",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._definitions: list[PatternDefinition] = []

    def define(
        self,
        name: str,
        pattern: str | re.Pattern[str],
        skip: bool = False,
        flags: int = 0,
    ) -> PatternRegistryBuilder:
        """Append a definition.

        Args:
            name: Token kind reported for matches
            pattern: Regular expression (string or compiled)
            skip: Fold matches into the next significant token
            flags: re flags used when compiling a string pattern

        Returns:
            Self for chaining

        Raises:
            PatternError: If the definition is invalid
        """
        definition = compile_definition(name, pattern, skip, flags)
        self._definitions.append(definition)
        logger.debug(
            "Defined %r as %r (skip=%s, priority=%d)",
            name,
            definition.pattern.pattern,
            skip,
            len(self._definitions) - 1,
        )
        return self

    def define_keyword(self, name: str) -> PatternRegistryBuilder:
        """Define a keyword matched literally and followed by a word boundary.

        The boundary keeps "function" from matching the start of "functionName".
        """
        return self.define(name, rf"{re.escape(name)}\b")

    def define_operator(self, name: str) -> PatternRegistryBuilder:
        """Define an operator or punctuation matched literally."""
        return self.define(name, re.escape(name))

    def build(self) -> PatternRegistry:
        """Build immutable registry from the definitions so far.

        Returns:
            Immutable PatternRegistry
        """
        registry = PatternRegistry(tuple(self._definitions))
        logger.debug("Built registry with %d definitions", len(registry))
        return registry

    def __len__(self) -> int:
        """Number of definitions added."""
        return len(self._definitions)
