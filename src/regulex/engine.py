"""Matching engine: turns an offset in a source buffer into one token.

Matching is first-match, not longest-match. Definitions are tried in
registration order with a match anchored at the probe offset; the first one
that matches wins regardless of how much text a later definition would take.

Unrecognized input is returned as a single UNEXPECTED token covering the
whole unrecognized run, up to (not including) the next offset where some
definition matches, or the end of input.

Thread Safety:
MatchEngine holds only an immutable registry and an optional immutable
config. All methods are pure functions of (source, pos); one engine can be
shared by any number of threads and scanners.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from regulex.config import ScanConfig, get_scan_config
from regulex.errors import EmptyMatchError
from regulex.tokens import EOF, UNEXPECTED, Token
from regulex.utils.logger import get_logger

if TYPE_CHECKING:
    from regulex.registry import PatternRegistry
    from regulex.scanner import Scanner

logger = get_logger(__name__)


class MatchEngine:
    """Produces tokens from a source buffer using a PatternRegistry.

    Usage:
            >>> engine = MatchEngine(registry)
            >>> engine.match_at("foo bar", 3)
        Token(WHITESPACE, ' ', 3:4)
            >>> engine.next_significant("foo bar", 3)
        Token(ID, 'bar', 4:7)

    """

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: PatternRegistry, config: ScanConfig | None = None) -> None:
        """Initialize engine.

        Args:
            registry: Definitions to match with
            config: Fixed configuration. When None, the context config
                (get_scan_config) is read on every call.
        """
        self._registry = registry
        self._config = config

    @property
    def registry(self) -> PatternRegistry:
        return self._registry

    @property
    def config(self) -> ScanConfig:
        """Configuration in effect for calls made now."""
        if self._config is not None:
            return self._config
        return get_scan_config()

    def match_at(self, source: str, pos: int) -> Token:
        """Read exactly one token starting at pos.

        Skip tokens are returned like any other token; use next_significant()
        to fold them.

        Args:
            source: Source text
            pos: Offset to read at, 0 <= pos <= len(source)

        Returns:
            The matched token, an UNEXPECTED token, or EOF at len(source)

        Raises:
            ValueError: If pos is outside the source
            EmptyMatchError: If a definition matches the empty string (unless
                ignore_empty_matches is set)
        """
        source_len = len(source)
        if pos < 0 or pos > source_len:
            msg = f"Offset {pos} is outside source of length {source_len}"
            raise ValueError(msg)
        if pos == source_len:
            return Token(EOF, "", pos)

        ignore_empty = self.config.ignore_empty_matches
        token = self._match_definition(source, pos, ignore_empty)
        if token is not None:
            return token

        # Grow the unrecognized run one character at a time until some
        # definition matches again or input runs out.
        end = pos + 1
        while end < source_len and self._match_definition(source, end, ignore_empty) is None:
            end += 1

        logger.debug("Unrecognized input at %d:%d: %r", pos, end, source[pos:end])
        return Token(UNEXPECTED, source[pos:end], pos)

    def next_significant(self, source: str, pos: int) -> Token:
        """Read the next non-skip token starting at pos.

        Skip tokens met on the way are attached to the returned token's
        skipped_tokens, in source order. EOF and UNEXPECTED always stop the
        loop.

        Args:
            source: Source text
            pos: Offset to read at

        Returns:
            The next significant token
        """
        collect = self.config.collect_skipped
        skipped: list[Token] = []
        while True:
            token = self.match_at(source, pos)
            if not token.skip:
                if skipped:
                    return token.with_skipped(tuple(skipped))
                return token
            if collect:
                skipped.append(token)
            pos = token.end

    def tokenize(self, source: str) -> Iterator[Token]:
        """Tokenize source into a stream of significant tokens.

        Yields:
            Token objects one at a time, ending with exactly one EOF
        """
        pos = 0
        while True:
            token = self.next_significant(source, pos)
            yield token
            if token.is_eof:
                return
            pos = token.end

    def scanner(self, source: str, *, source_file: str | None = None) -> Scanner:
        """Create a Scanner over source that uses this engine."""
        from regulex.scanner import Scanner

        return Scanner(self, source, source_file=source_file)

    def _match_definition(self, source: str, pos: int, ignore_empty: bool) -> Token | None:
        """Try every definition at pos in priority order, without recovery."""
        for definition in self._registry.definitions:
            text = definition.match(source, pos)
            if text is None:
                continue
            if not text:
                if ignore_empty:
                    continue
                raise EmptyMatchError(definition.name, pos)
            return Token(definition.name, text, pos, definition.skip)
        return None
