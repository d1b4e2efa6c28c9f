"""Scanner: a position cursor over one source buffer.

A recursive-descent parser drives the Scanner with peek/advance/expect. Skip
tokens never reach the parser directly; they ride along on the next
significant token, and advancing past that token also moves past them.

Thread Safety:
A Scanner owns a mutable position and is not safe for concurrent use.
Create one per source buffer; the MatchEngine behind it can be shared.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, TypeVar

from regulex.errors import UnexpectedTokenKind
from regulex.location import SourceLocation
from regulex.utils.logger import get_logger

if TYPE_CHECKING:
    from regulex.engine import MatchEngine
    from regulex.tokens import Token

logger = get_logger(__name__)

T = TypeVar("T")


class Scanner:
    """Cursor over a source buffer.

    Usage:
            >>> scanner = engine.scanner("foo bar")
            >>> scanner.advance()
        Token(ID, 'foo', 0:3)
            >>> scanner.expect("ID")
        Token(ID, 'bar', 4:7)
            >>> scanner.at_end()
        True

    """

    __slots__ = ("_engine", "_source", "_source_len", "_pos", "_source_file")

    def __init__(
        self,
        engine: MatchEngine,
        source: str,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner at offset 0.

        Args:
            engine: Engine used to read tokens
            source: Source text
            source_file: Optional source file path for error messages
        """
        self._engine = engine
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._pos

    def at_end(self) -> bool:
        """Check if the cursor has reached the end of source.

        Trailing skip tokens are not consumed by this check; use
        peek().is_eof to ask whether only skippable input remains.
        """
        return self._pos >= self._source_len

    def peek(self) -> Token:
        """Return the next significant token without moving the cursor."""
        return self._engine.next_significant(self._source, self._pos)

    def advance(self) -> Token:
        """Return the next significant token and move past it."""
        token = self.peek()
        self._pos = token.end
        return token

    def expect(self, kind: str) -> Token:
        """Advance and check the token kind.

        The cursor stays past the token that was read even when it has the
        wrong kind.

        Raises:
            UnexpectedTokenKind: If the token read is not of kind
        """
        token = self.advance()
        if token.kind != kind:
            loc = self.location(token.start)
            logger.debug("Expected %s at %s, got %r", kind, loc, token)
            raise UnexpectedTokenKind(
                kind,
                token,
                lineno=loc.lineno,
                col_offset=loc.col_offset,
                source_file=self._source_file,
            )
        return token

    def accept(self, kind: str) -> Token | None:
        """Consume the next token if it is of kind, otherwise leave the cursor."""
        token = self.peek()
        if token.kind != kind:
            return None
        self._pos = token.end
        return token

    def if_next(
        self,
        kind: str,
        consequent: Callable[[], T],
        alternate: Callable[[], T],
    ) -> T:
        """Branch on the kind of the next token.

        When the next token is of kind it is consumed and consequent() is
        returned; otherwise the cursor is left alone and alternate() is
        returned.
        """
        token = self.peek()
        if token.kind == kind:
            self.mark_read(token)
            return consequent()
        return alternate()

    def mark_read(self, token: Token) -> None:
        """Move the cursor to the end of token."""
        self._pos = token.end

    def mark_unread(self, token: Token) -> None:
        """Move the cursor back to the start of token."""
        self._pos = token.start

    def location(self, offset: int | None = None) -> SourceLocation:
        """Line and column of offset (default: the cursor)."""
        if offset is None:
            offset = self._pos
        return SourceLocation.from_offset(self._source, offset, self._source_file)

    def __iter__(self) -> Iterator[Token]:
        """Advance through the remaining tokens, ending with EOF."""
        while True:
            token = self.advance()
            yield token
            if token.is_eof:
                return

    def __repr__(self) -> str:
        return f"Scanner(position={self._pos}, length={self._source_len})"
