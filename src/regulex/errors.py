"""Exception classes for regulex.

Two families of errors exist:

- Registration errors (PatternError) are programmer errors raised while a
  registry is being built. They are fatal and never deferred to scan time.
- Scan errors (ScanError and subclasses) are raised while a Scanner is
  driven by a parser. The Scanner never recovers from them itself.

Unrecognized input is not an error: it flows through the token stream as an
UNEXPECTED token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regulex.tokens import Token


class RegulexError(Exception):
    """Base exception for all regulex errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(RegulexError, ValueError):
    """Invalid pattern definition.

    Raised by PatternRegistryBuilder.define() when the name is empty or the
    pattern is empty or fails to compile.
    """

    def __init__(self, name: str, message: str) -> None:
        """Initialize pattern error.

        Args:
            name: Token kind the pattern was being registered for
            message: Description of the problem
        """
        self.name = name
        super().__init__(f"Invalid pattern for token '{name}': {message}")


class EmptyMatchError(RegulexError):
    """A pattern matched the empty string.

    Zero-width matches make no forward progress, so skip folding would loop
    forever. Raised as soon as such a match is observed.
    """

    def __init__(self, kind: str, offset: int) -> None:
        self.kind = kind
        self.offset = offset
        super().__init__(f"Pattern for token '{kind}' matched the empty string at offset {offset}")


class ScanError(RegulexError):
    """Error raised while scanning a source buffer.

    Carries an optional line/column location, formatted the same way
    diagnostics from a parser would be.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnexpectedTokenKind(ScanError):
    """Scanner.expect() read a token of the wrong kind.

    The scanner position has already moved past the offending token when
    this is raised.

    Attributes:
        expected: Kind the caller asked for
        actual: Kind that was actually read
        token: The token that was read
        position: Start offset of the token that was read
    """

    def __init__(
        self,
        expected: str,
        token: Token,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual = token.kind
        self.token = token
        self.position = token.start
        super().__init__(
            f"Expected token of kind {expected}, got {token.kind} ({token.text!r})",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )
