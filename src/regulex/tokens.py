"""Token definition for the regulex matching engine.

A Token is one lexical unit: the kind of the definition that matched (or one
of the reserved kinds EOF / UNEXPECTED), the exact text matched and its start
offset in the source.

Significant tokens carry the skip tokens (whitespace, comments) consumed
immediately before them in skipped_tokens. That tuple is always flat: skip
tokens never carry skipped tokens of their own.

Thread Safety:
Token is frozen (immutable) and safe to share across threads. Skipped tokens
are attached by building a new Token (with_skipped), never by mutation.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

EOF: Final = "EOF"
UNEXPECTED: Final = "UNEXPECTED"

RESERVED_KINDS: Final = frozenset({EOF, UNEXPECTED})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the matching engine.

    Attributes:
        kind: Name of the definition that matched, or EOF / UNEXPECTED
        text: The exact source text matched
        start: Absolute start offset in source
        skip: True for skip tokens (never delivered directly to a parser)
        skipped_tokens: Skip tokens consumed immediately before this one

    """

    kind: str
    text: str
    start: int
    skip: bool = False
    skipped_tokens: tuple[Token, ...] = ()

    @property
    def end(self) -> int:
        """Offset one past the last character of this token."""
        return self.start + len(self.text)

    @property
    def is_eof(self) -> bool:
        return self.kind == EOF

    @property
    def is_unexpected(self) -> bool:
        return self.kind == UNEXPECTED

    @property
    def full_start(self) -> int:
        """Start offset including the skipped tokens before this token."""
        if self.skipped_tokens:
            return self.skipped_tokens[0].start
        return self.start

    @property
    def leading_text(self) -> str:
        """Concatenated text of the skipped tokens (whitespace, comments)."""
        return "".join(t.text for t in self.skipped_tokens)

    def with_skipped(self, skipped: tuple[Token, ...]) -> Token:
        """Return a copy of this token carrying the given skip tokens."""
        return replace(self, skipped_tokens=skipped)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind}, {text!r}, {self.start}:{self.end})"
