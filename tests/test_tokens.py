"""Tests for the Token value type."""

from __future__ import annotations

import dataclasses

import pytest

from regulex.tokens import EOF, RESERVED_KINDS, UNEXPECTED, Token


class TestTokenBasics:
    """Derived attributes and immutability."""

    def test_end_is_start_plus_length(self) -> None:
        token = Token("ID", "bar", 4)
        assert token.end == 7

    def test_eof_has_zero_length(self) -> None:
        token = Token(EOF, "", 12)
        assert token.end == 12
        assert token.is_eof
        assert not token.is_unexpected

    def test_unexpected_flag(self) -> None:
        token = Token(UNEXPECTED, "#@", 1)
        assert token.is_unexpected
        assert not token.is_eof

    def test_defaults(self) -> None:
        token = Token("ID", "x", 0)
        assert token.skip is False
        assert token.skipped_tokens == ()

    def test_frozen(self) -> None:
        token = Token("ID", "x", 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.start = 5  # type: ignore[misc]

    def test_reserved_kinds(self) -> None:
        assert RESERVED_KINDS == {"EOF", "UNEXPECTED"}


class TestSkippedTokens:
    """Attaching skip tokens builds a new token."""

    def test_with_skipped_returns_copy(self) -> None:
        ws = Token("WHITESPACE", " ", 3, skip=True)
        token = Token("ID", "bar", 4)
        attached = token.with_skipped((ws,))

        assert attached.skipped_tokens == (ws,)
        assert token.skipped_tokens == ()
        assert attached.kind == token.kind
        assert attached.start == token.start

    def test_full_start_and_leading_text(self) -> None:
        ws = Token("WHITESPACE", " ", 1, skip=True)
        comment = Token("COMMENT", "// hi", 2, skip=True)
        nl = Token("WHITESPACE", "\n", 7, skip=True)
        token = Token("ID", "b", 8).with_skipped((ws, comment, nl))

        assert token.full_start == 1
        assert token.leading_text == " // hi\n"

    def test_full_start_without_skipped(self) -> None:
        token = Token("ID", "b", 8)
        assert token.full_start == 8
        assert token.leading_text == ""

    def test_equality_includes_skipped(self) -> None:
        ws = Token("WHITESPACE", " ", 3, skip=True)
        plain = Token("ID", "bar", 4)
        assert plain != plain.with_skipped((ws,))
        assert plain.with_skipped((ws,)) == Token("ID", "bar", 4, skipped_tokens=(ws,))


class TestTokenRepr:
    """Compact repr for debugging."""

    def test_repr_shows_span(self) -> None:
        assert repr(Token("ID", "foo", 0)) == "Token(ID, 'foo', 0:3)"

    def test_repr_truncates_long_text(self) -> None:
        token = Token("STRING", "x" * 40, 0)
        assert "..." in repr(token)
        assert "0:40" in repr(token)
