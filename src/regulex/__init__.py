"""
regulex: ordered-pattern tokenizer for language front-ends.

Define named regular expressions in priority order, then scan source text
into tokens. The first definition that matches wins; skip tokens such as
whitespace and comments are folded into the next significant token; input
nothing matches comes back as a single UNEXPECTED token instead of an error.

Quick Start:
    >>> from regulex import PatternRegistryBuilder, MatchEngine
    >>> builder = PatternRegistryBuilder()
    >>> builder.define("WHITESPACE", r"\\s+", skip=True)
    >>> builder.define("ID", r"[a-zA-Z_][a-zA-Z0-9_]*")
    >>> engine = MatchEngine(builder.build())
    >>> scanner = engine.scanner("foo bar")
    >>> scanner.expect("ID").text
    'foo'
    >>> scanner.advance().skipped_tokens
    (Token(WHITESPACE, ' ', 3:4),)
"""

from regulex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from regulex.engine import MatchEngine
from regulex.errors import (
    EmptyMatchError,
    PatternError,
    RegulexError,
    ScanError,
    UnexpectedTokenKind,
)
from regulex.location import SourceLocation
from regulex.registry import PatternDefinition, PatternRegistry, PatternRegistryBuilder
from regulex.scanner import Scanner
from regulex.tokens import EOF, UNEXPECTED, Token

__version__ = "0.1.0"


def tokenize(source: str, registry: PatternRegistry) -> list[Token]:
    """Tokenize source into a list of significant tokens ending with EOF.

    Args:
        source: Source text
        registry: Definitions to match with

    Returns:
        List of tokens; skip tokens are attached to the token after them

    Example:
        >>> [t.kind for t in tokenize("a b", registry)]
        ['ID', 'ID', 'EOF']
    """
    return list(MatchEngine(registry).tokenize(source))


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    # Tokens
    "Token",
    "EOF",
    "UNEXPECTED",
    # Registry
    "PatternDefinition",
    "PatternRegistry",
    "PatternRegistryBuilder",
    # Matching
    "MatchEngine",
    "Scanner",
    # Errors
    "RegulexError",
    "PatternError",
    "EmptyMatchError",
    "ScanError",
    "UnexpectedTokenKind",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Location
    "SourceLocation",
]
