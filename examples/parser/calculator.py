"""Recursive-descent arithmetic evaluator driven by a Scanner.

    $ python examples/parser/calculator.py "2 * (3 + 4) - 5"
    9
"""

import sys

from regulex import MatchEngine, PatternRegistryBuilder, Scanner, UnexpectedTokenKind

builder = PatternRegistryBuilder()
builder.define("WHITESPACE", r"\s+", skip=True)
builder.define("NUMBER", r"[0-9]+(\.[0-9]+)?")
for op in ("+", "-", "*", "/", "(", ")"):
    builder.define_operator(op)

ENGINE = MatchEngine(builder.build())


def expression(scanner: Scanner) -> float:
    value = term(scanner)
    while True:
        if scanner.accept("+"):
            value += term(scanner)
        elif scanner.accept("-"):
            value -= term(scanner)
        else:
            return value


def term(scanner: Scanner) -> float:
    value = factor(scanner)
    while True:
        if scanner.accept("*"):
            value *= factor(scanner)
        elif scanner.accept("/"):
            value /= factor(scanner)
        else:
            return value


def factor(scanner: Scanner) -> float:
    if scanner.accept("-"):
        return -factor(scanner)
    return scanner.if_next(
        "(",
        lambda: _parenthesized(scanner),
        lambda: float(scanner.expect("NUMBER").text),
    )


def _parenthesized(scanner: Scanner) -> float:
    value = expression(scanner)
    scanner.expect(")")
    return value


def evaluate(source: str) -> float:
    scanner = ENGINE.scanner(source, source_file="<expr>")
    value = expression(scanner)
    scanner.expect("EOF")
    return value


if __name__ == "__main__":
    try:
        result = evaluate(" ".join(sys.argv[1:]) or "2 * (3 + 4) - 5")
    except UnexpectedTokenKind as e:
        sys.exit(str(e))
    print(f"{result:g}")
