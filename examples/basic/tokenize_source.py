"""Define a few patterns and print the token stream."""

from regulex import PatternRegistryBuilder, tokenize

builder = PatternRegistryBuilder()
builder.define("WHITESPACE", r"\s+", skip=True)
builder.define("COMMENT", r"#[^\n]*", skip=True)
builder.define_keyword("let")
builder.define("ID", r"[a-zA-Z_][a-zA-Z0-9_]*")
builder.define("NUMBER", r"[0-9]+")
builder.define_operator("=")

for token in tokenize("let answer = 42  # the answer\nlet ? = 1", builder.build()):
    print(token, [t.kind for t in token.skipped_tokens])
