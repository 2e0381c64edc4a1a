"""
Token kinds and spelling tables shared by the SCLANG lexer and parser.

Exports:
    - TokenKind: closed enumeration of every token the lexer can produce.
    - token_hashmap: fixed mapping from literal spellings to token kinds.
    - comparison_tokens / binary_tokens: operator kinds grouped by grammar role.
    - operand_tokens: kinds that may start an operand.
    - DIGITS, INT64_MIN, INT64_MAX: integer literal rules.
"""

from enum import Enum, auto


class TokenKind(Enum):
    LET = auto()
    IDENTIFIER = auto()
    WHILE = auto()
    INT_LITERAL = auto()
    DOUBLE_EQ = auto()
    NOT_EQ = auto()
    GREATER_EQ = auto()
    LESSER_EQ = auto()
    COLON = auto()
    IF = auto()
    ELSE = auto()
    EQ = auto()
    PLUS = auto()
    PLUS_EQ = auto()
    MINUS = auto()
    MINUS_EQ = auto()
    LBRACE = auto()
    RBRACE = auto()
    EOF = auto()


# TOKEN MAPPINGS (LEXER)
token_hashmap: dict[str, TokenKind] = {
    "let": TokenKind.LET,
    "while": TokenKind.WHILE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "=": TokenKind.EQ,
    "==": TokenKind.DOUBLE_EQ,
    "!=": TokenKind.NOT_EQ,
    ">=": TokenKind.GREATER_EQ,
    "<=": TokenKind.LESSER_EQ,
    "+": TokenKind.PLUS,
    "+=": TokenKind.PLUS_EQ,
    "-": TokenKind.MINUS,
    "-=": TokenKind.MINUS_EQ,
    ":": TokenKind.COLON,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

# TOKEN GROUPS (PARSER)
comparison_tokens: tuple[TokenKind, ...] = (
    TokenKind.DOUBLE_EQ,
    TokenKind.NOT_EQ,
    TokenKind.GREATER_EQ,
    TokenKind.LESSER_EQ,
)

binary_tokens: tuple[TokenKind, ...] = (TokenKind.PLUS, TokenKind.MINUS)

operand_tokens: tuple[TokenKind, ...] = (TokenKind.IDENTIFIER, TokenKind.INT_LITERAL)

statement_tokens: tuple[TokenKind, ...] = (TokenKind.LET, TokenKind.WHILE)

DIGITS = "0123456789"
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_MAX_DIGITS = len(str(INT64_MAX))

# `str.isspace` also accepts the ASCII information separators, which are not
# Unicode White_Space and so do not split tokens.
NON_SEPARATORS = "\x1c\x1d\x1e\x1f"

__all__ = [
    "DIGITS",
    "INT64_MAX",
    "INT64_MAX_DIGITS",
    "INT64_MIN",
    "NON_SEPARATORS",
    "TokenKind",
    "binary_tokens",
    "comparison_tokens",
    "operand_tokens",
    "statement_tokens",
    "token_hashmap",
]
