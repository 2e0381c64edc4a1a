"""
Error types raised by the SCLANG front end.

Both stages fail fast: the first problem aborts the whole lex or parse and
propagates to the caller unchanged. All errors derive from the builtin
`SyntaxError`, so callers that only care about "bad source" can catch that,
while callers that need to tell the stages apart can catch `LexError` or
`ParseError` directly.

Classes:
    SclangError: Base class carrying the source position.
    LexError: A character run could not be classified as a valid token.
    ParseError: The token stream does not match the grammar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sclang.sclang_constants import TokenKind


def _kind_name(kind: TokenKind | None) -> str:
    return "None" if kind is None else kind.name


class SclangError(SyntaxError):
    """Base class for every SCLANG front-end error.

    Attributes:
        line (int): 1-based line of the offending input, 0 when unknown.
        col (int): 1-based column of the offending input, 0 when unknown.
    """

    def __init__(self, message: str, line: int = 0, col: int = 0):
        self.line = line
        self.col = col
        if line:
            message = f"{message} at line {line}, col {col}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.msg)


class LexError(SclangError):
    """Raised when the lexer meets text it cannot turn into a token.

    Attributes:
        text (str): The offending character run.
    """

    def __init__(self, message: str, text: str, line: int = 0, col: int = 0):
        self.text = text
        super().__init__(message, line, col)


class ParseError(SclangError):
    """Raised when the parser meets a token the grammar does not allow.

    Attributes:
        expected (tuple[TokenKind, ...]): The kinds that would have been accepted.
        found (TokenKind | None): The kind actually under the cursor.

    Example:
        raise ParseError((TokenKind.IDENTIFIER,), TokenKind.EQ)
    """

    def __init__(
        self,
        expected: tuple[TokenKind, ...],
        found: TokenKind | None,
        line: int = 0,
        col: int = 0,
        message: str | None = None,
    ):
        self.expected = expected
        self.found = found
        if message is None:
            if len(expected) == 1:
                message = f"Expected {_kind_name(expected[0])}, but found {_kind_name(found)}"
            else:
                names = ", ".join(_kind_name(k) for k in expected)
                message = f"Expected one of: {names} but found {_kind_name(found)}"
        super().__init__(message, line, col)


__all__ = ["LexError", "ParseError", "SclangError"]
