"""
Lexical analyzer for the SCLANG scripting language.

This module converts raw source text into a flat token sequence:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: An immutable classified lexical unit with kind, optional value and location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Functions:
    tokenise(source): Lex a whole source string, EOF token included.
    detokenise(tokens): Rebuild source text from a token sequence.

Features:
    - Whitespace is the only token separator. A run such as `x=1` is a single
      identifier-like token, never three tokens. Whitespace means Unicode
      White_Space; the ASCII information separators (U+001C to U+001F) are
      ordinary characters even though `str.isspace` accepts them.
    - A run starting with a decimal digit must be an all-digit signed 64-bit
      integer, otherwise `LexError` is raised.
    - Any other run is looked up in `token_hashmap` (keywords and operators)
      and falls back to an identifier.

Raises:
    LexError: If a malformed numeral is encountered or the stream is read past its end.

Example:
    >>> tokenise("let x = 5")
    [Token(LET, let), Token(IDENTIFIER, x), Token(EQ, =), Token(INT_LITERAL, 5), Token(EOF, None)]

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenise
    - detokenise
    - token_hashmap
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from sclang.sclang_constants import (
    DIGITS,
    INT64_MAX,
    INT64_MAX_DIGITS,
    NON_SEPARATORS,
    TokenKind,
    token_hashmap,
)
from sclang.sclang_errors import LexError

logger = logging.getLogger(__name__)


def is_separator(ch: str) -> bool:
    """True for Unicode White_Space characters, the only token separators."""
    return ch.isspace() and ch not in NON_SEPARATORS


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Python strings index by code point, so multi-byte input is consumed one
    character at a time regardless of its encoded width.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Returns:
            str: The next character.

        Raises:
            LexError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise LexError(
                f"Attempted to read past end of source at position={self.position}",
                "",
                self.line,
                self.column,
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self) -> str:
        """
        Returns the character at the current position without advancing.

        Returns:
            str: The current character, or an empty string at end of input.
        """
        if self.position >= len(self.source):
            return ""
        return self.source[self.position]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """Represents a single lexical token in the SCLANG language.

    Location is diagnostic only and takes no part in equality or hashing, so
    `Token(TokenKind.LET, "let")` equals the token lexed from any position.

    Attributes:
        kind (TokenKind): The token kind.
        value (str | None): The source text of the token, None for EOF.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    kind: TokenKind
    value: str | None = None
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value})"


class Lexer:
    """Lexical analyzer for the SCLANG language.

    Attributes:
        stream (CharacterStream): The source stream to tokenise.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips every whitespace character under the cursor."""
        while not self.stream.end_of_file() and is_separator(self.peek()):
            self.advance()

    def read_run(self) -> str:
        """Consumes the maximal run of non-whitespace characters."""
        run = ""
        while not self.stream.end_of_file() and not is_separator(self.peek()):
            run += self.advance()
        return run

    def read_number(self, line: int, col: int) -> Token:
        """Consumes a numeral and validates it as a signed 64-bit integer.

        Raises:
            LexError: If the run contains a non-digit or does not fit 64 bits.
        """
        run = self.read_run()
        if not all(ch in DIGITS for ch in run):
            raise LexError(f"Invalid integer literal {run!r}", run, line, col)
        if len(run.lstrip("0")) > INT64_MAX_DIGITS or int(run) > INT64_MAX:
            raise LexError(
                f"Integer literal {run} does not fit in 64 bits", run, line, col
            )
        return Token(TokenKind.INT_LITERAL, run, line, col)

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, or an EOF token once the input is exhausted.

        Raises:
            LexError: If a malformed numeral is encountered.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenKind.EOF, None, line, col)

        # 1. Integer literal
        if self.peek() in DIGITS:
            return self.read_number(line, col)

        # 2. Keyword, operator or identifier
        text = self.read_run()
        kind = token_hashmap.get(text, TokenKind.IDENTIFIER)
        return Token(kind, text, line, col)

    def tokens(self) -> list[Token]:
        """Drains the stream into a list terminated by exactly one EOF token."""
        result: list[Token] = []
        while True:
            tok = self.next_token()
            result.append(tok)
            if tok.kind is TokenKind.EOF:
                break
        logger.debug("lexed %d tokens", len(result))
        return result


def tokenise(source: str) -> list[Token]:
    """Convert a string of source code into a list of tokens ending with EOF."""
    return Lexer(CharacterStream(source)).tokens()


def detokenise(tokens: Iterable[Token]) -> str:
    """Rebuild source text from tokens, one space between each.

    Tokens without a value (EOF) contribute nothing.
    """
    return " ".join(tok.value for tok in tokens if tok.value is not None)


__all__ = [
    "CharacterStream",
    "Lexer",
    "Token",
    "detokenise",
    "token_hashmap",
    "tokenise",
]
