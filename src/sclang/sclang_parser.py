"""
SCLANG Language Parser

Parses SCLANG source into an abstract syntax tree (`Ast`) by recursive descent
over the token sequence produced by `sclang_lexer.tokenise`.

Grammar
-------
    program     := statement* EOF
    statement   := declaration | while
    declaration := "let" IDENTIFIER "=" INT_LITERAL
    while       := "while" condition "{" body_stmt* "}"
    condition   := operand ("==" | "!=" | ">=" | "<=") operand
    body_stmt   := operand ("+" | "-") operand
    operand     := IDENTIFIER | INT_LITERAL

Parser Behavior
---------------
- One forward cursor, one token of lookahead, no backtracking.
- Every rule consumes exactly the tokens it recognizes and leaves the cursor
  on the next token. A while-loop consumes its closing brace.
- Fail fast: the first grammar violation raises `ParseError` and no partial
  AST is returned. An unrecognized top-level statement is an error, not a
  placeholder node.
- Loop bodies hold binary-operation statements only; declarations and
  nested loops inside a body are rejected.

Entry Points
------------
- `parse(source)`: Lex and parse a complete program.
- `Parser(source).parse()`: Same, keeping the parser around for inspection.
- `Parser.from_tokens(tokens).parse()`: Parse an existing token list.

Raises
------
LexError
    Raised while tokenising malformed numerals.
ParseError
    Raised when an unexpected token appears or a literal is out of range.
"""

from __future__ import annotations

import logging

from sclang.sclang_ast import (
    Ast,
    BinaryOp,
    BinaryOperator,
    ComparisonOp,
    ComparisonOperator,
    Declaration,
    IntLiteral,
    Node,
    Variable,
    While,
)
from sclang.sclang_constants import (
    DIGITS,
    INT64_MAX,
    INT64_MAX_DIGITS,
    INT64_MIN,
    TokenKind,
    binary_tokens,
    comparison_tokens,
    operand_tokens,
    statement_tokens,
)
from sclang.sclang_errors import ParseError
from sclang.sclang_lexer import Token, tokenise

logger = logging.getLogger(__name__)


class Parser:
    """
    SCLANG Parser Class

    Transforms a list of lexical tokens into an `Ast`.

    Attributes
    ----------
    tokens : list[Token]
        The token stream, always terminated by one EOF token.
    position : int
        Current index into the token stream.
    comparison_ops : dict[TokenKind, ComparisonOperator]
        Token kinds accepted between the operands of a condition.
    binary_ops : dict[TokenKind, BinaryOperator]
        Token kinds accepted between the operands of a body statement.
    """

    def __init__(self, source: str) -> None:
        self.tokens: list[Token] = tokenise(source)
        self.position: int = 0

        # TOKEN MAPPINGS (PARSER)

        self.comparison_ops: dict[TokenKind, ComparisonOperator] = {
            TokenKind.DOUBLE_EQ: ComparisonOperator.EQUAL,
            TokenKind.NOT_EQ: ComparisonOperator.NOT_EQUAL,
            TokenKind.GREATER_EQ: ComparisonOperator.GREATER_EQUAL,
            TokenKind.LESSER_EQ: ComparisonOperator.LESSER_EQUAL,
        }
        self.binary_ops: dict[TokenKind, BinaryOperator] = {
            TokenKind.PLUS: BinaryOperator.PLUS,
            TokenKind.MINUS: BinaryOperator.MINUS,
        }

    @classmethod
    def from_tokens(cls, tokens: list[Token]) -> Parser:
        """Build a parser over an existing token list, appending EOF if missing."""
        parser = cls("")
        parser.tokens = list(tokens)
        if not parser.tokens or parser.tokens[-1].kind is not TokenKind.EOF:
            parser.tokens.append(Token(TokenKind.EOF))
        return parser

    def current(self) -> Token:
        return (
            self.tokens[self.position]
            if self.position < len(self.tokens)
            else self.tokens[-1]
        )

    def peek(self, offset: int = 1) -> Token:
        index = self.position + offset
        return self.tokens[index] if index < len(self.tokens) else self.tokens[-1]

    def advance(self) -> Token:
        self.position += 1
        return self.current()

    def check(self, *kinds: TokenKind) -> bool:
        return self.current().kind in kinds

    def expect(self, kind: TokenKind) -> Token:
        """Return the current token if it has `kind`; never advances.

        Raises:
            ParseError: If the current token is of another kind.
        """
        return self.expect_one_of(kind)

    def expect_one_of(self, *kinds: TokenKind) -> Token:
        """Return the current token if its kind is in `kinds`; never advances.

        Raises:
            ParseError: If the current token's kind is not in `kinds`.
        """
        tok = self.current()
        if tok.kind not in kinds:
            raise ParseError(kinds, tok.kind, tok.line, tok.col)
        return tok

    def match(self, *kinds: TokenKind) -> Token:
        """Expect one of `kinds`, consume it and return it."""
        tok = self.expect_one_of(*kinds)
        self.advance()
        return tok

    def parse(self) -> Ast:
        """Parse a full SCLANG program and return its top-level statements."""
        ast = Ast()
        while not self.check(TokenKind.EOF):
            ast.nodes.append(self.parse_statement())
        logger.debug("parsed %d top-level statements", len(ast))
        return ast

    def parse_statement(self) -> Node:
        """Parse a single top-level statement."""
        tok = self.current()
        if tok.kind is TokenKind.LET:
            return self.parse_let()
        if tok.kind is TokenKind.WHILE:
            return self.parse_while()
        raise ParseError(statement_tokens, tok.kind, tok.line, tok.col)

    def parse_variable(self) -> Variable:
        tok = self.match(TokenKind.IDENTIFIER)
        assert tok.value is not None  # for mypy
        return Variable(tok.value, line=tok.line, col=tok.col)

    def parse_int_literal(self) -> IntLiteral:
        """Parse an integer literal, re-checking the signed 64-bit range."""
        tok = self.match(TokenKind.INT_LITERAL)
        text = tok.value or ""
        digits = text[1:] if text[:1] == "-" else text
        if not digits or not all(ch in DIGITS for ch in digits):
            raise ParseError(
                (TokenKind.INT_LITERAL,),
                tok.kind,
                tok.line,
                tok.col,
                message=f"Invalid integer literal {text!r}",
            )
        if len(digits.lstrip("0")) > INT64_MAX_DIGITS or not (
            INT64_MIN <= int(text) <= INT64_MAX
        ):
            raise ParseError(
                (TokenKind.INT_LITERAL,),
                tok.kind,
                tok.line,
                tok.col,
                message=f"Integer literal {text} does not fit in 64 bits",
            )
        return IntLiteral(int(text), line=tok.line, col=tok.col)

    def parse_operand(self) -> Node:
        """Parse a Variable or IntLiteral; no nested expressions."""
        tok = self.expect_one_of(*operand_tokens)
        if tok.kind is TokenKind.IDENTIFIER:
            return self.parse_variable()
        return self.parse_int_literal()

    def parse_let(self) -> Declaration:
        """Parse `let IDENT = INT`."""
        let_tok = self.match(TokenKind.LET)
        target_tok = self.match(TokenKind.IDENTIFIER)
        assert target_tok.value is not None  # for mypy
        self.match(TokenKind.EQ)
        value = self.parse_int_literal()
        return Declaration(target_tok.value, value, line=let_tok.line, col=let_tok.col)

    def parse_condition(self) -> ComparisonOp:
        """Parse `operand <comparison> operand`."""
        lhs = self.parse_operand()
        op_tok = self.match(*comparison_tokens)
        rhs = self.parse_operand()
        return ComparisonOp(
            lhs, rhs, self.comparison_ops[op_tok.kind], line=lhs.line, col=lhs.col
        )

    def parse_body_statement(self) -> BinaryOp:
        """Parse `operand (+|-) operand` inside a loop body."""
        lhs = self.parse_operand()
        op_tok = self.match(*binary_tokens)
        rhs = self.parse_operand()
        return BinaryOp(lhs, rhs, self.binary_ops[op_tok.kind], line=lhs.line, col=lhs.col)

    def parse_body(self) -> list[Node]:
        """Parse statements up to, but not including, the closing brace."""
        stmts: list[Node] = []
        while not self.check(TokenKind.RBRACE):
            if self.check(TokenKind.EOF):
                tok = self.current()
                raise ParseError((TokenKind.RBRACE,), tok.kind, tok.line, tok.col)
            stmts.append(self.parse_body_statement())
        return stmts

    def parse_while(self) -> While:
        """Parse a WHILE loop with condition and braced body."""
        loop_tok = self.match(TokenKind.WHILE)
        cond = self.parse_condition()
        self.match(TokenKind.LBRACE)
        body = self.parse_body()
        self.match(TokenKind.RBRACE)
        return While(cond, body, line=loop_tok.line, col=loop_tok.col)


def parse(source: str) -> Ast:
    """Lex and parse `source` into an Ast."""
    return Parser(source).parse()


__all__ = ["Parser", "parse"]
