"""
Defines the abstract syntax tree (AST) node structure for the SCLANG scripting language.

The node set is closed: `Node` is the union of the dataclasses below and the
parser never produces anything else. Every sub-node is owned by exactly one
parent, so the result of a parse is a pure tree.

Classes:
    Declaration:  `let x = 5`, binds a name to an initial integer value.
    Assignment:   Rebinds an existing name. Not produced by the current grammar.
    Variable:     A name reference.
    IntLiteral:   A signed 64-bit integer constant.
    While:        A condition plus an owned body of statements.
    ComparisonOp: Two operands and a ComparisonOperator.
    BinaryOp:     Two operands and a BinaryOperator.
    Ast:          The ordered top-level statements of a program.

    ASTDict:
        TypedDict shape of a serialized node, suitable for JSON output or debugging.

Each node also records the `line` and `col` of its first token. Positions are
diagnostic metadata and are ignored by equality, so trees built by hand in
tests compare equal to parsed ones.

Example:
    While(
        condition=ComparisonOp(Variable("x"), IntLiteral(1), ComparisonOperator.EQUAL),
        body=[BinaryOp(Variable("x"), IntLiteral(1), BinaryOperator.PLUS)],
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, TypedDict, Union


class ComparisonOperator(Enum):
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER_EQUAL = ">="
    LESSER_EQUAL = "<="


class BinaryOperator(Enum):
    PLUS = "+"
    MINUS = "-"


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of a node used for serialization.

    Fields:
        kind (str): The node class name (e.g. "Declaration", "While").
        line (int): Line number of the node's first token.
        col (int): Column number of the node's first token.
        target (Any): Declaration name or Assignment target.
        name (str): Variable name.
        value (Any): Literal value, declared value, or assigned value.
        condition (ASTDict): While condition.
        body (list[ASTDict]): While body statements.
        lhs (ASTDict): Left operand of an operator node.
        rhs (ASTDict): Right operand of an operator node.
        op (str): Operator spelling.
    """

    kind: str
    line: int
    col: int
    target: Any
    name: str
    value: Any
    condition: "ASTDict"
    body: list["ASTDict"]
    lhs: "ASTDict"
    rhs: "ASTDict"
    op: str


@dataclass
class Declaration:
    target: str
    value: Node
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "Declaration",
            "target": self.target,
            "value": self.value.to_dict(),
            "line": self.line,
            "col": self.col,
        }


@dataclass
class Assignment:
    """Rebinding of an existing name.

    The grammar has no rule producing this node yet; it exists so that
    consumers can already match on it.
    """

    target: Node
    value: Node
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "Assignment",
            "target": self.target.to_dict(),
            "value": self.value.to_dict(),
            "line": self.line,
            "col": self.col,
        }


@dataclass
class Variable:
    name: str
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {"kind": "Variable", "name": self.name, "line": self.line, "col": self.col}


@dataclass
class IntLiteral:
    value: int
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {"kind": "IntLiteral", "value": self.value, "line": self.line, "col": self.col}


@dataclass
class While:
    condition: Node
    body: list[Node] = field(default_factory=list)
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "While",
            "condition": self.condition.to_dict(),
            "body": [stmt.to_dict() for stmt in self.body],
            "line": self.line,
            "col": self.col,
        }


@dataclass
class ComparisonOp:
    lhs: Node
    rhs: Node
    op: ComparisonOperator
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "ComparisonOp",
            "lhs": self.lhs.to_dict(),
            "rhs": self.rhs.to_dict(),
            "op": self.op.value,
            "line": self.line,
            "col": self.col,
        }


@dataclass
class BinaryOp:
    lhs: Node
    rhs: Node
    op: BinaryOperator
    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "BinaryOp",
            "lhs": self.lhs.to_dict(),
            "rhs": self.rhs.to_dict(),
            "op": self.op.value,
            "line": self.line,
            "col": self.col,
        }


Node = Union[Declaration, Assignment, Variable, IntLiteral, While, ComparisonOp, BinaryOp]


@dataclass
class Ast:
    """The parse result: top-level statements in source order."""

    nodes: list[Node] = field(default_factory=list)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def to_dict(self) -> list[ASTDict]:
        return [node.to_dict() for node in self.nodes]


__all__ = [
    "ASTDict",
    "Assignment",
    "Ast",
    "BinaryOp",
    "BinaryOperator",
    "ComparisonOp",
    "ComparisonOperator",
    "Declaration",
    "IntLiteral",
    "Node",
    "Variable",
    "While",
]
