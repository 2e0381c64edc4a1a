import json

from hypothesis import given
from hypothesis import strategies as st

from sclang.sclang_ast import (
    Assignment,
    Ast,
    BinaryOp,
    BinaryOperator,
    ComparisonOp,
    ComparisonOperator,
    Declaration,
    IntLiteral,
    Variable,
    While,
)


def test_node_eq_ignores_position() -> None:
    assert IntLiteral(5, line=1, col=9) == IntLiteral(5)
    assert Variable("x", line=3, col=2) == Variable("x", line=7, col=1)


def test_node_eq_not_equal_value() -> None:
    assert Declaration("x", IntLiteral(1)) != Declaration("x", IntLiteral(2))
    assert Declaration("x", IntLiteral(1)) != Declaration("y", IntLiteral(1))


def test_node_eq_different_variants() -> None:
    assert Variable("x") != IntLiteral(0)
    assert BinaryOp(Variable("a"), Variable("b"), BinaryOperator.PLUS) != BinaryOp(
        Variable("a"), Variable("b"), BinaryOperator.MINUS
    )


def test_node_repr_hides_position() -> None:
    assert repr(IntLiteral(5, line=1, col=1)) == "IntLiteral(value=5)"


def test_declaration_to_dict() -> None:
    d = Declaration("x", IntLiteral(1, line=1, col=9), line=1, col=1).to_dict()
    assert d["kind"] == "Declaration"
    assert d["target"] == "x"
    assert d["value"] == {"kind": "IntLiteral", "value": 1, "line": 1, "col": 9}
    assert (d["line"], d["col"]) == (1, 1)


def test_while_to_dict() -> None:
    loop = While(
        ComparisonOp(Variable("x"), IntLiteral(1), ComparisonOperator.LESSER_EQUAL),
        [BinaryOp(Variable("x"), IntLiteral(1), BinaryOperator.MINUS)],
    )
    d = loop.to_dict()
    assert d["condition"]["op"] == "<="
    assert d["condition"]["lhs"]["name"] == "x"
    assert [stmt["op"] for stmt in d["body"]] == ["-"]


def test_assignment_stub_is_constructible() -> None:
    node = Assignment(Variable("x"), IntLiteral(3))
    assert node.to_dict()["target"]["kind"] == "Variable"
    assert node == Assignment(Variable("x"), IntLiteral(3))


def test_ast_sequence_protocol() -> None:
    ast = Ast([Declaration("a", IntLiteral(1)), Declaration("b", IntLiteral(2))])
    assert len(ast) == 2
    assert ast[1].target == "b"  # type: ignore[union-attr]
    assert [n.target for n in ast] == ["a", "b"]  # type: ignore[union-attr]


def test_ast_to_dict_is_json_serializable() -> None:
    ast = Ast([Declaration("a", IntLiteral(1))])
    assert json.loads(json.dumps(ast.to_dict()))[0]["target"] == "a"


def test_operator_spellings() -> None:
    assert [op.value for op in ComparisonOperator] == ["==", "!=", ">=", "<="]
    assert [op.value for op in BinaryOperator] == ["+", "-"]


@given(st.text(min_size=1), st.integers())  # type: ignore[misc]
def test_declaration_eq_same_fields(target: str, value: int) -> None:
    assert Declaration(target, IntLiteral(value)) == Declaration(target, IntLiteral(value))


@given(st.text(min_size=1), st.text(min_size=1))  # type: ignore[misc]
def test_variable_eq_different_names(a: str, b: str) -> None:
    assert (Variable(a) == Variable(b)) == (a == b)
