import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.expressions import (
    infix_to_postfix,
    is_balanced,
    is_operator,
    postfix_to_infix,
    postfix_to_prefix,
    precedence,
    prefix_to_infix,
    prefix_to_postfix,
)

_operands = st.sampled_from("abcxyz0123")
_postfix = st.recursive(
    _operands,
    lambda children: st.tuples(children, children, st.sampled_from("+-*/")).map(
        lambda parts: "".join(parts)
    ),
    max_leaves=12,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{([])()}", True),
        ("", True),
        ("()[]{}", True),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("{[}", False),
    ],
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected


@pytest.mark.parametrize("char", list("+-*/"))
def test_is_operator_true(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", ["a", "1", "(", "^"])
def test_is_operator_false(char):
    assert is_operator(char) is False


def test_precedence_levels():
    assert precedence("+") == precedence("-") == 1
    assert precedence("*") == precedence("/") == 2
    assert precedence("(") == 0


def test_infix_to_postfix_example():
    assert infix_to_postfix("a+b*(c+d)-e") == "abcd+*+e-"


def test_postfix_to_infix_example():
    assert postfix_to_infix("ab+cd-*") == "((a+b)*(c-d))"


def test_prefix_to_infix_example():
    assert prefix_to_infix("-+ab*cd") == "((a+b)-(c*d))"


def test_single_operand_passes_through():
    assert postfix_to_infix("x") == "x"
    assert prefix_to_postfix("7") == "7"
    assert infix_to_postfix("q") == "q"


def test_unmatched_closing_parenthesis_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")


@pytest.mark.parametrize("convert", [postfix_to_infix, postfix_to_prefix])
@pytest.mark.parametrize("expression", ["", "a+", "+"])
def test_malformed_postfix_raises(convert, expression):
    with pytest.raises(ValueError):
        convert(expression)


@pytest.mark.parametrize("convert", [prefix_to_infix, prefix_to_postfix])
@pytest.mark.parametrize("expression", ["", "+a", "*"])
def test_malformed_prefix_raises(convert, expression):
    with pytest.raises(ValueError):
        convert(expression)


@given(_postfix)
def test_postfix_prefix_round_trip(expression):
    assert prefix_to_postfix(postfix_to_prefix(expression)) == expression


@given(_postfix)
def test_parenthesised_infix_round_trip(expression):
    assert infix_to_postfix(postfix_to_infix(expression)) == expression


@given(_postfix)
def test_prefix_and_postfix_give_same_infix(expression):
    assert prefix_to_infix(postfix_to_prefix(expression)) == postfix_to_infix(expression)


@given(_postfix)
def test_infix_output_is_balanced(expression):
    assert is_balanced("".join(c for c in postfix_to_infix(expression) if c in "()"))