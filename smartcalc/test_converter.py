import pytest

from smartcalc.converter import ShuntingYard, parse_and_convert
from smartcalc.errors import (
    EmptyExpressionError,
    InvalidTokenError,
    UnknownVariableError,
    UnmatchedParenthesisError,
)
from smartcalc.evaluator import stringify
from smartcalc.terms import Term


def postfix(text, env=None):
    return stringify(parse_and_convert(text, env))


def test_precedence_orders_output():
    assert postfix("3 + 8 * 2") == "3 8 2 * +"
    assert postfix("(3 + 8) * 2") == "3 8 + 2 *"


def test_equal_precedence_is_left_associative():
    assert postfix("1 - 2 + 3") == "1 2 - 3 +"
    assert postfix("2 ^ 3 ^ 2") == "2 3 ^ 2 ^"


def test_worked_example():
    text = "3 + 8 * ((4 + 3) * 2 + 1) - 6 / (2 + 1)"
    assert postfix(text) == "3 8 4 3 + 2 * 1 + * + 6 2 1 + / -"


def test_variables_are_resolved(env):
    assert postfix("a * b + count", env) == "4 5 * 10 +"


def test_unknown_variable_without_env():
    with pytest.raises(UnknownVariableError):
        parse_and_convert("x + 1")


def test_sign_runs_collapse():
    assert postfix("5 - - 3") == "5 3 +"
    assert postfix("5 + - - + - 3") == "5 3 -"


def test_unmatched_closing_parenthesis():
    with pytest.raises(UnmatchedParenthesisError):
        parse_and_convert(")")
    with pytest.raises(InvalidTokenError):
        parse_and_convert("(1 + 2))")


def test_unmatched_opening_parenthesis_is_dropped():
    assert postfix("(3 + 4") == "3 4 +"
    assert postfix("((2") == "2"


def test_empty_parentheses_produce_empty_expression():
    assert parse_and_convert("()") == []


def test_blank_line_is_empty_expression():
    with pytest.raises(EmptyExpressionError):
        parse_and_convert("   ")


def test_shunting_yard_ignores_placeholder():
    sy = ShuntingYard()
    sy.feed(None)
    sy.feed(Term.literal(1))
    sy.feed(Term.op('+'))
    sy.feed(None)
    sy.feed(Term.literal(2))
    assert sy.finish() == [Term.literal(1), Term.literal(2), Term.op('+')]
