import pytest

from smartcalc.converter import parse_and_convert
from smartcalc.environment import Environment
from smartcalc.errors import (
    DivisionByZeroError,
    EmptyExpressionError,
    InvalidExpressionError,
    InvalidTokenError,
    UnknownVariableError,
)
from smartcalc.evaluator import evaluate, evaluate_expression, stringify
from smartcalc.terms import Term


@pytest.mark.parametrize("a, b", [(0, 0), (3, 4), (-12, 5), (1000000, -999), (7, -7)])
def test_basic_arithmetic(a, b):
    assert evaluate_expression(f"{a} + {b}") == a + b
    assert evaluate_expression(f"{a} - {b}") == a - b
    assert evaluate_expression(f"{a} * {b}") == a * b


@pytest.mark.parametrize("text, expected", [
    ("3 + 8 * 2", 19),
    ("(3 + 8) * 2", 22),
    ("3 + 8 * ((4 + 3) * 2 + 1) - 6 / (2 + 1)", 121),
    ("7 / 2", 3),
    ("7 % 2", 1),
    ("-7 / 2", -3),
    ("-7 % 2", -1),
    ("5 - - 3", 8),
    ("5 + - - + - 3", 2),
    ("5 - -3", 8),
    ("2 * -3", -6),
    ("(3) - 5", -2),
    ("2 ^ 10", 1024),
    ("2 ^ 3 ^ 2", 64),
    ("2 ^ -1", 0),
    ("(3 + 4", 7),
    ("9223372036854775807 + 1", -9223372036854775808),
    ("1+2*3-4", 3),
])
def test_evaluate_expression(text, expected):
    assert evaluate_expression(text) == expected


def test_variables(env):
    assert evaluate_expression("a * b - count", env) == 10
    assert evaluate_expression("a*(b+count)", env) == 60


def test_unknown_variable():
    with pytest.raises(UnknownVariableError):
        evaluate_expression("x + 1", Environment())


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        evaluate_expression("5 / 0")
    with pytest.raises(DivisionByZeroError):
        evaluate_expression("5 % (2 - 2)")
    with pytest.raises(DivisionByZeroError):
        evaluate_expression("0 ^ -1")


def test_out_of_range_literal():
    with pytest.raises(InvalidTokenError):
        evaluate_expression("9223372036854775808")


def test_empty_expression_is_distinct():
    with pytest.raises(EmptyExpressionError):
        evaluate([])
    with pytest.raises(EmptyExpressionError):
        evaluate_expression("()")


@pytest.mark.parametrize("text", ["3 +", "* 2", "- 5", "--5", "1 + * 2"])
def test_missing_operands(text):
    with pytest.raises(InvalidExpressionError):
        evaluate_expression(text)


def test_excess_operands_are_not_dropped():
    with pytest.raises(InvalidExpressionError):
        evaluate_expression("3 4")


def test_right_operand_popped_first():
    expr = [Term.literal(10), Term.literal(4), Term.op('-')]
    assert evaluate(expr) == 6


@pytest.mark.parametrize("text", [
    "1 + 2 * 3",
    "(1 + 2) * 3",
    "100 / 7 % 3",
    "2 ^ (1 + 2) - -4",
    "a * (b - count) + 3",
])
def test_postfix_round_trip(text, env):
    direct = evaluate_expression(text, env)
    rendered = stringify(parse_and_convert(text, env))
    rebuilt = [Term.op(tok) if tok in "+-*/%^" else Term.literal(int(tok))
               for tok in rendered.split()]
    assert evaluate(rebuilt) == direct
