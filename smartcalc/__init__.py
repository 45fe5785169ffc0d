"""smartcalc - integer expression calculator with variable memory.

    line >>> Lexer >>> validate >>> ShuntingYard >>> evaluate >>> int
"""

from .converter import Expression, ShuntingYard, parse_and_convert
from .environment import Environment, VariableLookup
from .errors import (
    CalculatorError,
    DivisionByZeroError,
    EmptyExpressionError,
    InvalidExpressionError,
    InvalidIdentifierError,
    InvalidTokenError,
    UnknownVariableError,
    UnmatchedParenthesisError,
)
from .evaluator import evaluate, evaluate_expression, stringify
from .lexer import Lexer, RawTerm, TermKind
from .terms import Term, validate

__all__ = [
    'Expression', 'ShuntingYard', 'parse_and_convert',
    'Environment', 'VariableLookup',
    'CalculatorError', 'DivisionByZeroError', 'EmptyExpressionError',
    'InvalidExpressionError', 'InvalidIdentifierError', 'InvalidTokenError',
    'UnknownVariableError', 'UnmatchedParenthesisError',
    'evaluate', 'evaluate_expression', 'stringify',
    'Lexer', 'RawTerm', 'TermKind',
    'Term', 'validate',
]
