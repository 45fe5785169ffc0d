"""Postfix evaluation and rendering."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .converter import parse_and_convert
from .environment import VariableLookup
from .errors import EmptyExpressionError, InvalidExpressionError
from .operators import apply
from .stack import EmptyStackError, Stack
from .terms import Term

logger = logging.getLogger(__name__)


def evaluate(expression: Sequence[Term]) -> int:
    """Fold a postfix expression into a single integer."""
    if not expression:
        raise EmptyExpressionError("Empty expression")
    values: Stack[int] = Stack()
    for term in expression:
        if not term.is_operator:
            values.push(term.value)
            continue
        try:
            right = values.pop()
            left = values.pop()
        except EmptyStackError:
            raise InvalidExpressionError(f"Missing operand for '{term.operator}'") from None
        values.push(apply(term.operator, left, right))
    if len(values) != 1:
        raise InvalidExpressionError(f"Expected one result, {len(values)} values left")
    return values.pop()


def evaluate_expression(line: str, env: Optional[VariableLookup] = None) -> int:
    """Convert and evaluate an infix line."""
    result = evaluate(parse_and_convert(line, env))
    logger.debug("%r = %d", line, result)
    return result


def stringify(expression: Sequence[Term]) -> str:
    """Render terms space separated, e.g. ``3 8 2 * +``."""
    return ' '.join(str(term) for term in expression)
