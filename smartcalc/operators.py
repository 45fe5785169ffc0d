"""Operator set, precedence table and 64-bit integer arithmetic."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .errors import DivisionByZeroError, InvalidTokenError

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1
_MODULUS = 1 << INT_BITS

LPAREN = '('
RPAREN = ')'
SIGNS = frozenset('+-')
OPERATOR_CHARS = frozenset('+-*/%^()')

# Higher number = binds tighter. Parentheses are handled structurally.
PRECEDENCE: Dict[str, int] = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '%': 2,
    '^': 3,
}


def wrap(n: int) -> int:
    """Reduce an int to the signed 64-bit range with two's complement wraparound."""
    return ((n - INT_MIN) % _MODULUS) + INT_MIN


def is_sign_run(text: str) -> bool:
    return bool(text) and all(ch in SIGNS for ch in text)


def normalize_sign_run(text: str) -> str:
    """Collapse a run of '+'/'-' into '-' for an odd count of '-', else '+'."""
    if not is_sign_run(text):
        raise InvalidTokenError(f"Invalid operator: {text!r}")
    return '-' if text.count('-') % 2 else '+'


def resolve_operator(text: str) -> Optional[str]:
    """Return the operator symbol for text, or None if it is not an operator."""
    if len(text) == 1 and text in OPERATOR_CHARS:
        return text
    if is_sign_run(text):
        return normalize_sign_run(text)
    return None


def precedence(op: str) -> int:
    return PRECEDENCE.get(op, 0)


def _trunc_div(left: int, right: int) -> int:
    # Python's // floors; native machine division truncates toward zero.
    q = abs(left) // abs(right)
    return q if (left < 0) == (right < 0) else -q


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise DivisionByZeroError("Division by zero")
    return wrap(_trunc_div(left, right))


def _modulo(left: int, right: int) -> int:
    if right == 0:
        raise DivisionByZeroError("Division by zero")
    return wrap(left - right * _trunc_div(left, right))


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return wrap(pow(base, exponent, _MODULUS))
    # Negative exponent: the truncated value of 1 / base**n.
    if base == 0:
        raise DivisionByZeroError("Division by zero")
    if base == 1:
        return 1
    if base == -1:
        return -1 if exponent % 2 else 1
    return 0


_BINARY: Dict[str, Callable[[int, int], int]] = {
    '+': lambda l, r: wrap(l + r),
    '-': lambda l, r: wrap(l - r),
    '*': lambda l, r: wrap(l * r),
    '/': _divide,
    '%': _modulo,
    '^': _power,
}


def apply(op: str, left: int, right: int) -> int:
    """Compute ``left op right``."""
    try:
        func = _BINARY[op]
    except KeyError:
        raise InvalidTokenError(f"Invalid operator: {op!r}") from None
    return func(left, right)
