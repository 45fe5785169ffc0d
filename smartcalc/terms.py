"""Validated expression terms and the raw-term validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .environment import VariableLookup
from .errors import InvalidTokenError, UnknownVariableError
from .lexer import RawTerm, TermKind, is_identifier
from .operators import INT_MAX, INT_MIN, resolve_operator


@dataclass(frozen=True)
class Term:
    """A literal integer or an operator symbol."""
    value: int = 0
    operator: str = ''
    is_operator: bool = False

    @classmethod
    def literal(cls, value: int) -> 'Term':
        return cls(value=value)

    @classmethod
    def op(cls, symbol: str) -> 'Term':
        return cls(operator=symbol, is_operator=True)

    def __str__(self) -> str:
        return self.operator if self.is_operator else str(self.value)


def parse_number(text: str) -> int:
    """Parse a signed base-10 literal that fits in 64 bits."""
    try:
        value = int(text, 10)
    except ValueError:
        raise InvalidTokenError(f"Invalid number: {text!r}") from None
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidTokenError(f"Number out of range: {text}")
    return value


def validate(raw: RawTerm, env: VariableLookup) -> Optional[Term]:
    """Resolve a closed raw term against env.

    Returns None for an empty raw term, which callers treat as nothing to add.
    """
    if raw.kind is TermKind.EMPTY:
        return None
    if raw.kind is TermKind.NUMBER:
        return Term.literal(parse_number(raw.text))
    if raw.kind is TermKind.IDENTIFIER:
        value = env.lookup(raw.text)
        if value is not None:
            return Term.literal(value)
        if is_identifier(raw.text):
            raise UnknownVariableError(raw.text)
        raise InvalidTokenError(f"Invalid identifier: {raw.text!r}")
    symbol = resolve_operator(raw.text)
    if symbol is None:
        raise InvalidTokenError(f"Invalid operator: {raw.text!r}")
    return Term.op(symbol)
