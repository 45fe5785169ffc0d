"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

import logging
from typing import List, Optional

from .environment import Environment, VariableLookup
from .errors import EmptyExpressionError, UnmatchedParenthesisError
from .lexer import Lexer
from .operators import LPAREN, RPAREN, precedence
from .stack import Stack
from .terms import Term, validate

logger = logging.getLogger(__name__)

Expression = List[Term]


class ShuntingYard:
    """Accumulates validated infix terms and emits them in postfix order."""

    def __init__(self) -> None:
        self.output: Expression = []
        self.operators: Stack[str] = Stack()

    def feed(self, term: Optional[Term]) -> None:
        if term is None:
            return
        if not term.is_operator:
            self.output.append(term)
            return
        op = term.operator
        if op == RPAREN:
            self._close_group()
            return
        if op == LPAREN or self.operators.is_empty() or self.operators.peek() == LPAREN:
            self.operators.push(op)
            return
        while not self.operators.is_empty():
            top = self.operators.peek()
            if top == LPAREN or precedence(top) < precedence(op):
                break
            self.output.append(Term.op(self.operators.pop()))
        self.operators.push(op)

    def _close_group(self) -> None:
        while not self.operators.is_empty():
            top = self.operators.pop()
            if top == LPAREN:
                return
            self.output.append(Term.op(top))
        raise UnmatchedParenthesisError("Unmatched ')'")

    def finish(self) -> Expression:
        """Drain pending operators. A leftover '(' is dropped."""
        while not self.operators.is_empty():
            top = self.operators.pop()
            if top != LPAREN:
                self.output.append(Term.op(top))
        return self.output


def parse_and_convert(line: str, env: Optional[VariableLookup] = None) -> Expression:
    """Lex, validate and convert an infix line to a postfix Expression."""
    if env is None:
        env = Environment()
    text = line.strip()
    if not text:
        raise EmptyExpressionError("Empty expression")
    converter = ShuntingYard()
    for raw in Lexer(text).terms():
        converter.feed(validate(raw, env))
    expression = converter.finish()
    logger.debug("converted %r to postfix %s", text, [str(t) for t in expression])
    return expression
