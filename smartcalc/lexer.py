"""Character-level lexer turning an input line into closed raw terms.

The lexer is a small state machine: the term being built is tagged with a
single TermKind and grows one character at a time until the next character
cannot extend it. Runs of '+'/'-' are kept together (even across spaces) so
the term validator can collapse them into one sign.
"""

from __future__ import annotations

import bisect
import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidTokenError
from .operators import OPERATOR_CHARS, RPAREN, SIGNS, is_sign_run

logger = logging.getLogger(__name__)


class TermKind(enum.Enum):
    EMPTY = 'empty'
    NUMBER = 'number'
    IDENTIFIER = 'identifier'
    OPERATOR = 'operator'


@dataclass
class RawTerm:
    """A lexical term as typed by the user, before validation."""
    kind: TermKind = TermKind.EMPTY
    text: str = ''

    @property
    def is_empty(self) -> bool:
        return self.kind is TermKind.EMPTY

    @property
    def is_operand(self) -> bool:
        """True for terms that end an operand: numbers, names and ')'."""
        return self.kind in (TermKind.NUMBER, TermKind.IDENTIFIER) or self.text == RPAREN

    @property
    def is_sign_run(self) -> bool:
        return self.kind is TermKind.OPERATOR and is_sign_run(self.text)

    def __repr__(self) -> str:
        return f"RawTerm({self.kind.name}, {self.text!r})"


def is_digit(ch: str) -> bool:
    # str.isdigit() accepts non-ASCII digits; literals are ASCII only.
    return '0' <= ch <= '9'


# Code point ranges of the Unicode Latin script (Script=Latin).
_LATIN_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x0041, 0x005A), (0x0061, 0x007A), (0x00AA, 0x00AA), (0x00BA, 0x00BA),
    (0x00C0, 0x00D6), (0x00D8, 0x00F6), (0x00F8, 0x02B8), (0x02E0, 0x02E4),
    (0x1D00, 0x1D25), (0x1D2C, 0x1D5C), (0x1D62, 0x1D65), (0x1D6B, 0x1D77),
    (0x1D79, 0x1DBE), (0x1E00, 0x1EFF), (0x2071, 0x2071), (0x207F, 0x207F),
    (0x2090, 0x209C), (0x212A, 0x212B), (0x2132, 0x2132), (0x214E, 0x214E),
    (0x2160, 0x2188), (0x2C60, 0x2C7F), (0xA722, 0xA787), (0xA78B, 0xA7CA),
    (0xA7D0, 0xA7D1), (0xA7D3, 0xA7D3), (0xA7D5, 0xA7D9), (0xA7F2, 0xA7FF),
    (0xAB30, 0xAB5A), (0xAB5C, 0xAB64), (0xAB66, 0xAB69), (0xFB00, 0xFB06),
    (0xFF21, 0xFF3A), (0xFF41, 0xFF5A), (0x10780, 0x10785), (0x10787, 0x107B0),
    (0x107B2, 0x107BA), (0x1DF00, 0x1DF1E), (0x1DF25, 0x1DF2A),
)
_LATIN_STARTS = [start for start, _ in _LATIN_RANGES]


def is_latin_letter(ch: str) -> bool:
    """True for a single character of the Latin script."""
    if len(ch) != 1:
        return False
    cp = ord(ch)
    i = bisect.bisect_right(_LATIN_STARTS, cp) - 1
    return i >= 0 and cp <= _LATIN_RANGES[i][1]


def is_identifier(text: str) -> bool:
    """A non-empty string made of Latin letters only."""
    return bool(text) and all(is_latin_letter(ch) for ch in text)


class Lexer:
    """Splits a line into RawTerms.

    Usage::

        for raw in Lexer("3 + x").terms():
            ...
    """

    def __init__(self, text: str):
        self.text = text
        self._current = RawTerm()
        # A sign run closed by a space, held back in case more signs follow.
        self._pending: Optional[RawTerm] = None
        self._previous: Optional[RawTerm] = None

    def _preceded_by_operand(self) -> bool:
        if self._pending is not None:
            return False
        return self._previous is not None and self._previous.is_operand

    def _should_close(self, ch: str) -> bool:
        """Whether ch ends the current (non-empty) term."""
        term = self._current
        if ch == ' ':
            return True
        if term.kind is TermKind.NUMBER:
            return not is_digit(ch)
        if term.kind is TermKind.IDENTIFIER:
            return not is_latin_letter(ch)
        if term.is_sign_run:
            if ch in SIGNS:
                return False
            if is_digit(ch) and len(term.text) == 1:
                # "-5" after an operator or at the start is a signed literal.
                return self._preceded_by_operand()
            return True
        return True

    def _extend(self, ch: str) -> None:
        term = self._current
        if term.kind is TermKind.EMPTY:
            if is_digit(ch):
                term.kind = TermKind.NUMBER
            elif ch in OPERATOR_CHARS:
                term.kind = TermKind.OPERATOR
            elif is_latin_letter(ch):
                term.kind = TermKind.IDENTIFIER
            else:
                raise InvalidTokenError(f"Invalid character: {ch!r}")
        elif term.kind is TermKind.OPERATOR and is_digit(ch):
            term.kind = TermKind.NUMBER
        term.text += ch

    def _close(self) -> Iterator[RawTerm]:
        term, self._current = self._current, RawTerm()
        if term.is_empty:
            return
        if term.is_sign_run:
            if self._pending is None:
                self._pending = term
            else:
                self._pending.text += term.text
            return
        yield from self._flush()
        self._previous = term
        yield term

    def _flush(self) -> Iterator[RawTerm]:
        if self._pending is not None:
            term, self._pending = self._pending, None
            self._previous = term
            yield term

    def terms(self) -> Iterator[RawTerm]:
        """Yield closed raw terms left to right."""
        for ch in self.text:
            if not self._current.is_empty and self._should_close(ch):
                yield from self._close()
            if ch == ' ':
                continue
            self._extend(ch)
        yield from self._close()
        yield from self._flush()

    def tokenize(self) -> List[RawTerm]:
        terms = list(self.terms())
        logger.debug("lexed %r into %s", self.text, terms)
        return terms
