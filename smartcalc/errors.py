"""Exceptions raised by the expression core and the command layer."""


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass

class InvalidTokenError(CalculatorError):
    """Raised for malformed literals, unknown characters, or unresolvable operators."""
    pass

class UnmatchedParenthesisError(InvalidTokenError):
    """Raised when ')' has no matching '('."""
    pass

class UnknownVariableError(CalculatorError):
    """Raised when a well-formed identifier is not in the environment."""

    def __init__(self, name: str):
        super().__init__(f"Unknown variable: {name}")
        self.name = name

class EmptyExpressionError(CalculatorError):
    """Raised when a line holds no terms at all."""
    pass

class InvalidExpressionError(CalculatorError):
    """Raised when an operator is missing operands or operands are left over."""
    pass

class DivisionByZeroError(CalculatorError):
    """Raised for '/' or '%' by zero and for zero raised to a negative power."""
    pass

class InvalidIdentifierError(CalculatorError):
    """Raised when the target of an assignment is not a Latin-letter name."""
    pass
