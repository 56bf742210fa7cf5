"""Errors raised while tokenizing, converting or evaluating an expression."""
from enum import Enum


class ErrorKind(str, Enum):
    """Category of an evaluation failure."""

    UNKNOWN_SYMBOL = "unknown_symbol"
    MISMATCHED_PAREN = "mismatched_paren"
    INVALID_EXPRESSION = "invalid_expression"
    DIVISION_BY_ZERO = "division_by_zero"


class EvaluationError(ValueError):
    """
    Base class for every failure of the tokenize / convert / evaluate pipeline.

    Subclasses set ``kind`` so callers can branch on the category without
    inspecting the message.
    """

    kind: ErrorKind = ErrorKind.INVALID_EXPRESSION


class UnknownSymbolError(EvaluationError):
    """A character or token outside the expression grammar."""

    kind = ErrorKind.UNKNOWN_SYMBOL

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown operator or symbol: '{symbol}'")


class MismatchedParenError(EvaluationError):
    """Extra ')' or leftover '(' inside the evaluated substring."""

    kind = ErrorKind.MISMATCHED_PAREN

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


class InvalidExpressionError(EvaluationError):
    """Operand underflow or residual operands after evaluation."""

    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, message: str = "Invalid expression"):
        super().__init__(message)


class DivisionByZeroError(EvaluationError):
    """Right operand of '/' is exactly zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)
