"""Pydantic models for tokens and evaluation results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from arithmetic_text_processor.common.errors import ErrorKind, EvaluationError


class TokenType(str, Enum):
    """Lexical category of a token."""

    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token(BaseModel):
    """A single lexical token of an arithmetic expression."""

    model_config = ConfigDict(frozen=True)

    type: TokenType = Field(..., description="Lexical category")
    value: str = Field(..., description="Source text of the token, e.g. '-3.5' or '*'")

    @classmethod
    def number(cls, literal: str) -> "Token":
        return cls(type=TokenType.NUMBER, value=literal)

    @classmethod
    def op(cls, symbol: str) -> "Token":
        return cls(type=TokenType.OPERATOR, value=symbol)

    @classmethod
    def paren(cls, symbol: str) -> "Token":
        return cls(type=TokenType.LPAREN if symbol == "(" else TokenType.RPAREN, value=symbol)

    def __str__(self) -> str:
        return self.value


class EvaluationResult(BaseModel):
    """
    Outcome of evaluating one expression.

    Exactly one of ``result`` and ``error`` is set: either the formatted value,
    or the kind of failure together with a human readable message.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[str] = Field(default=None, description="Formatted value of the expression")
    error: Optional[ErrorKind] = Field(default=None, description="Failure category")
    message: Optional[str] = Field(default=None, description="Failure description")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "EvaluationResult":
        """Ensure the result is either a value or an error, never both or neither."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' and 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, expression: str, result: str) -> "EvaluationResult":
        return cls(expression=expression, result=result)

    @classmethod
    def failure(cls, expression: str, exc: EvaluationError) -> "EvaluationResult":
        return cls(expression=expression, error=exc.kind, message=str(exc))
