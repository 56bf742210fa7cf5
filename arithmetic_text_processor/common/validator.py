"""Cheap structural checks deciding whether a substring is worth evaluating."""
from arithmetic_text_processor.common.errors import EvaluationError
from arithmetic_text_processor.common.math_utils import is_number
from arithmetic_text_processor.common.models import TokenType
from arithmetic_text_processor.common.parser import ExpressionParser


VALID_MATH_CHARACTERS = frozenset("0123456789+-*/. \t")


class ExpressionValidator:
    """
    Filters used by the scanners before running the full evaluation pipeline.

    These checks do not validate syntax: "2 + + 3" passes and still fails later
    with an evaluation error. They only tell prose such as "(see chapter)" or
    "test + words" apart from something that looks like arithmetic.
    """

    @staticmethod
    def is_potential_expression(expr: str) -> bool:
        """
        Check that a string tokenizes into something shaped like "operand operator operand".

        :param str expr: Candidate substring

        :return: True if there are at least three tokens, a number and an operator among them
        :rtype: bool
        """
        try:
            tokens = ExpressionParser.tokenize(expr)
        except EvaluationError:
            return False

        if len(tokens) < 3:
            return False
        has_number = any(t.type is TokenType.NUMBER and is_number(t.value) for t in tokens)
        has_operator = any(t.type is TokenType.OPERATOR for t in tokens)
        return has_number and has_operator

    @staticmethod
    def is_valid_math_characters(expr: str) -> bool:
        """Return True if the string is non-empty and made only of digits, operators, '.', spaces and tabs."""
        return bool(expr) and all(char in VALID_MATH_CHARACTERS for char in expr)
