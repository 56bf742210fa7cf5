"""Evaluate bare expressions such as "2 + 2" written directly in the text."""
from typing import List, Tuple

from arithmetic_text_processor.common.config import ProcessorConfig
from arithmetic_text_processor.common.logger import logger
from arithmetic_text_processor.common.math_utils import is_decimal_point, is_digit, is_operator
from arithmetic_text_processor.common.validator import ExpressionValidator
from arithmetic_text_processor.processors.base import ExpressionRewriter


RUN_WHITESPACE = " \t"


class PlainScanner:
    """
    Find runs of digits, operators, decimal points and blanks and evaluate them.

    Blanks between the last digit or operator of a run and the character that ends
    it are kept after the replacement, and a '.' that is not between two digits
    ends the run, so "is 2 + 2... Amazing!" becomes "is 4... Amazing!".
    """

    def __init__(self, config: ProcessorConfig, rewriter: ExpressionRewriter):
        self.config = config
        self.rewriter = rewriter

    def scan(self, text: str) -> str:
        """
        Replace every bare arithmetic expression by its value.

        :param str text: Text whose parenthesized groups were already resolved

        :return: Rewritten text
        :rtype: str
        """
        pieces: List[str] = []
        pos = 0

        while pos < len(text):
            char = text[pos]
            if not (is_digit(char) or char in "+-"):
                pieces.append(char)
                pos += 1
                continue

            end, last_meaningful, has_operator = self._measure_run(text, pos)
            candidate = text[pos:last_meaningful + 1]
            trailing = text[last_meaningful + 1:end]

            replacement = None
            if has_operator and ExpressionValidator.is_potential_expression(candidate):
                replacement = self.rewriter.rewrite(candidate, self.config.plain_error_policy)
            else:
                logger.debug("Not an expression, keeping %r", candidate)

            if replacement is None:
                pieces.append(text[pos:end])
            else:
                pieces.append(replacement)
                pieces.append(trailing)
            pos = end

        return "".join(pieces)

    @staticmethod
    def _measure_run(text: str, start: int) -> Tuple[int, int, bool]:
        """
        Walk a candidate run starting at ``start``.

        :param str text: Text being scanned
        :param int start: Position of the first digit or sign

        :return: End of the run (exclusive), index of the last meaningful character,
            and whether an operator was seen
        :rtype: Tuple[int, int, bool]
        """
        end = start
        last_meaningful = start
        has_operator = False

        while end < len(text):
            char = text[end]
            if is_digit(char) or is_operator(char) or (char == "." and is_decimal_point(text, end)):
                last_meaningful = end
                has_operator = has_operator or is_operator(char)
            elif char not in RUN_WHITESPACE:
                break
            end += 1

        return end, last_meaningful, has_operator
