"""Pattern-match scanner strategy."""
import re

from arithmetic_text_processor.common.logger import logger
from arithmetic_text_processor.common.validator import ExpressionValidator
from arithmetic_text_processor.processors.base import ExpressionProcessor


# A group with no parentheses inside, i.e. an innermost group
INNER_GROUP_PATTERN = re.compile(r"\(([^()]+)\)")
# Signed integer or decimal operands joined by operators, blanks allowed around operators
PLAIN_EXPRESSION_PATTERN = re.compile(
    r"-?[0-9]+(?:\.[0-9]+)?(?:[ \t]*[-+*/][ \t]*-?[0-9]+(?:\.[0-9]+)?)+"
)


class RegexExpressionProcessor(ExpressionProcessor):
    """
    Processor locating expressions with regular expressions.

    Matching only decides where expressions are; evaluation goes through the
    same tokenizer, Shunting-yard conversion and RPN evaluation as the manual
    strategy.
    """

    def _process(self, text: str) -> str:
        return self._replace_plain_expressions(self._reduce_groups(text))

    def _reduce_groups(self, text: str) -> str:
        """Substitute innermost groups until a pass changes nothing."""
        passes = 0
        while True:
            replaced = False

            def substitute(match: re.Match) -> str:
                nonlocal replaced
                inner = match.group(1)
                if not (
                    ExpressionValidator.is_valid_math_characters(inner)
                    and ExpressionValidator.is_potential_expression(inner)
                ):
                    return match.group(0)
                replacement = self.rewriter.rewrite(inner, self.config.paren_error_policy)
                if replacement is None:
                    return match.group(0)
                replaced = True
                return replacement

            text = INNER_GROUP_PATTERN.sub(substitute, text)
            passes += 1
            if not replaced:
                logger.debug("Groups settled after %d pass(es)", passes)
                return text

    def _replace_plain_expressions(self, text: str) -> str:
        def substitute(match: re.Match) -> str:
            replacement = self.rewriter.rewrite(match.group(0), self.config.plain_error_policy)
            return match.group(0) if replacement is None else replacement

        return PLAIN_EXPRESSION_PATTERN.sub(substitute, text)
