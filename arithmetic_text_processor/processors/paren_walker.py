"""Resolve parenthesized expressions, innermost first."""
from typing import List

from arithmetic_text_processor.common.config import ProcessorConfig
from arithmetic_text_processor.common.logger import logger
from arithmetic_text_processor.common.validator import ExpressionValidator
from arithmetic_text_processor.processors.base import ExpressionRewriter


class ParenWalker:
    """
    Single left-to-right pass matching parentheses with a stack of positions.

    Each ')' closes the most recently opened '(' so the innermost group is always
    reduced first; its value is spliced into the text and the enclosing group sees
    the result on its own ')'. Unmatched ')' and unclosed '(' are left in place.
    """

    def __init__(self, config: ProcessorConfig, rewriter: ExpressionRewriter):
        self.config = config
        self.rewriter = rewriter

    def walk(self, text: str) -> str:
        """
        Replace every parenthesized arithmetic group by its value.

        :param str text: Document text

        :return: Text with evaluable groups reduced
        :rtype: str
        """
        open_positions: List[int] = []
        i = 0

        while i < len(text):
            char = text[i]
            if char == "(":
                open_positions.append(i)
                i += 1
                continue
            if char != ")":
                i += 1
                continue

            if not open_positions:
                logger.debug("Skipping unmatched ')' at position %d", i)
                i += 1
                continue

            start = open_positions.pop()
            inner = text[start + 1:i]
            if not ExpressionValidator.is_potential_expression(inner):
                i += 1
                continue

            replacement = self.rewriter.rewrite(inner, self.config.paren_error_policy)
            if replacement is None:
                i += 1
                continue

            text = text[:start] + replacement + text[i + 1:]
            # Resume right after the value, already reduced text is not rescanned
            i = start + len(replacement)

        if open_positions:
            logger.debug("Leaving %d unclosed '(' in place", len(open_positions))
        return text
