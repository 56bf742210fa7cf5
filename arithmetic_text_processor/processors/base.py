"""Common behaviour of the expression processors."""
from abc import ABC, abstractmethod
from typing import Optional

from arithmetic_text_processor.common.config import ErrorPolicy, ProcessorConfig
from arithmetic_text_processor.common.errors import EvaluationError
from arithmetic_text_processor.common.logger import logger
from arithmetic_text_processor.common.parser import ExpressionParser


class ExpressionRewriter:
    """
    Turns one candidate expression into the text that replaces it.

    Shared by the parentheses walker, the plain scanner and the regex strategy so
    that every call site evaluates through the same pipeline and applies its
    error policy the same way.
    """

    def __init__(self, config: ProcessorConfig):
        self.config = config

    def rewrite(self, expr: str, policy: ErrorPolicy) -> Optional[str]:
        """
        Evaluate an expression and return its replacement text.

        :param str expr: Candidate expression
        :param ErrorPolicy policy: Behaviour when evaluation fails

        :return: The formatted value, the error marker, or None when the span must stay unchanged
        :rtype: Optional[str]
        """
        try:
            return ExpressionParser.evaluate_to_text(expr)
        except EvaluationError as exc:
            logger.warning("🧮❌ Could not evaluate %r: %s", expr, exc)
            if policy is ErrorPolicy.MARKER:
                return self.config.render_error(str(exc))
            return None


class ExpressionProcessor(ABC):
    """
    Rewrite a document, replacing each arithmetic expression with its value.

    Parenthesized groups are resolved first, innermost first, then bare
    expressions left in the text are evaluated.
    """

    def __init__(self, config: Optional[ProcessorConfig] = None):
        self.config = config or ProcessorConfig()
        self.rewriter = ExpressionRewriter(self.config)

    def process(self, text: Optional[str]) -> Optional[str]:
        """
        Rewrite a document.

        :param text: Input document; empty or None is returned unchanged

        :return: Document with expressions replaced by their values
        """
        if not text:
            return text
        logger.debug("Processing %d characters with %s", len(text), type(self).__name__)
        return self._process(text)

    @abstractmethod
    def _process(self, text: str) -> str:
        """Rewrite a non-empty document."""
