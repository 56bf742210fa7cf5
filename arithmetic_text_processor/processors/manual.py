"""Hand-written scanner strategy."""
from typing import Optional

from arithmetic_text_processor.common.config import ProcessorConfig
from arithmetic_text_processor.processors.base import ExpressionProcessor
from arithmetic_text_processor.processors.paren_walker import ParenWalker
from arithmetic_text_processor.processors.plain_scanner import PlainScanner


class ManualExpressionProcessor(ExpressionProcessor):
    """
    Character-by-character processor, no regular expressions involved.

    Supports +, -, *, /, nested parentheses, negative numbers and decimal values.
    """

    def __init__(self, config: Optional[ProcessorConfig] = None):
        super().__init__(config)
        self.paren_walker = ParenWalker(self.config, self.rewriter)
        self.plain_scanner = PlainScanner(self.config, self.rewriter)

    def _process(self, text: str) -> str:
        return self.plain_scanner.scan(self.paren_walker.walk(text))
