"""Public entry points for embedding the processor in other programs."""
from typing import Optional

from arithmetic_text_processor.common.config import ProcessorConfig
from arithmetic_text_processor.common.errors import EvaluationError
from arithmetic_text_processor.common.models import EvaluationResult
from arithmetic_text_processor.common.parser import ExpressionParser
from arithmetic_text_processor.processors.factory import create_processor


def process(text: Optional[str], config: Optional[ProcessorConfig] = None) -> Optional[str]:
    """
    Rewrite a document, replacing every arithmetic expression with its value.

    Never raises on malformed expressions: they are left unchanged or replaced
    with an error marker according to ``config``.

    >>> process("Nested: ((1 + 2) * (3 + 4))")
    'Nested: 21'

    :param text: Input document
    :param config: Processing settings, defaults to the manual strategy

    :return: Rewritten document
    """
    return create_processor(config).process(text)


def evaluate(expr: str) -> EvaluationResult:
    """
    Evaluate a single arithmetic expression.

    >>> evaluate("2 * (3 + 4)").result
    '14'
    >>> evaluate("5 / 0").error
    <ErrorKind.DIVISION_BY_ZERO: 'division_by_zero'>

    :param str expr: Arithmetic expression

    :return: Formatted value or error kind
    :rtype: EvaluationResult
    """
    try:
        return EvaluationResult.success(expr, ExpressionParser.evaluate_to_text(expr))
    except EvaluationError as exc:
        return EvaluationResult.failure(expr, exc)
