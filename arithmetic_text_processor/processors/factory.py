"""Select the processor implementation for a processing mode."""
from typing import Dict, Optional, Type

from arithmetic_text_processor.common.config import ProcessingMode, ProcessorConfig
from arithmetic_text_processor.processors.base import ExpressionProcessor
from arithmetic_text_processor.processors.manual import ManualExpressionProcessor
from arithmetic_text_processor.processors.regex import RegexExpressionProcessor


PROCESSORS: Dict[ProcessingMode, Type[ExpressionProcessor]] = {
    ProcessingMode.MANUAL: ManualExpressionProcessor,
    ProcessingMode.REGEX: RegexExpressionProcessor,
}


def create_processor(config: Optional[ProcessorConfig] = None) -> ExpressionProcessor:
    """
    Build the processor matching ``config.mode``.

    :param config: Processing settings, defaults to the manual strategy

    :return: Ready-to-use processor
    :rtype: ExpressionProcessor
    """
    config = config or ProcessorConfig()
    return PROCESSORS[config.mode](config)
