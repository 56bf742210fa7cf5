"""
Command line entrypoint.

This script:
- Reads a document (plain text or archive)
- Rewrites every arithmetic expression with its value, using the selected strategy
- Writes the rewritten document to the output path

Usage:
    arithmetic-text-processor <input-path> <output-path> <manual|regex>
"""

import argparse
from pathlib import Path
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, FilePath, ValidationError

from arithmetic_text_processor.common.config import ProcessingMode, ProcessorConfig
from arithmetic_text_processor.common.logger import LOG_LEVEL_ENV, logger, set_log_level
from arithmetic_text_processor.documents.reader import DocumentReader
from arithmetic_text_processor.documents.writer import DocumentWriter
from arithmetic_text_processor.processors.factory import create_processor


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    input_path : FilePath
        Existing document to process.
    output_path : Path
        Where the rewritten document is written.
    mode : ProcessingMode
        Scanner strategy, "manual" or "regex" (case-insensitive).
    log_level : Optional[str]
        Level of the project logger.
    """

    input_path: FilePath
    output_path: Path
    mode: ProcessingMode
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = None

    def to_config(self) -> ProcessorConfig:
        return ProcessorConfig(mode=self.mode)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Replace arithmetic expressions in a text document with their values"
    )

    parser.add_argument("input_path", help="Path to the document (.txt, .zip, .tar.xz or .7z)")
    parser.add_argument("output_path", help="Path of the rewritten document")
    parser.add_argument(
        "mode",
        help="manual - hand-written scanner, regex - pattern-match scanner",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging verbosity (default: ${{{LOG_LEVEL_ENV}}} or WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            input_path=args.input_path,
            output_path=args.output_path,
            mode=args.mode.strip().lower(),
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def run(cli_args: CliArgs) -> None:
    """
    Process the input document and write the result.

    :param CliArgs cli_args: Validated arguments
    :raises OSError: If a file cannot be read or written
    :raises ValueError: If an archive holds no .txt document
    """
    processor = create_processor(cli_args.to_config())
    content = DocumentReader().read(cli_args.input_path)
    DocumentWriter().write(cli_args.output_path, processor.process(content))
    logger.info("✅ File processed using mode '%s'", cli_args.mode.value)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the console script.

    Exits with status 0 on success, 1 on I/O errors and 2 on invalid arguments.
    """
    cli_args = parse_args(argv)
    if cli_args.log_level is not None:
        set_log_level(cli_args.log_level)

    try:
        run(cli_args)
    except (OSError, ValueError) as exc:
        logger.error("❌ Could not process %s: %s", cli_args.input_path, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
