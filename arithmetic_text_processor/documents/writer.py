"""Write processed documents."""
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_text_processor.common.logger import logger


class DocumentWriter(BaseModel):
    """Write the rewritten document, creating missing parent directories."""

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Text encoding of the output file")

    def write(self, output_file: Path, content: str) -> None:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding=self.encoding)
        logger.info("📝 Wrote %d characters to %s", len(content), output_file)
