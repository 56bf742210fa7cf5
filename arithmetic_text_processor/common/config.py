"""Processing configuration."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProcessingMode(str, Enum):
    """Front-end strategy used to find expressions in the text."""

    MANUAL = "manual"
    REGEX = "regex"


class ErrorPolicy(str, Enum):
    """What a scanner writes in place of an expression that fails to evaluate."""

    MARKER = "marker"
    LEAVE = "leave"


class ProcessorConfig(BaseModel):
    """
    Settings shared by every expression processor.

    Defaults leave failing parenthesized groups untouched, so that ordinary
    parentheticals survive, and replace failing bare expressions with an error
    marker such as "[ERROR: Division by zero]".
    """

    # Read-only: a processor may be shared between calls and threads
    model_config = ConfigDict(frozen=True)

    mode: ProcessingMode = Field(default=ProcessingMode.MANUAL, description="Scanner strategy")
    paren_error_policy: ErrorPolicy = Field(
        default=ErrorPolicy.LEAVE, description="Policy for groups such as '(5 / 0)'"
    )
    plain_error_policy: ErrorPolicy = Field(
        default=ErrorPolicy.MARKER, description="Policy for bare expressions such as '5 / 0'"
    )
    error_marker: str = Field(
        default="[ERROR: {message}]", description="Template of the error marker, must contain '{message}'"
    )

    @field_validator("mode", mode="before")
    def mode_is_case_insensitive(cls, v):
        """Accept 'Manual' or 'REGEX' as well as the lowercase values."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("error_marker")
    def marker_must_include_message(cls, v: str) -> str:
        """Ensure the marker template has a slot for the error message."""
        if "{message}" not in v:
            raise ValueError("error_marker must contain '{message}'")
        return v

    def render_error(self, message: str) -> str:
        """Fill the error marker template."""
        return self.error_marker.replace("{message}", message)
