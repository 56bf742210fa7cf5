"""Test class ProcessorConfig."""
from pydantic import ValidationError
import pytest

from arithmetic_text_processor.common.config import ErrorPolicy, ProcessingMode, ProcessorConfig


def test_config_defaults() -> None:
    """Groups are left unchanged and bare expressions get a marker by default."""
    config = ProcessorConfig()
    assert config.mode is ProcessingMode.MANUAL
    assert config.paren_error_policy is ErrorPolicy.LEAVE
    assert config.plain_error_policy is ErrorPolicy.MARKER
    assert config.render_error("Division by zero") == "[ERROR: Division by zero]"


@pytest.mark.parametrize("mode,expected", [
    ("manual", ProcessingMode.MANUAL),
    ("Regex", ProcessingMode.REGEX),
    (" MANUAL ", ProcessingMode.MANUAL),
    (ProcessingMode.REGEX, ProcessingMode.REGEX),
])
def test_config_mode_is_case_insensitive(mode, expected) -> None:
    """Mode names are accepted in any case."""
    assert ProcessorConfig(mode=mode).mode is expected


def test_config_unknown_mode() -> None:
    """Unknown modes raise a ValidationError."""
    with pytest.raises(ValidationError):
        ProcessorConfig(mode="ast")


def test_config_marker_must_include_message() -> None:
    """A marker template without '{message}' is rejected."""
    with pytest.raises(ValidationError):
        ProcessorConfig(error_marker="<error>")


def test_config_custom_marker() -> None:
    """Custom templates are filled with the error message."""
    config = ProcessorConfig(error_marker="<<{message}>>")
    assert config.render_error("Invalid expression") == "<<Invalid expression>>"


def test_config_is_immutable() -> None:
    """Configuration cannot change once built."""
    config = ProcessorConfig()
    with pytest.raises(ValidationError):
        config.mode = ProcessingMode.REGEX
