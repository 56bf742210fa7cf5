"""End-to-end tests shared by the manual and regex processors."""
import pytest

from arithmetic_text_processor.common.config import ErrorPolicy, ProcessingMode, ProcessorConfig
from arithmetic_text_processor.processors.base import ExpressionProcessor
from arithmetic_text_processor.processors.factory import create_processor
from arithmetic_text_processor.processors.manual import ManualExpressionProcessor
from arithmetic_text_processor.processors.regex import RegexExpressionProcessor


@pytest.fixture(params=[ProcessingMode.MANUAL, ProcessingMode.REGEX], ids=lambda m: m.value)
def processor(request) -> ExpressionProcessor:
    """Run each test against both strategies."""
    return create_processor(ProcessorConfig(mode=request.param))


@pytest.mark.parametrize("text,expected", [
    ("The result is 2 + 2.", "The result is 4."),
    ("Pi is about 2.14 + 1.", "Pi is about 3.14."),
    ("The sum is -5 + 3.", "The sum is -2."),
    ("The result is (2 + 2).", "The result is 4."),
    ("Expression: (2 + 3 * (4 - 1))", "Expression: 11"),
    ("Nested: ((1 + 2) * (3 + 4))", "Nested: 21"),
    ("Price: (3.5 * 2)", "Price: 7"),
    ("Balance: (-2 + -3)", "Balance: -5"),
    ("Quotient: (10 / 2)", "Quotient: 5"),
    ("Unclosed parentheses: (3 + (4 - 2)", "Unclosed parentheses: (5"),
    ("Unclosed parentheses: (test text (3 + (4 - 2) words)", "Unclosed parentheses: (test text (5 words)"),
    ("First: 1 + 2, Second: (2 * 3)", "First: 3, Second: 6"),
    ("Area: 3.5 * 2, Perimeter: 2 * (3.5 + 2).", "Area: 7, Perimeter: 11."),
    ("The value is 10+5.", "The value is 15."),
    ("The value is   7   -   2   .", "The value is   5   ."),
    ("The result is 2 + 2... Amazing!", "The result is 4... Amazing!"),
])
def test_process_rewrites_expressions(processor, text, expected):
    """Expressions in prose are replaced by their values."""
    assert processor.process(text) == expected


@pytest.mark.parametrize("text", [
    "Non-mathematical expression: test + words",
    "Test expression inside (parentheses)",
    "Non-mathematical expression: (test + words)",
    "There is nothing to compute.",
])
def test_process_leaves_prose_unchanged(processor, text):
    """Text without arithmetic round-trips."""
    assert processor.process(text) == text


def test_process_division_by_zero(processor):
    """Division by zero surfaces as an error marker."""
    actual = processor.process("Failing: (5 / 0)")
    assert "[ERROR" in actual
    assert "Division by zero" in actual


def test_process_floating_point_precision(processor):
    """Floating point results are shown as computed."""
    assert "0.3" in processor.process("Total: (0.1 + 0.2)")


@pytest.mark.parametrize("text", ["", None])
def test_process_empty_input(processor, text):
    """Empty or missing input is returned unchanged."""
    assert processor.process(text) == text


def test_process_multiline_document(processor):
    """Each line is rewritten independently."""
    text = "Line one: 1 + 1.\nLine two: (2 * (3 + 1)).\nLine three: nothing.\n"
    expected = "Line one: 2.\nLine two: 8.\nLine three: nothing.\n"
    assert processor.process(text) == expected


@pytest.mark.parametrize("text", [
    "The result is 2 + 2.",
    "Nested: ((1 + 2) * (3 + 4))",
    "Unclosed parentheses: (3 + (4 - 2)",
])
def test_process_is_idempotent_on_results(processor, text):
    """Processing a processed document changes nothing."""
    once = processor.process(text)
    assert processor.process(once) == once


def test_process_plain_leave_policy(processor):
    """Both strategies honour the plain error policy."""
    config = processor.config.model_copy(update={"plain_error_policy": ErrorPolicy.LEAVE})
    assert create_processor(config).process("Failing: (5 / 0)") == "Failing: (5 / 0)"


def test_process_paren_marker_policy(processor):
    """Both strategies honour the paren error policy."""
    config = processor.config.model_copy(update={"paren_error_policy": ErrorPolicy.MARKER})
    assert create_processor(config).process("Failing: (5 / 0).") == "Failing: [ERROR: Division by zero]."


def test_processor_without_parentheses_matches_plain_scan():
    """On text without parentheses the manual processor only runs the plain scan."""
    processor = ManualExpressionProcessor()
    text = "Sum 1 + 2 and 3 * 4, then 10 / 4."
    assert processor.process(text) == processor.plain_scanner.scan(text) == "Sum 3 and 12, then 2.5."


def test_factory_selects_strategy():
    """The factory maps each mode to its processor class."""
    assert isinstance(create_processor(), ManualExpressionProcessor)
    assert isinstance(create_processor(ProcessorConfig(mode="regex")), RegexExpressionProcessor)


def test_regex_groups_settle():
    """Nested groups need several substitution passes."""
    processor = RegexExpressionProcessor()
    assert processor._reduce_groups("(((1 + 1) * 2) + 1)") == "5"
