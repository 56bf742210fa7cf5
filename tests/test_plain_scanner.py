"""Test class PlainScanner."""
import pytest

from arithmetic_text_processor.common.config import ErrorPolicy, ProcessorConfig
from arithmetic_text_processor.processors.base import ExpressionRewriter
from arithmetic_text_processor.processors.plain_scanner import PlainScanner


def make_scanner(config: ProcessorConfig = None) -> PlainScanner:
    config = config or ProcessorConfig()
    return PlainScanner(config, ExpressionRewriter(config))


@pytest.mark.parametrize("text,expected", [
    ("The result is 2 + 2.", "The result is 4."),
    ("Pi is about 2.14 + 1.", "Pi is about 3.14."),
    ("The result is 2 + 2... Amazing!", "The result is 4... Amazing!"),
    ("The value is 10+5.", "The value is 15."),
    ("The value is   7   -   2   .", "The value is   5   ."),
    ("The sum is -5 + 3.", "The sum is -2."),
    ("First: 1 + 2, Second: 6", "First: 3, Second: 6"),
    ("2 + 2 apples", "4 apples"),
    ("1 + 1\n2 * 3", "2\n6"),
    ("a\t3 * 3\tb", "a\t9\tb"),
])
def test_scan_replaces_bare_expressions(text, expected):
    """Bare expressions are replaced, trailing blanks and punctuation are kept."""
    assert make_scanner().scan(text) == expected


@pytest.mark.parametrize("text", [
    "There is nothing to compute.",
    "Non-mathematical expression: test + words",
    "Balance: -5",
    "Version 3.14 is out.",
    "Score: 3 - x",
    "",
])
def test_scan_leaves_text_without_expressions(text):
    """Runs that are not expressions are emitted verbatim."""
    assert make_scanner().scan(text) == text


def test_scan_division_by_zero_marker():
    """Failing bare expressions are replaced by an error marker by default."""
    assert make_scanner().scan("Failing: (5 / 0)") == "Failing: ([ERROR: Division by zero])"


def test_scan_leave_policy():
    """With the leave policy, failing bare expressions stay unchanged."""
    scanner = make_scanner(ProcessorConfig(plain_error_policy=ErrorPolicy.LEAVE))
    assert scanner.scan("Failing: 5 / 0 today") == "Failing: 5 / 0 today"


def test_scan_invalid_expression_marker():
    """Expressions that pass the filter but do not evaluate get a marker."""
    assert make_scanner().scan("Oops 2 + + 3.") == "Oops [ERROR: Invalid expression (not enough operands)]."


def test_measure_run_stops_at_punctuation():
    """The last meaningful index excludes blanks before the terminator."""
    text = "2 + 2  , done"
    end, last_meaningful, has_operator = PlainScanner._measure_run(text, 0)
    assert (end, last_meaningful, has_operator) == (7, 4, True)
    assert text[last_meaningful + 1:end] == "  "
