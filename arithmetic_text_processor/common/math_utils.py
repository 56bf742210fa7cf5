"""Character predicates, operator table and result formatting."""
from collections.abc import Callable as ABCCallable
import operator
import re
from typing import Callable, Tuple


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to (precedence, function)
OPERATORS: dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, operator.truediv),
}

# ASCII digits only, "\d" would also accept other Unicode digit classes
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def is_digit(char: str) -> bool:
    """Return True for an ASCII digit."""
    return len(char) == 1 and "0" <= char <= "9"


def is_operator(char: str) -> bool:
    """Return True for one of the four binary operators."""
    return char in OPERATORS


def is_number(token: str) -> bool:
    """
    Determine if a token is a numeric literal.

    Accepts an optional sign, an integer part and an optional fractional part
    (e.g. "12", "-3", "+4.5"). Forms such as ".5", "5." or "1.2.3" are rejected.

    :param str token: Token string

    :return: True if the token is a numeric literal, else False
    :rtype: bool
    """
    return NUMBER_PATTERN.fullmatch(token) is not None


def precedence(op: str) -> int:
    """Return the binding strength of an operator, 0 for anything else."""
    return OPERATORS.get(op, (0,))[0]


def is_decimal_point(text: str, index: int) -> bool:
    """
    Tell a decimal point ("3.14") apart from punctuation ("is 4.").

    :param str text: Text being scanned
    :param int index: Position of the character to check

    :return: True if ``text[index]`` is a '.' surrounded by digits
    :rtype: bool
    """
    return (
        0 < index < len(text) - 1
        and text[index] == "."
        and is_digit(text[index - 1])
        and is_digit(text[index + 1])
    )


def format_result(value: float) -> str:
    """
    Render an evaluated value.

    Integer-valued results drop the fractional part ("4" rather than "4.0"),
    any other value keeps Python's float representation, including rounding
    noise such as "0.30000000000000004" and non-finite values like "inf".

    :param float value: Evaluated value

    :return: Text that replaces the expression
    :rtype: str
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)
