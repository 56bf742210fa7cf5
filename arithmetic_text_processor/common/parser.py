"""Parse and evaluate arithmetic expressions safely."""
from typing import List

from arithmetic_text_processor.common.errors import (
    DivisionByZeroError,
    InvalidExpressionError,
    MismatchedParenError,
    UnknownSymbolError,
)
from arithmetic_text_processor.common.math_utils import (
    OPERATORS,
    format_result,
    is_digit,
    is_number,
    is_operator,
    precedence,
)
from arithmetic_text_processor.common.models import Token, TokenType


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Safe, deterministic computation

    Algorithm:
        1. Tokenize character by character, fusing a unary '-' into the following number
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    The Shunting-yard algorithm converts an infix expression into Reverse Polish Notation (RPN), allowing safe, stack-based evaluation without parentheses.
    It handles operator precedence by temporarily storing operators on a stack and outputting them in the correct order.

    Examples:
        - Infix expression (standard notation): (1 + 2) * -3
        - Corresponding Reverse Polish Notation (RPN): 1 2 + -3 *

    """

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        Whitespace is optional ("3+4*2" and "3 + 4 * 2" give the same tokens). A '-' found at the
        start, after an operator or after '(' is a sign and becomes part of the next number.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[Token]
        :raises UnknownSymbolError: If a character is outside the expression grammar
        """
        tokens: List[Token] = []
        number: List[str] = []
        # At the start, after an operator or after '(' a '-' is a sign
        expect_unary = True

        def flush() -> None:
            if number:
                tokens.append(Token.number("".join(number)))
                number.clear()

        for char in expr:
            if char.isspace():
                continue

            if is_digit(char) or char == ".":
                number.append(char)
                expect_unary = False
            elif char == "-" and expect_unary:
                number.append(char)
                expect_unary = False
            elif is_operator(char):
                flush()
                tokens.append(Token.op(char))
                expect_unary = True
            elif char in "()":
                flush()
                tokens.append(Token.paren(char))
                expect_unary = char == "("
            else:
                raise UnknownSymbolError(char)

        flush()
        return tokens

    @staticmethod
    def to_rpn(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

        All operators are left-associative.

        :param List[Token] tokens: List of arithmetic tokens in infix order

        :return: List of number and operator tokens in RPN order
        :rtype: List[Token]
        :raises UnknownSymbolError: If a number token is not a valid literal
        :raises MismatchedParenError: If parentheses do not balance
        """
        output: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if token.type is TokenType.NUMBER:
                if not is_number(token.value):
                    raise UnknownSymbolError(token.value)
                # Numbers are added directly to the output
                output.append(token)
            elif token.type is TokenType.OPERATOR:
                # Pop operators from stack with higher or equal precedence
                prec = precedence(token.value)
                while (
                    stack
                    and stack[-1].type is TokenType.OPERATOR
                    and precedence(stack[-1].value) >= prec
                ):
                    output.append(stack.pop())
                stack.append(token)
            elif token.type is TokenType.LPAREN:
                stack.append(token)
            else:
                # Closing parenthesis: unwind until the matching '('
                while stack and stack[-1].type is not TokenType.LPAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParenError()
                stack.pop()

        # Append remaining operators in reverse order (stack top first)
        while stack:
            top = stack.pop()
            if top.type is not TokenType.OPERATOR:
                raise MismatchedParenError()
            output.append(top)
        return output

    @staticmethod
    def evaluate_rpn(rpn: List[Token]) -> float:
        """
        Evaluate a list of tokens in Reverse Polish Notation.

        :param List[Token] rpn: Number and operator tokens in RPN order

        :return: Computed result as float
        :rtype: float
        :raises InvalidExpressionError: If operands are missing or left over
        :raises DivisionByZeroError: If a divisor is exactly zero
        """
        stack: List[float] = []
        for token in rpn:
            if token.type is TokenType.NUMBER:
                stack.append(float(token.value))
                continue

            if token.type is not TokenType.OPERATOR:
                raise InvalidExpressionError(f"Invalid expression (unexpected token): {token.value}")

            # Operator requires two operands
            if len(stack) < 2:
                raise InvalidExpressionError("Invalid expression (not enough operands)")
            b: float = stack.pop()
            a: float = stack.pop()
            if token.value == "/" and b == 0.0:
                raise DivisionByZeroError()
            stack.append(OPERATORS[token.value][1](a, b))

        if len(stack) != 1:
            raise InvalidExpressionError("Invalid expression (remaining operands)")

        return stack[0]

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises EvaluationError: If expression is invalid or malformed
        """
        tokens: List[Token] = ExpressionParser.tokenize(expr)
        rpn: List[Token] = ExpressionParser.to_rpn(tokens)
        return ExpressionParser.evaluate_rpn(rpn)

    @staticmethod
    def evaluate_to_text(expr: str) -> str:
        """
        Evaluate an expression and format the value as it appears in rewritten text.

        :param str expr: Arithmetic expression string

        :return: Formatted result, e.g. "4" or "3.14"
        :rtype: str
        :raises EvaluationError: If expression is invalid or malformed
        """
        return format_result(ExpressionParser.evaluate(expr))
