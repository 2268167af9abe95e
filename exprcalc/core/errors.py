"""
Error types raised by the calculation pipeline.

Every failure is an ordinary, reportable outcome: the first error raised by a
stage stops the pipeline and reaches the caller unchanged.
"""
from typing import Optional

from exprcalc.core.tokens import Token, TokenCategory


class CalculatorError(ValueError):
    """Base exception for all calculator errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCharacter(CalculatorError):
    """Raised when the input contains a character outside the grammar."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class EmptyStatement(CalculatorError):
    """Raised when there is nothing to evaluate."""

    def __init__(self):
        super().__init__("Empty statement")


class InvalidTokenSequence(CalculatorError):
    """
    Raised when two adjacent tokens break the grammar.

    ``previous_token`` is None when the offending token is the first one and
    the previous context is the implicit opening group.
    """

    def __init__(
        self,
        previous: TokenCategory,
        previous_token: Optional[Token],
        token: Token,
        position: int,
    ):
        self.previous = previous
        self.previous_token = previous_token
        self.token = token
        self.position = position
        after = (f"'{previous_token}'" if previous_token is not None
                 else "start of expression")
        super().__init__(
            f"Unexpected '{token}' ({token.category.value}) after {after} "
            f"({previous.value}) at token {position}")


class ParenthesisMismatch(CalculatorError):
    """Base for unbalanced parentheses."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(message)


class UnclosedParenthesis(ParenthesisMismatch):
    """Raised when a '(' is never closed."""

    def __init__(self, position: int):
        super().__init__(
            f"Parenthesis opened at token {position} is never closed", position)


class UnmatchedClosingParenthesis(ParenthesisMismatch):
    """Raised when a ')' has no corresponding '('."""

    def __init__(self, position: int):
        super().__init__(
            f"Closing parenthesis at token {position} has no matching '('",
            position)


class IncompleteExpression(CalculatorError):
    """Raised when the input ends where an operand is required."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Expected a number or '(' at token {position}, "
                         "found end of expression")


class UnexpectedToken(CalculatorError):
    """Raised when a token appears where an operand is required."""

    def __init__(self, token: Token, position: int):
        self.token = token
        self.position = position
        super().__init__(
            f"Expected a number or '(' at token {position}, found '{token}'")


class NestingTooDeep(CalculatorError):
    """Raised when parentheses nest beyond the configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Parentheses nested deeper than {limit} levels")


class DivideByZero(CalculatorError):
    """Raised when the right operand of '/' evaluates to zero."""

    def __init__(self):
        super().__init__("Division by zero")


class NumericOverflow(CalculatorError):
    """Raised when a literal or intermediate result leaves the integer range."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(
            f"Value {value} does not fit in a signed {bits}-bit integer")
