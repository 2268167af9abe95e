"""Lexical scanning of expression text into tokens."""
import logging
from typing import List, Optional

from exprcalc.config import INTEGER_BITS, INTEGER_MAX
from exprcalc.core.errors import InvalidCharacter, NumericOverflow
from exprcalc.core.tokens import (
    LEFT_PAREN, MINUS, PLUS, RIGHT_PAREN, SLASH, STAR, Token,
)

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"

_SYMBOLS = {
    "+": PLUS,
    "-": MINUS,
    "*": STAR,
    "/": SLASH,
    "(": LEFT_PAREN,
    ")": RIGHT_PAREN,
}


def _append_digit(accumulator: Optional[int], digit: int) -> int:
    number = (accumulator or 0) * 10 + digit
    if number > INTEGER_MAX:
        raise NumericOverflow(number, INTEGER_BITS)
    return number


def tokenize(text: str) -> List[Token]:
    """
    Convert expression text into a flat list of tokens.

    Digits are read greedily into a single number; spaces are skipped and
    every other character must be an operator or a parenthesis.

    Args:
        text: Expression such as "1 + 232*32-5/2"

    Returns:
        List of tokens in source order

    Raises:
        InvalidCharacter: on any character outside the grammar
        NumericOverflow: when a literal exceeds the integer range
    """
    tokens: List[Token] = []
    accumulator: Optional[int] = None

    for position, char in enumerate(text):
        if char in _DIGITS:
            accumulator = _append_digit(accumulator, ord(char) - ord("0"))
            continue

        if accumulator is not None:
            tokens.append(Token.number(accumulator))
            accumulator = None

        if char == " ":
            continue
        symbol = _SYMBOLS.get(char)
        if symbol is None:
            logger.debug(f"Invalid character {char!r} at {position}")
            raise InvalidCharacter(char, position)
        tokens.append(symbol)

    if accumulator is not None:
        tokens.append(Token.number(accumulator))

    logger.debug(f"Tokenized {len(tokens)} tokens from '{text[:50]}'")
    return tokens
