"""Local adjacency validation of a token sequence."""
import logging
from types import MappingProxyType
from typing import Optional, Sequence

from exprcalc.core.errors import EmptyStatement, InvalidTokenSequence
from exprcalc.core.tokens import Token, TokenCategory

logger = logging.getLogger(__name__)

# Categories allowed to directly follow each category
ALLOWED_SUCCESSORS = MappingProxyType({
    TokenCategory.NUMBER_LIKE: frozenset(
        {TokenCategory.OPERATOR_LIKE, TokenCategory.GROUP_CLOSE}),
    TokenCategory.OPERATOR_LIKE: frozenset(
        {TokenCategory.NUMBER_LIKE, TokenCategory.GROUP_OPEN}),
    TokenCategory.GROUP_OPEN: frozenset(
        {TokenCategory.NUMBER_LIKE, TokenCategory.GROUP_OPEN}),
    TokenCategory.GROUP_CLOSE: frozenset(
        {TokenCategory.GROUP_CLOSE, TokenCategory.OPERATOR_LIKE}),
})


def validate(tokens: Sequence[Token]) -> None:
    """
    Check that every adjacent pair of tokens is allowed by the grammar.

    The sequence is treated as if an opening group preceded it. Parenthesis
    balance is not checked here.

    Raises:
        EmptyStatement: when there are no tokens
        InvalidTokenSequence: on the first pair that breaks the rule
    """
    if not tokens:
        raise EmptyStatement()

    previous = TokenCategory.GROUP_OPEN
    previous_token: Optional[Token] = None
    for position, token in enumerate(tokens):
        current = token.category
        if current not in ALLOWED_SUCCESSORS[previous]:
            logger.debug(
                f"Rejected {current.value} after {previous.value} at {position}")
            raise InvalidTokenSequence(previous, previous_token, token, position)
        previous, previous_token = current, token

    logger.debug(f"Validated {len(tokens)} tokens")
