"""
Recursive descent construction of the expression tree.

Grammar (precedence low to high):
    expression → term (("+" | "-") term)*
    term       → factor (("*" | "/") factor)*
    factor     → NUMBER | "(" expression ")"

Both binary levels fold left-associatively, so ``1 - 2 - 3`` builds as
``(1 - 2) - 3``.
"""
import logging
from typing import Optional, Sequence

from exprcalc.config import MAX_NESTING_DEPTH
from exprcalc.core.errors import (
    IncompleteExpression,
    NestingTooDeep,
    UnclosedParenthesis,
    UnexpectedToken,
    UnmatchedClosingParenthesis,
)
from exprcalc.core.tokens import Token, TokenKind
from exprcalc.core.tree import ExpressionNode, Internal, Leaf, Operator

logger = logging.getLogger(__name__)

_ADDITIVE = {TokenKind.PLUS, TokenKind.MINUS}
_MULTIPLICATIVE = {TokenKind.STAR, TokenKind.SLASH}


class _Parser:
    """Cursor over a token sequence with one token of lookahead."""

    def __init__(self, tokens: Sequence[Token], max_depth: int) -> None:
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self.nesting = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match(self, kinds) -> Optional[Token]:
        tok = self.peek()
        if tok is not None and tok.kind in kinds:
            return self.advance()
        return None

    # -- Grammar rules --

    def parse_expression(self) -> ExpressionNode:
        result = self.parse_term()
        tok = self.match(_ADDITIVE)
        while tok is not None:
            result = Internal(result, Operator.from_token(tok), self.parse_term())
            tok = self.match(_ADDITIVE)
        return result

    def parse_term(self) -> ExpressionNode:
        result = self.parse_factor()
        tok = self.match(_MULTIPLICATIVE)
        while tok is not None:
            result = Internal(result, Operator.from_token(tok), self.parse_factor())
            tok = self.match(_MULTIPLICATIVE)
        return result

    def parse_factor(self) -> ExpressionNode:
        tok = self.peek()
        if tok is None:
            raise IncompleteExpression(self.pos)
        if tok.kind is TokenKind.NUMBER:
            self.advance()
            return Leaf(tok.value)
        if tok.kind is not TokenKind.LEFT_PAREN:
            raise UnexpectedToken(tok, self.pos)

        opened_at = self.pos
        self.advance()
        self.nesting += 1
        if self.nesting > self.max_depth:
            raise NestingTooDeep(self.max_depth)
        inner = self.parse_expression()
        self.expect_close(opened_at)
        self.nesting -= 1
        return inner

    def expect_close(self, opened_at: int) -> None:
        tok = self.peek()
        if tok is None:
            raise UnclosedParenthesis(opened_at)
        if tok.kind is not TokenKind.RIGHT_PAREN:
            raise UnexpectedToken(tok, self.pos)
        self.advance()


def build(tokens: Sequence[Token],
          max_depth: int = MAX_NESTING_DEPTH) -> ExpressionNode:
    """
    Build a precedence-respecting expression tree from validated tokens.

    Args:
        tokens: Token sequence, normally already checked by ``validate``
        max_depth: Deepest parenthesis nesting accepted

    Returns:
        Root node of the expression tree

    Raises:
        UnclosedParenthesis: a '(' is never closed
        UnmatchedClosingParenthesis: a ')' has no corresponding '('
        IncompleteExpression: input ends where an operand is required
        UnexpectedToken: a token appears where an operand is required
        NestingTooDeep: parentheses nest deeper than ``max_depth``
    """
    parser = _Parser(tokens, max_depth)
    tree = parser.parse_expression()

    leftover = parser.peek()
    if leftover is not None:
        if leftover.kind is TokenKind.RIGHT_PAREN:
            raise UnmatchedClosingParenthesis(parser.pos)
        raise UnexpectedToken(leftover, parser.pos)

    logger.debug(f"Built tree from {len(tokens)} tokens")
    return tree
