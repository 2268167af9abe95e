"""Tokens produced by the lexer and their grammatical categories."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(str, Enum):
    """Kinds of lexical tokens."""
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class TokenCategory(str, Enum):
    """Coarse class of a token, used for adjacency validation."""
    NUMBER_LIKE = "number_like"
    OPERATOR_LIKE = "operator_like"
    GROUP_OPEN = "group_open"
    GROUP_CLOSE = "group_close"


_CATEGORY_BY_KIND = {
    TokenKind.NUMBER: TokenCategory.NUMBER_LIKE,
    TokenKind.PLUS: TokenCategory.OPERATOR_LIKE,
    TokenKind.MINUS: TokenCategory.OPERATOR_LIKE,
    TokenKind.STAR: TokenCategory.OPERATOR_LIKE,
    TokenKind.SLASH: TokenCategory.OPERATOR_LIKE,
    TokenKind.LEFT_PAREN: TokenCategory.GROUP_OPEN,
    TokenKind.RIGHT_PAREN: TokenCategory.GROUP_CLOSE,
}


@dataclass(frozen=True)
class Token:
    """A single lexical token. ``value`` is set only for numbers."""
    kind: TokenKind
    value: Optional[int] = None

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenKind.NUMBER, value)

    @property
    def category(self) -> TokenCategory:
        return _CATEGORY_BY_KIND[self.kind]

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return str(self.value)
        return self.kind.value


PLUS = Token(TokenKind.PLUS)
MINUS = Token(TokenKind.MINUS)
STAR = Token(TokenKind.STAR)
SLASH = Token(TokenKind.SLASH)
LEFT_PAREN = Token(TokenKind.LEFT_PAREN)
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN)
