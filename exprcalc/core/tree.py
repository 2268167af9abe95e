"""Binary expression tree built by the parser and reduced by the evaluator."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple, Union

from exprcalc.core.tokens import Token, TokenKind


class Operator(str, Enum):
    """Binary arithmetic operators."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_token(cls, token: Token) -> "Operator":
        if token.kind not in _OPERATOR_KINDS:
            raise ValueError(f"'{token}' is not an operator")
        return cls(token.kind.value)


_OPERATOR_KINDS = {TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH}


@dataclass(frozen=True)
class Leaf:
    value: int


@dataclass(frozen=True)
class Internal:
    left: "ExpressionNode"
    operator: Operator
    right: "ExpressionNode"


ExpressionNode = Union[Leaf, Internal]


def walk_postorder(node: ExpressionNode) -> Iterator[ExpressionNode]:
    """Yield nodes left subtree first, then right, then the node itself.

    Uses an explicit stack so deep operator chains do not hit the
    interpreter recursion limit.
    """
    stack: List[Tuple[ExpressionNode, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, Leaf) or expanded:
            yield current
            continue
        stack.append((current, True))
        stack.append((current.right, False))
        stack.append((current.left, False))


def to_infix(node: ExpressionNode) -> str:
    """Render a tree as a fully parenthesized infix string."""
    rendered: List[str] = []
    for current in walk_postorder(node):
        if isinstance(current, Leaf):
            rendered.append(str(current.value))
        else:
            right = rendered.pop()
            left = rendered.pop()
            rendered.append(f"({left} {current.operator.value} {right})")
    return rendered.pop()


def depth(node: ExpressionNode) -> int:
    """Number of levels in the tree; a single leaf has depth 1."""
    depths: List[int] = []
    for current in walk_postorder(node):
        if isinstance(current, Leaf):
            depths.append(1)
        else:
            right = depths.pop()
            left = depths.pop()
            depths.append(max(left, right) + 1)
    return depths.pop()
