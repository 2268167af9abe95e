"""Reduction of an expression tree to a single integer."""
import logging
import operator
from typing import List

from exprcalc.config import INTEGER_BITS, INTEGER_MAX, INTEGER_MIN
from exprcalc.core.errors import DivideByZero, NumericOverflow
from exprcalc.core.tree import ExpressionNode, Leaf, Operator, walk_postorder

logger = logging.getLogger(__name__)


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero, like machine division."""
    if right == 0:
        raise DivideByZero()
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_OPERATIONS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: _truncating_div,
}


def _checked(value: int) -> int:
    if value < INTEGER_MIN or value > INTEGER_MAX:
        raise NumericOverflow(value, INTEGER_BITS)
    return value


def evaluate(node: ExpressionNode) -> int:
    """
    Evaluate a tree post-order, left operand before right.

    Raises:
        DivideByZero: when a '/' has a right operand of 0
        NumericOverflow: when an intermediate result leaves the integer range
    """
    values: List[int] = []
    for current in walk_postorder(node):
        if isinstance(current, Leaf):
            values.append(_checked(current.value))
            continue
        right = values.pop()
        left = values.pop()
        values.append(_checked(_OPERATIONS[current.operator](left, right)))

    result = values.pop()
    logger.debug(f"Evaluated to {result}")
    return result
