from typing import TypedDict, List, Optional

from exprcalc.core.errors import CalculatorError
from exprcalc.core.tokens import Token
from exprcalc.core.tree import ExpressionNode


class CalculationState(TypedDict):
    expression: str
    tokens: List[Token]
    tree: Optional[ExpressionNode]
    result: Optional[int]
    error: Optional[CalculatorError]


def build_initial_state(expression: str) -> CalculationState:
    state = CalculationState(
        expression=expression,
        tokens=[],
        tree=None,
        result=None,
        error=None)
    return state
