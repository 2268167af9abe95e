"""Single entry point composing lexer, validator, tree builder and evaluator."""
from exprcalc.graph.build_graph import build_graph
from exprcalc.graph.state import CalculationState, build_initial_state
from exprcalc.observability.telemetry import clear_trace

_graph = None


def get_graph():
    """Lazy compile the pipeline graph on first use."""
    global _graph
    if _graph is None:
        _graph = build_graph()
    return _graph


def run(expression: str) -> CalculationState:
    """Run the pipeline and return the final state, errors included.

    The stage trace only ever holds the records of the latest run.
    """
    clear_trace()
    return get_graph().invoke(build_initial_state(expression))


def calculate(expression: str) -> int:
    """
    Evaluate an integer arithmetic expression.

    Examples:
        >>> calculate("1 + 3 * (3 - 1) / 2")
        4
        >>> calculate("5/0")
        Traceback (most recent call last):
        ...
        exprcalc.core.errors.DivideByZero: Division by zero

    Raises:
        CalculatorError: the first error raised by any stage, unchanged
    """
    state = run(expression)
    if state["error"] is not None:
        raise state["error"]
    return state["result"]
