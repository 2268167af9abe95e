import time
from typing import Any, Callable, Dict

from exprcalc.core.builder import build
from exprcalc.core.errors import CalculatorError
from exprcalc.core.evaluator import evaluate
from exprcalc.core.lexer import tokenize
from exprcalc.core.tree import to_infix
from exprcalc.core.validator import validate
from exprcalc.graph.state import CalculationState
from exprcalc.observability.telemetry import StageName, log_stage_entry, log_stage_exit


def _run_stage(state: CalculationState, stage: StageName,
               step: Callable[[], Dict[str, Any]],
               describe: Callable[[Dict[str, Any]], str]) -> CalculationState:
    """Run one stage, recording its outcome in the state and the trace."""
    log_stage_entry(stage, state["expression"])
    start = time.perf_counter()
    try:
        update = step()
    except CalculatorError as e:
        log_stage_exit(stage, (time.perf_counter() - start) * 1000, error=e)
        state["error"] = e
        return state
    log_stage_exit(stage, (time.perf_counter() - start) * 1000,
                   output=describe(update))
    state.update(update)
    return state


def tokenize_node(state: CalculationState) -> CalculationState:
    """Scan the expression text into tokens."""
    return _run_stage(
        state, StageName.TOKENIZE,
        lambda: {"tokens": tokenize(state["expression"])},
        lambda update: " ".join(str(t) for t in update["tokens"]))


def validate_node(state: CalculationState) -> CalculationState:
    """Check token adjacency before building the tree."""
    def step():
        validate(state["tokens"])
        return {}
    return _run_stage(state, StageName.VALIDATE, step,
                      lambda update: f"{len(state['tokens'])} tokens ok")


def build_node(state: CalculationState) -> CalculationState:
    """Build the expression tree from validated tokens."""
    return _run_stage(
        state, StageName.BUILD,
        lambda: {"tree": build(state["tokens"])},
        lambda update: to_infix(update["tree"]))


def evaluate_node(state: CalculationState) -> CalculationState:
    """Reduce the tree to its integer value."""
    return _run_stage(
        state, StageName.EVALUATE,
        lambda: {"result": evaluate(state["tree"])},
        lambda update: str(update["result"]))
