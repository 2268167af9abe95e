"""Build the LangGraph calculation pipeline."""
from langgraph.graph import StateGraph, END, START
from exprcalc.graph.state import CalculationState
from exprcalc.graph.nodes import (
    tokenize_node, validate_node,
    build_node, evaluate_node
)


def _continue_to(next_node: str):
    """Route to the next stage, or stop at the first recorded error."""
    def route(state: CalculationState) -> str:
        if state.get("error") is not None:
            return END
        return next_node
    return route


def build_graph():
    """Build and return the compiled calculation graph."""
    graph = StateGraph(CalculationState)

    graph.add_node("tokenize", tokenize_node)
    graph.add_node("validate", validate_node)
    graph.add_node("build", build_node)
    graph.add_node("evaluate", evaluate_node)

    graph.add_edge(START, "tokenize")
    graph.add_conditional_edges(
        "tokenize", _continue_to("validate"), ["validate", END])
    graph.add_conditional_edges(
        "validate", _continue_to("build"), ["build", END])
    graph.add_conditional_edges(
        "build", _continue_to("evaluate"), ["evaluate", END])
    graph.add_edge("evaluate", END)

    return graph.compile()
