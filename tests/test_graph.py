"""Tests for the calculation graph and its stage trace."""
import pytest
from exprcalc.graph.build_graph import build_graph
from exprcalc.graph.state import build_initial_state
from exprcalc.observability.telemetry import (
    StageName,
    StageEntryRecord,
    clear_trace,
    format_trace_summary,
    get_stage_exits,
    get_trace,
    get_trace_dicts,
)


@pytest.fixture(autouse=True)
def fresh_trace():
    clear_trace()
    yield
    clear_trace()


def test_graph_has_one_node_per_stage():
    """Test that the compiled graph exposes every stage."""
    graph = build_graph()
    for stage in StageName:
        assert stage.value in graph.nodes


def test_graph_execution_traces_all_stages():
    """Test that a successful run passes through every stage in order."""
    graph = build_graph()
    result = graph.invoke(build_initial_state("1 + 2 * 3"))

    assert result["result"] == 7
    exits = get_stage_exits()
    assert [r.stage for r in exits] == list(StageName)
    assert not any(r.failed for r in exits)
    assert exits[0].output == "1 + 2 * 3"
    assert exits[2].output == "(1 + (2 * 3))"
    assert exits[3].output == "7"
    assert all(r.duration_ms >= 0 for r in exits)


def test_graph_short_circuits_on_error():
    """Test that the graph stops at the stage that failed."""
    graph = build_graph()
    result = graph.invoke(build_initial_state("1 + + 2"))

    assert result["error"] is not None
    exits = get_stage_exits()
    assert [r.stage for r in exits] == [StageName.TOKENIZE, StageName.VALIDATE]
    assert exits[-1].failed
    assert exits[-1].error.startswith("InvalidTokenSequence")


def test_trace_entries_and_dicts():
    """Test trace records and their serialization."""
    build_graph().invoke(build_initial_state("5/0"))

    entries = [r for r in get_trace() if isinstance(r, StageEntryRecord)]
    assert len(entries) == 4
    assert entries[0].expression == "5/0"

    dicts = get_trace_dicts()
    assert dicts[0]["type"] == "stage_entry"
    assert dicts[-1]["type"] == "stage_exit"
    assert dicts[-1]["error"].startswith("DivideByZero")


def test_format_trace_summary():
    """Test the human-readable trace summary."""
    assert format_trace_summary() == "No trace data"

    build_graph().invoke(build_initial_state("(1"))
    summary = format_trace_summary()
    assert "=== Calculation Trace ===" in summary
    assert "EXIT: build → ERROR UnclosedParenthesis" in summary
    assert "evaluate" not in summary


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
