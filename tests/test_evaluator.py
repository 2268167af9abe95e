"""Unit tests for tree evaluation."""
import pytest
from exprcalc.config import INTEGER_MAX, INTEGER_MIN
from exprcalc.core.errors import DivideByZero, NumericOverflow
from exprcalc.core.evaluator import evaluate
from exprcalc.core.tree import Internal, Leaf, Operator


def node(left, op, right):
    wrap = lambda v: Leaf(v) if isinstance(v, int) else v
    return Internal(wrap(left), op, wrap(right))


def test_evaluate_leaf():
    """Test that a leaf evaluates to its value."""
    assert evaluate(Leaf(7)) == 7


def test_evaluate_basic_operations():
    """Test each operator."""
    assert evaluate(node(1, Operator.ADD, 1)) == 2
    assert evaluate(node(5, Operator.SUBTRACT, 8)) == -3
    assert evaluate(node(3, Operator.MULTIPLY, 4)) == 12
    assert evaluate(node(10, Operator.DIVIDE, 2)) == 5


def test_evaluate_division_truncates_toward_zero():
    """Test machine-style integer division."""
    assert evaluate(node(7, Operator.DIVIDE, 2)) == 3
    negative_seven = node(0, Operator.SUBTRACT, 7)
    assert evaluate(node(negative_seven, Operator.DIVIDE, 2)) == -3
    assert evaluate(node(7, Operator.DIVIDE, node(0, Operator.SUBTRACT, 2))) == -3
    assert evaluate(node(negative_seven, Operator.DIVIDE,
                         node(0, Operator.SUBTRACT, 2))) == 3


def test_evaluate_divide_by_zero():
    """Test that a zero divisor is reported."""
    with pytest.raises(DivideByZero):
        evaluate(node(5, Operator.DIVIDE, 0))
    with pytest.raises(DivideByZero):
        evaluate(node(5, Operator.DIVIDE, node(2, Operator.SUBTRACT, 2)))


def test_evaluate_left_operand_errors_first():
    """Test that the left subtree is evaluated before the right one."""
    overflowing = node(INTEGER_MAX, Operator.ADD, 1)
    dividing_by_zero = node(1, Operator.DIVIDE, 0)

    with pytest.raises(NumericOverflow):
        evaluate(node(overflowing, Operator.ADD, dividing_by_zero))
    with pytest.raises(DivideByZero):
        evaluate(node(dividing_by_zero, Operator.ADD, overflowing))


def test_evaluate_overflow():
    """Test that results outside the integer range are reported."""
    with pytest.raises(NumericOverflow) as exc_info:
        evaluate(node(INTEGER_MAX, Operator.MULTIPLY, 2))
    assert exc_info.value.value == INTEGER_MAX * 2

    minimum = node(node(0, Operator.SUBTRACT, INTEGER_MAX), Operator.SUBTRACT, 1)
    assert evaluate(minimum) == INTEGER_MIN
    with pytest.raises(NumericOverflow):
        evaluate(node(minimum, Operator.DIVIDE, node(0, Operator.SUBTRACT, 1)))


def test_evaluate_deep_left_chain():
    """Test that deep trees evaluate without recursion limits."""
    tree = Leaf(0)
    for _ in range(10000):
        tree = Internal(tree, Operator.ADD, Leaf(1))
    assert evaluate(tree) == 10000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
