"""CLI interface for the calculator."""
import sys
from exprcalc.calculator import calculate
from exprcalc.config import LOG_LEVEL, SHOW_TRACE
from exprcalc.core.errors import CalculatorError
from exprcalc.observability.telemetry import format_trace_summary
from exprcalc.observability.logging_config import configure_logging


def main(argv=None):
    configure_logging(LOG_LEVEL)
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: python -m exprcalc.app '1 + 2 * 3'")
        return 1

    expression = " ".join(args)

    try:
        result = calculate(expression)
    except CalculatorError as err:
        print(f"Error: {err}")
        return 1
    finally:
        if SHOW_TRACE:
            print(format_trace_summary())

    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
