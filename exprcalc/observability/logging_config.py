"""Centralized logging configuration."""
import logging

# Loggers pinned to WARNING regardless of the requested level
_QUIET_LOGGERS = ("langgraph", "httpx")

# Our own loggers, which follow the requested level
_PIPELINE_LOGGERS = (
    "exprcalc.core.lexer",
    "exprcalc.core.validator",
    "exprcalc.core.builder",
    "exprcalc.core.evaluator",
    "exprcalc.observability.telemetry",
)


def configure_logging(level: str = "INFO"):
    """Configure root and pipeline logging at ``level``."""
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name in _PIPELINE_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
