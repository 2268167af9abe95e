"""Observability and tracing for the calculation pipeline."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class StageName(str, Enum):
    """Pipeline stages, in execution order."""
    TOKENIZE = "tokenize"
    VALIDATE = "validate"
    BUILD = "build"
    EVALUATE = "evaluate"


class RecordType(str, Enum):
    """Types of trace records."""
    STAGE_ENTRY = "stage_entry"
    STAGE_EXIT = "stage_exit"


@dataclass
class TraceRecord:
    """Base class for trace records."""
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        record_type = getattr(self, 'record_type', None)
        return {
            "timestamp": self.timestamp.isoformat(),
            "type": record_type.value if record_type else "unknown",
            **{k: v for k, v in self.__dict__.items() if k not in ("timestamp", "record_type")}
        }


@dataclass
class StageEntryRecord(TraceRecord):
    """Record for entering a pipeline stage."""
    stage: StageName
    expression: str
    record_type: RecordType = field(default=RecordType.STAGE_ENTRY, init=False)


@dataclass
class StageExitRecord(TraceRecord):
    """Record for leaving a pipeline stage, successfully or not."""
    stage: StageName
    duration_ms: float
    output: Optional[str] = None
    error: Optional[str] = None
    record_type: RecordType = field(default=RecordType.STAGE_EXIT, init=False)

    @property
    def failed(self) -> bool:
        return self.error is not None


# In-memory trace storage
_trace_log: List[TraceRecord] = []


def log_stage_entry(stage: StageName, expression: str):
    """Log when entering a stage."""
    record = StageEntryRecord(
        timestamp=datetime.now(),
        stage=stage,
        expression=expression[:50]
    )
    _trace_log.append(record)
    logger.debug(f"Entering stage: {stage.value} for '{expression[:50]}'")


def log_stage_exit(stage: StageName, duration_ms: float,
                   output: Optional[str] = None, error: Optional[Exception] = None):
    """Log when leaving a stage, with its output summary or error."""
    record = StageExitRecord(
        timestamp=datetime.now(),
        stage=stage,
        duration_ms=duration_ms,
        output=output[:100] if output is not None else None,
        error=f"{type(error).__name__}: {error}" if error is not None else None
    )
    _trace_log.append(record)
    if error is not None:
        logger.warning(f"Stage {stage.value} failed: {record.error} ({duration_ms:.2f}ms)")
    else:
        logger.debug(f"Exiting stage: {stage.value} → {record.output} ({duration_ms:.2f}ms)")


def get_trace() -> List[TraceRecord]:
    """Get the full trace log."""
    return _trace_log.copy()


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_stage_exits() -> List[StageExitRecord]:
    """Get all stage exit records."""
    return [r for r in _trace_log if isinstance(r, StageExitRecord)]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["\n=== Calculation Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        if isinstance(record, StageEntryRecord):
            lines.append(f"[{timestamp}] ENTER: {record.stage.value}")
        elif isinstance(record, StageExitRecord):
            outcome = f"ERROR {record.error}" if record.failed else record.output
            lines.append(
                f"[{timestamp}] EXIT: {record.stage.value} → {outcome} "
                f"({record.duration_ms:.2f}ms)")

    return "\n".join(lines)
