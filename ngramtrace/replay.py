"""Replay recorded executions through a tracer.

Recorded executions are the JSON documents produced by ``debug_traceTransaction``
style tracing endpoints.  Three shapes are accepted: a bare list of step
entries, an object with a ``structLogs`` array, and a JSON-RPC response whose
``result`` holds such an object.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .engine import NGramTracer
from .steplog import StructLog, TraceFormatError

logger = logging.getLogger(__name__)


@dataclass
class ReplaySummary:
    """Outcome of replaying one execution."""

    steps: int = 0
    faults: int = 0
    histogram: Dict[str, int] = field(default_factory=dict)

    @property
    def events(self) -> int:
        return self.steps + self.faults


def extract_struct_logs(document: Any) -> List[StructLog]:
    """Return the step entries of a decoded trace document."""

    entries = document
    if isinstance(entries, dict) and "result" in entries:
        entries = entries["result"]
    if isinstance(entries, dict):
        if "structLogs" not in entries:
            raise TraceFormatError("trace object has no 'structLogs' array")
        entries = entries["structLogs"]
    if not isinstance(entries, list):
        raise TraceFormatError("trace must be a list of step entries")
    return [StructLog.from_json(entry, index) for index, entry in enumerate(entries)]


def load_struct_logs(path: Path) -> List[StructLog]:
    try:
        document = json.loads(Path(path).read_text("utf-8"))
    except json.JSONDecodeError as exc:
        raise TraceFormatError(f"{path} is not valid JSON: {exc}") from exc
    logs = extract_struct_logs(document)
    if not logs:
        logger.warning("trace %s contains no step entries", path)
    return logs


def replay(logs: Iterable[StructLog], tracer: NGramTracer) -> ReplaySummary:
    """Drive ``tracer`` with ``logs`` in order and collect its result.

    Faulted entries go to :meth:`~NGramTracer.on_fault` and never reach
    :meth:`~NGramTracer.on_step`.
    """

    summary = ReplaySummary()
    for log in logs:
        if log.faulted:
            tracer.on_fault(log)
            summary.faults += 1
        else:
            tracer.on_step(log)
            summary.steps += 1
    summary.histogram = tracer.on_result()
    logger.debug(
        "replayed %d steps and %d faults into %d keys",
        summary.steps,
        summary.faults,
        len(summary.histogram),
    )
    return summary


__all__ = ["ReplaySummary", "extract_struct_logs", "load_struct_logs", "replay"]
