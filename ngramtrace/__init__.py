"""Public package exports for the opcode n-gram tracer."""

from .engine import BigramTracer, NGramTracer, TrigramTracer
from .policy import DepthPolicy, default_policy
from .registry import available_tracers, create_tracer
from .replay import ReplaySummary, load_struct_logs, replay
from .stats import NGramStatistics
from .steplog import StepLog, StructLog, TraceFormatError

__all__ = [
    "NGramTracer",
    "BigramTracer",
    "TrigramTracer",
    "DepthPolicy",
    "default_policy",
    "available_tracers",
    "create_tracer",
    "ReplaySummary",
    "load_struct_logs",
    "replay",
    "NGramStatistics",
    "StepLog",
    "StructLog",
    "TraceFormatError",
]
