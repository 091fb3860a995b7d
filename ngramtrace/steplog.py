"""Step log capability consumed by the tracer hooks.

A tracing driver hands the tracer one log object per executed instruction.
The tracer only ever asks such an object for two things: the opcode mnemonic
and the call depth at which it ran.  :class:`StepLog` captures exactly that
surface so any driver object exposing ``opcode()`` and ``depth()`` can be
traced without adapters.

:class:`StructLog` is the concrete log used when replaying recorded
executions.  It mirrors one entry of the ``structLogs`` array returned by
``debug_traceTransaction``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol


class TraceFormatError(ValueError):
    """Raised when a recorded trace entry cannot be interpreted."""


class StepLog(Protocol):
    def opcode(self) -> str:
        ...

    def depth(self) -> int:
        ...


@dataclass(frozen=True)
class StructLog:
    op: str
    call_depth: int
    pc: Optional[int] = None
    gas: Optional[int] = None
    gas_cost: Optional[int] = None
    error: Optional[str] = None

    def opcode(self) -> str:
        return self.op

    def depth(self) -> int:
        return self.call_depth

    @property
    def faulted(self) -> bool:
        return bool(self.error)

    @classmethod
    def from_json(cls, entry: Any, index: Optional[int] = None) -> "StructLog":
        """Create a :class:`StructLog` from one decoded ``structLogs`` entry.

        ``op`` must be a string and ``depth`` a non-negative integer.  The
        numeric bookkeeping fields are optional and kept only when they are
        integers.  ``index`` is used to point at the offending entry when the
        input is rejected.
        """

        where = f"entry {index}" if index is not None else "entry"
        if not isinstance(entry, Mapping):
            raise TraceFormatError(f"{where} must be a JSON object")

        op = entry.get("op")
        if not isinstance(op, str):
            raise TraceFormatError(f"{where} has no string 'op' field")

        depth = entry.get("depth")
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise TraceFormatError(f"{where} has no integer 'depth' field")
        if depth < 0:
            raise TraceFormatError(f"{where} has negative depth {depth}")

        error = entry.get("error")
        if error is not None and not isinstance(error, str):
            error = str(error)

        return cls(
            op=op,
            call_depth=depth,
            pc=_optional_int(entry.get("pc")),
            gas=_optional_int(entry.get("gas")),
            gas_cost=_optional_int(entry.get("gasCost")),
            error=error or None,
        )


def _optional_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


__all__ = ["StepLog", "StructLog", "TraceFormatError"]
