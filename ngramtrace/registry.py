"""Lookup of tracers by the names tracing hosts use to request them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .constants import BIGRAM_ORDER, TRIGRAM_ORDER
from .engine import NGramTracer
from .policy import DepthPolicy


@dataclass(frozen=True)
class TracerSpec:
    """Registry entry describing how to build a named tracer."""

    name: str
    summary: str
    order: Optional[int] = None

    def build(self, order: Optional[int] = None, policy: Optional[DepthPolicy] = None) -> NGramTracer:
        if self.order is not None and order is not None and order != self.order:
            raise ValueError(f"{self.name} has fixed order {self.order}, got {order}")
        resolved = self.order if self.order is not None else order
        if resolved is None:
            raise ValueError(f"{self.name} requires an explicit n-gram order")
        return NGramTracer(resolved, policy=policy)


_REGISTRY: Dict[str, TracerSpec] = {
    spec.name: spec
    for spec in (
        TracerSpec("bigramTracer", "counts opcode pairs at constant call depth", BIGRAM_ORDER),
        TracerSpec("trigramTracer", "counts opcode triples at constant call depth", TRIGRAM_ORDER),
        TracerSpec("ngramTracer", "counts opcode n-grams of a configurable order"),
    )
}


def available_tracers() -> List[TracerSpec]:
    return sorted(_REGISTRY.values(), key=lambda spec: spec.name)


def create_tracer(
    name: str,
    *,
    order: Optional[int] = None,
    policy: Optional[DepthPolicy] = None,
) -> NGramTracer:
    """Build a fresh tracer registered under ``name``.

    Fixed-order tracers accept ``order`` only when it matches their own.
    Every call returns a new instance; tracers are never shared between
    executions.
    """

    spec = _REGISTRY.get(name)
    if spec is None:
        known = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"unknown tracer {name!r} (known tracers: {known})")
    return spec.build(order, policy)


__all__ = ["TracerSpec", "available_tracers", "create_tracer"]
