"""Depth aware n-gram accumulation over an executed instruction stream.

The tracer is driven by an external execution tracer: :meth:`NGramTracer.on_step`
is called once per executed instruction, :meth:`NGramTracer.on_fault` whenever
an instruction fails and :meth:`NGramTracer.on_result` exactly once at the end
of the execution.  Only instructions observed at a constant call depth are
joined into keys; how a depth change affects the window is decided by the
tracer's :class:`~ngramtrace.policy.DepthPolicy`.

One tracer instance covers one execution.  Drivers tracing several executions
create one tracer per execution.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Optional, Tuple

from .constants import BIGRAM_ORDER, INITIAL_DEPTH, MIN_ORDER, TRIGRAM_ORDER
from .policy import DepthPolicy, default_policy
from .steplog import StepLog
from .window import OpcodeWindow

logger = logging.getLogger(__name__)


class NGramTracer:
    """Accumulate a histogram of ``order`` consecutive opcodes."""

    def __init__(self, order: int = BIGRAM_ORDER, *, policy: Optional[DepthPolicy] = None) -> None:
        if isinstance(order, bool) or not isinstance(order, int):
            raise ValueError(f"n-gram order must be an integer, got {order!r}")
        if order < MIN_ORDER:
            raise ValueError(f"n-gram order must be at least {MIN_ORDER}, got {order}")
        if policy is not None and not isinstance(policy, DepthPolicy):
            raise ValueError(f"unsupported depth policy: {policy!r}")
        self._order = order
        self._policy = policy or default_policy(order)
        self._window = OpcodeWindow(order - 1)
        self._depth = INITIAL_DEPTH
        self._counts: Counter[str] = Counter()

    @property
    def order(self) -> int:
        return self._order

    @property
    def policy(self) -> DepthPolicy:
        return self._policy

    @property
    def window(self) -> Tuple[str, ...]:
        return self._window.tokens()

    @property
    def depth(self) -> int:
        """Call depth remembered from the last step."""

        return self._depth

    def step(self, opcode: str, depth: int) -> None:
        """Feed one executed instruction into the window."""

        if depth == self._depth:
            self._counts[self._window.key(opcode)] += 1
            self._window.push(opcode)
            return

        logger.debug("call depth %s -> %s at %s (%s)", self._depth, depth, opcode, self._policy.value)
        self._depth = depth
        if self._policy is DepthPolicy.RESET:
            self._window.reset()
        else:
            self._window.push(opcode)

    # ------------------------------------------------------------------
    # Driver hooks
    # ------------------------------------------------------------------
    def on_step(self, log: StepLog) -> None:
        self.step(log.opcode(), log.depth())

    def on_fault(self, log: StepLog) -> None:
        """Ignore a failed instruction; faults never touch the window."""

        logger.debug("fault at %s (depth %s) ignored", log.opcode(), log.depth())

    def on_result(self) -> Dict[str, int]:
        """Return a copy of the accumulated ``key -> count`` mapping."""

        return dict(self._counts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(order={self._order}, policy={self._policy.value}, "
            f"keys={len(self._counts)})"
        )


class BigramTracer(NGramTracer):
    """Pairs of consecutive opcodes, carrying the window across depth changes."""

    def __init__(self, *, policy: Optional[DepthPolicy] = None) -> None:
        super().__init__(BIGRAM_ORDER, policy=policy)


class TrigramTracer(NGramTracer):
    """Triples of consecutive opcodes, resetting the window on depth changes."""

    def __init__(self, *, policy: Optional[DepthPolicy] = None) -> None:
        super().__init__(TRIGRAM_ORDER, policy=policy)


__all__ = ["NGramTracer", "BigramTracer", "TrigramTracer"]
