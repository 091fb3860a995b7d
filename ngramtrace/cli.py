"""Replay a recorded execution trace and print its opcode n-gram histogram."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .policy import parse_policy
from .registry import available_tracers, create_tracer
from .replay import load_struct_logs, replay
from .stats import NGramStatistics
from .steplog import TraceFormatError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("trace", type=Path, help="JSON trace with a structLogs array")
    parser.add_argument(
        "--tracer",
        default="bigramTracer",
        choices=[spec.name for spec in available_tracers()],
        help="Named tracer to replay the trace through",
    )
    parser.add_argument(
        "--order",
        type=int,
        default=None,
        help="n-gram order, required for ngramTracer",
    )
    parser.add_argument(
        "--policy",
        default=None,
        help="Depth transition policy override: carry or reset",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=20,
        help="Number of most frequent keys to print",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if not args.trace.exists():
        raise SystemExit(f"missing input file: {args.trace}")

    try:
        policy = parse_policy(args.policy) if args.policy else None
        tracer = create_tracer(args.tracer, order=args.order, policy=policy)
        logs = load_struct_logs(args.trace)
    except (TraceFormatError, ValueError, OSError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    logger.debug("replaying %d entries through %r", len(logs), tracer)
    summary = replay(logs, tracer)
    stats = NGramStatistics(tracer.order, summary.histogram)

    print(f"tracer: {args.tracer} order={tracer.order} policy={tracer.policy.value}")
    print(f"steps: {summary.steps}")
    print(f"faults: {summary.faults}")
    print(f"distinct keys: {stats.distinct}")
    print(f"total n-grams: {stats.total}")
    hot = stats.most_common(max(0, args.top))
    if hot:
        width = max(len(key) for key, _ in hot)
        print("top n-grams:")
        for key, count in hot:
            print(f"  {key:{width}s} -> {count:6d}")


if __name__ == "__main__":
    main()
