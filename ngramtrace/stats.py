"""Aggregated statistics for a single n-gram histogram."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Set, Tuple

from .constants import KEY_DELIMITER, PLACEHOLDER


@dataclass(frozen=True)
class NGramStatistics:
    """Read-only view over the ``key -> count`` mapping of one execution."""

    order: int
    histogram: Mapping[str, int]

    @property
    def total(self) -> int:
        return sum(self.histogram.values())

    @property
    def distinct(self) -> int:
        return len(self.histogram)

    def most_common(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Return the ``limit`` most frequent keys, ties broken by key."""

        ranked = sorted(self.histogram.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]

    def split_key(self, key: str) -> Tuple[str, ...]:
        """Split ``key`` back into its ``order`` tokens.

        Opcode mnemonics never contain the delimiter, so the last ``order - 1``
        delimiters separate the tokens.
        """

        return tuple(key.rsplit(KEY_DELIMITER, self.order - 1))

    def partial_keys(self) -> List[str]:
        """Keys that still contain placeholder slots."""

        return sorted(key for key in self.histogram if PLACEHOLDER in self.split_key(key))

    def opcodes(self) -> Set[str]:
        found: Set[str] = set()
        for key in self.histogram:
            found.update(token for token in self.split_key(key) if token != PLACEHOLDER)
        return found

    def ratio(self, key: str) -> float:
        total = self.total
        if not total:
            return 0.0
        return self.histogram.get(key, 0) / total

    def describe(self) -> str:
        return f"order={self.order} keys={self.distinct} total={self.total} partial={len(self.partial_keys())}"
