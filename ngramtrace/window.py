"""Fixed capacity window of the most recent opcodes at the current depth."""

from __future__ import annotations

from collections import deque
from typing import Deque, Tuple

from .constants import KEY_DELIMITER, PLACEHOLDER


class OpcodeWindow:
    """FIFO of ``capacity`` opcode slots, pre-filled with placeholders.

    The window never grows or shrinks: :meth:`push` evicts the oldest slot and
    :meth:`reset` refills every slot with :data:`PLACEHOLDER`.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("window capacity must be positive")
        self._slots: Deque[str] = deque([PLACEHOLDER] * capacity, maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._slots.maxlen or 0

    def __len__(self) -> int:
        return len(self._slots)

    def push(self, opcode: str) -> None:
        self._slots.append(opcode)

    def reset(self) -> None:
        self._slots.extend([PLACEHOLDER] * self.capacity)

    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._slots)

    def key(self, opcode: str) -> str:
        """Return the n-gram key formed by the window followed by ``opcode``."""

        return KEY_DELIMITER.join((*self._slots, opcode))

    def __repr__(self) -> str:
        return f"OpcodeWindow({list(self._slots)!r})"
