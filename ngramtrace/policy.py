"""Depth transition policies for the n-gram tracer."""

from __future__ import annotations

from enum import Enum

from .constants import BIGRAM_ORDER


class DepthPolicy(Enum):
    """How the window reacts when the call depth changes between steps.

    ``CARRY`` skips the n-gram that straddles the transition but still pushes
    the new opcode, so it becomes context for the next key at the new depth.
    This is the historical bigram behaviour.

    ``RESET`` refills the window with placeholders, remembers the new depth
    and drops the opcode of the transition step entirely.  This is the
    historical trigram behaviour.
    """

    CARRY = "carry"
    RESET = "reset"


def default_policy(order: int) -> DepthPolicy:
    if order <= BIGRAM_ORDER:
        return DepthPolicy.CARRY
    return DepthPolicy.RESET


def parse_policy(text: str) -> DepthPolicy:
    """Resolve a policy from its name, ignoring case and surrounding whitespace."""

    try:
        return DepthPolicy(text.strip().lower())
    except ValueError:
        choices = ", ".join(policy.value for policy in DepthPolicy)
        raise ValueError(f"unknown depth policy {text!r} (expected one of: {choices})") from None
