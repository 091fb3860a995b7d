"""Shared constants for n-gram key construction."""

KEY_DELIMITER = "-"

# Window slots that have not seen a real opcode yet.  Placeholders take part
# in key construction, so early keys carry empty segments ("-PUSH1").
PLACEHOLDER = ""

INITIAL_DEPTH = 0

BIGRAM_ORDER = 2
TRIGRAM_ORDER = 3
MIN_ORDER = BIGRAM_ORDER
