# constants.py
# ============

"""
constants.
=========

Does: Fix the lottery rules a pick must satisfy and the input lengths that can
      possibly produce one.
Used By: Pick filters, the selector's length pre-check, tests.
Returns: Pure ints only (no side effects).
"""

# ── Pick rules ───────────────────────────────────────────────────────────────
NUMBERS_IN_PICK: int = 7
MIN_NUMBER: int = 1
MAX_NUMBER: int = 59

# ── Input bounds ─────────────────────────────────────────────────────────────
# All 1-digit tokens at the short end, all 2-digit tokens at the long end.
MIN_INPUT_LEN: int = NUMBERS_IN_PICK * 1
MAX_INPUT_LEN: int = NUMBERS_IN_PICK * 2

__all__ = [
    "NUMBERS_IN_PICK",
    "MIN_NUMBER",
    "MAX_NUMBER",
    "MIN_INPUT_LEN",
    "MAX_INPUT_LEN",
]
