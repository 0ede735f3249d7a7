"""
pick.
=====

Does: Turn partitions of a digit string into a lottery pick: rule constants,
      validity filters, the first-found selector, and bundled sample inputs.
Used By: orchestrator and CLI.
Returns: Pure functions and immutable data; no global state.
"""

# ── Rules ────────────────────────────────────────────────────────────────────
from .constants import (
    MAX_INPUT_LEN,
    MAX_NUMBER,
    MIN_INPUT_LEN,
    MIN_NUMBER,
    NUMBERS_IN_PICK,
)

# ── Filters & selection ──────────────────────────────────────────────────────
from .filters import (
    PICK_FILTERS,
    has_pick_size,
    has_unique_numbers,
    is_in_range_without_leading_zero,
    is_valid_pick,
)
from .samples import load_sample_inputs
from .selector import precheck, select_pick
from .types import PickOutcome, PickReason

__all__ = [
    # constants
    "NUMBERS_IN_PICK",
    "MIN_NUMBER",
    "MAX_NUMBER",
    "MIN_INPUT_LEN",
    "MAX_INPUT_LEN",
    # filters
    "PICK_FILTERS",
    "has_pick_size",
    "has_unique_numbers",
    "is_in_range_without_leading_zero",
    "is_valid_pick",
    # selection
    "precheck",
    "select_pick",
    "PickOutcome",
    "PickReason",
    # samples
    "load_sample_inputs",
]
