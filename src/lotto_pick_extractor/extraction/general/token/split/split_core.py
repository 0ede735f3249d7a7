# extraction/general/token/split/split_core.py

"""
split_core.py.

Does: Enumerate every way to cut a digit string into ordered 1- and 2-character
      tokens, depth-first, taking the 1-character branch before the 2-character one.
Returns: A lazy iterator (iter_partitions) or a materialized list (split_partitions)
         of partitions; each partition joins back to the input exactly.
Used by: The pick selector, which stops consuming at the first valid pick.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

from lotto_pick_extractor.extraction.general.types import Partition

__all__ = [
    "MAX_TOKEN_WIDTH",
    "iter_partitions",
    "split_partitions",
    "count_partitions",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# Tokens are 1 or 2 characters wide.
MAX_TOKEN_WIDTH = 2


# ─────────────────────────────────────────────────────────────────────────────
# Recursive generator
# ─────────────────────────────────────────────────────────────────────────────


def _split(rest: str, current: Partition) -> Iterator[Partition]:
    if not rest:
        yield current
        return
    # 1-character token first, then 2-character token
    for width in range(1, min(MAX_TOKEN_WIDTH, len(rest)) + 1):
        yield from _split(rest[width:], current + (rest[:width],))


def iter_partitions(digits: str) -> Iterator[Partition]:
    """
    Does: Lazily yield all partitions of `digits` into 1/2-char tokens.
    Returns: Iterator of tuples; "" yields exactly one empty tuple.
             Every call starts a fresh, identically ordered enumeration.
    Used by: select_pick (early exit on first valid pick).
    """
    if not isinstance(digits, str):
        raise TypeError(f"expected str, got {type(digits).__name__}")
    log.debug("Enumerating partitions of %r (%d expected)", digits, count_partitions(len(digits)))
    return _split(digits, ())


def split_partitions(digits: str) -> list[Partition]:
    """Does: Materialize iter_partitions(digits) in enumeration order."""
    return list(iter_partitions(digits))


def count_partitions(length: int) -> int:
    """
    Does: Count partitions of a string of `length` characters without enumerating.
    Returns: Fibonacci F(length + 1): 1, 1, 2, 3, 5, 8, ... for length 0, 1, 2, ...
    """
    if length < 0:
        raise ValueError("length must be >= 0")
    prev, cur = 0, 1  # counts for lengths -1 (virtual) and 0
    for _ in range(length):
        prev, cur = cur, prev + cur
    return cur
