# extraction/pick/filters.py
"""
filters.

Does: Independent predicates deciding whether a partition is a legal pick,
      plus the fixed order in which the selector applies them.
Returns: bool per predicate; PICK_FILTERS as (reason, predicate) pairs.
Used by: select_pick and is_valid_pick.
"""

from __future__ import annotations

from collections.abc import Callable

from lotto_pick_extractor.extraction.general.types import Partition
from lotto_pick_extractor.extraction.pick.constants import (
    MAX_NUMBER,
    MIN_NUMBER,
    NUMBERS_IN_PICK,
)
from lotto_pick_extractor.extraction.pick.types import PickReason

__all__ = [
    "PartitionFilter",
    "PICK_FILTERS",
    "has_pick_size",
    "has_unique_numbers",
    "is_in_range_without_leading_zero",
    "is_valid_pick",
]

PartitionFilter = Callable[[Partition], bool]


def has_pick_size(partition: Partition) -> bool:
    """Does: Keep partitions with exactly NUMBERS_IN_PICK tokens."""
    return len(partition) == NUMBERS_IN_PICK


def has_unique_numbers(partition: Partition) -> bool:
    """Does: Keep partitions whose tokens differ by integer value."""
    values = [int(t) for t in partition]
    return len(set(values)) == len(values)


def is_in_range_without_leading_zero(partition: Partition) -> bool:
    """
    Does: Keep partitions where every token reads as MIN_NUMBER..MAX_NUMBER and
          none starts with '0'.

    The splitter happily cuts "05" out of "...05...", and int("05") == 5 would
    pass the range test alone, so the leading-zero check is separate.
    """
    return all(
        not t.startswith("0") and MIN_NUMBER <= int(t) <= MAX_NUMBER for t in partition
    )


# Cheapest and most eliminating first; the reason names the stage that empties.
PICK_FILTERS: tuple[tuple[PickReason, PartitionFilter], ...] = (
    (PickReason.WRONG_CARDINALITY, has_pick_size),
    (PickReason.DUPLICATE_NUMBERS, has_unique_numbers),
    (PickReason.OUT_OF_RANGE, is_in_range_without_leading_zero),
)


def is_valid_pick(partition: Partition) -> bool:
    """Does: True when `partition` passes every filter in PICK_FILTERS."""
    return all(keep(partition) for _, keep in PICK_FILTERS)
