# extraction/general/token/split/__init__.py
"""
split
=====

Does: Expose the 1/2-character partition enumerator.
Exports: iter_partitions, split_partitions, count_partitions
Used by: The pick selector and its tests.
"""

from .split_core import (
    MAX_TOKEN_WIDTH,
    count_partitions,
    iter_partitions,
    split_partitions,
)

__all__ = [
    "MAX_TOKEN_WIDTH",
    "iter_partitions",
    "split_partitions",
    "count_partitions",
]
