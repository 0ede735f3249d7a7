# extraction/general/token/__init__.py
"""
token.
=====

Does: Provide digit-string checks and the partition splitter.
Exports: is_digit_string, strip_separators,
         iter_partitions, split_partitions, count_partitions
Used by: The pick selector and the CLI.
"""

from __future__ import annotations

from .normalize import (
    DIGITS,
    is_digit_string,
    strip_separators,
)
from .split.split_core import (
    count_partitions,
    iter_partitions,
    split_partitions,
)

__all__ = [
    # normalize
    "DIGITS",
    "is_digit_string",
    "strip_separators",
    # split
    "iter_partitions",
    "split_partitions",
    "count_partitions",
]
