# lotto_pick_extractor/extraction/general/types.py
from __future__ import annotations

"""
types.py.

Does: Name the value shapes that flow through the splitter and the pick filters.
"""

# A 1- or 2-character slice of the input digit string.
Token = str

# Ordered tokens whose concatenation reproduces the input exactly.
Partition = tuple[Token, ...]


__all__ = ["Token", "Partition"]

__docformat__ = "google"
