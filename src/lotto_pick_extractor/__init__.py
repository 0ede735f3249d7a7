"""
lotto_pick_extractor
====================

Does: Root package for extracting a 7-number lottery pick from a digit string.
Returns: Re-exports the entry points `compute_lotto_pick` and `find_lotto_pick`.
Used by: All imports starting from `lotto_pick_extractor.*`.
"""

from .extraction import compute_lotto_pick, find_lotto_pick

__all__: list[str] = ["compute_lotto_pick", "find_lotto_pick"]
__docformat__ = "google"
