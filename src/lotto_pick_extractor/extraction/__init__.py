# lotto_pick_extractor/extraction/__init__.py

"""
extraction.
==========

Does: Group the pick pipeline: `general` (digit checks, splitter, utils),
      `pick` (rules, filters, selector) and `orchestrator` (entry points).
Used by: The CLI and library callers via `lotto_pick_extractor`.
"""
from __future__ import annotations

from .orchestrator import compute_lotto_pick, find_lotto_pick

__all__: list[str] = ["compute_lotto_pick", "find_lotto_pick"]
__docformat__ = "google"
