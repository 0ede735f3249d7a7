# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Public entry points for extracting a lottery pick from a digit string.
Returns:
  - compute_lotto_pick(text) -> list[str] | None
        the 7 tokens in enumeration order (not sorted), or None
  - find_lotto_pick(text, debug=False) -> PickOutcome
        same search, with the reason when nothing was found
Used by: The CLI and any caller that supplies digit strings.
"""

import logging
from functools import lru_cache

from lotto_pick_extractor.extraction.pick import PickOutcome, select_pick

logger = logging.getLogger(__name__)

__all__ = ["compute_lotto_pick", "find_lotto_pick", "clear_pick_cache"]


@lru_cache(maxsize=1024)
def _find_cached(text: str) -> PickOutcome:
    return select_pick(text)


def clear_pick_cache() -> None:
    """Does: Drop memoized outcomes (tests use this to observe fresh searches)."""
    _find_cached.cache_clear()


def find_lotto_pick(text: str, *, debug: bool = False) -> PickOutcome:
    """
    Does: Run the pick search on `text`. Plain calls are memoized since the
          search is a pure function of its input; debug calls always re-run
          so the stage listing is printed.
    Returns: PickOutcome. Raises TypeError only when `text` is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if debug:
        return select_pick(text, debug=True)
    outcome = _find_cached(text)
    if not outcome.found:
        logger.debug("No pick for %r (%s)", text, outcome.reason.value)
    return outcome


def compute_lotto_pick(text: str) -> list[str] | None:
    """
    Does: Extract one valid pick from `text`.
    Returns: A fresh list of 7 numeral strings, or None when the length is out of
             bounds, the input is not all digits, or no split survives the filters.
    """
    outcome = find_lotto_pick(text)
    return list(outcome.pick) if outcome.pick is not None else None
