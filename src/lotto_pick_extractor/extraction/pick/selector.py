# extraction/pick/selector.py
"""
selector.py.

Does: Search the partitions of a digit string for the first legal lottery pick.
      Rejects impossible lengths before enumerating, runs the filters in
      PICK_FILTERS order, and stops at the first partition that passes them all.
Returns: PickOutcome(digits, pick | None, reason).
Used by: orchestrator.find_lotto_pick / compute_lotto_pick.
"""

from __future__ import annotations

import logging

from lotto_pick_extractor.extraction.general.token import (
    is_digit_string,
    iter_partitions,
)
from lotto_pick_extractor.extraction.general.types import Partition
from lotto_pick_extractor.extraction.general.utils import debug_rows
from lotto_pick_extractor.extraction.pick.constants import (
    MAX_INPUT_LEN,
    MIN_INPUT_LEN,
)
from lotto_pick_extractor.extraction.pick.filters import PICK_FILTERS
from lotto_pick_extractor.extraction.pick.types import PickOutcome, PickReason

__all__ = ["select_pick", "precheck"]

log = logging.getLogger(__name__)


def precheck(digits: str) -> PickReason | None:
    """
    Does: Reject input that cannot hold a pick without enumerating anything.
    Returns: The rejection reason, or None when the search should run.
    """
    if not isinstance(digits, str):
        raise TypeError(f"expected str, got {type(digits).__name__}")
    if not (MIN_INPUT_LEN <= len(digits) <= MAX_INPUT_LEN):
        return PickReason.LENGTH_OUT_OF_BOUNDS
    if not is_digit_string(digits):
        return PickReason.NOT_DIGITS
    return None


def _stages_passed(partition: Partition) -> int:
    passed = 0
    for _, keep in PICK_FILTERS:
        if not keep(partition):
            break
        passed += 1
    return passed


def _select_lazy(digits: str) -> PickOutcome:
    # Partition-at-a-time. No partition passing the first k filters is the same
    # condition as the k-th stage of the staged search coming up empty.
    deepest = 0
    for partition in iter_partitions(digits):
        passed = _stages_passed(partition)
        if passed == len(PICK_FILTERS):
            return PickOutcome(digits, partition, PickReason.OK)
        deepest = max(deepest, passed)
    return PickOutcome(digits, None, PICK_FILTERS[deepest][0])


def _select_staged(digits: str) -> PickOutcome:
    # Stage-at-a-time, so every stage's survivors can be listed.
    candidates = list(iter_partitions(digits))
    debug_rows(f"{digits}: partitions", candidates)
    for reason, keep in PICK_FILTERS:
        candidates = [p for p in candidates if keep(p)]
        debug_rows(f"{digits}: after {keep.__name__}", candidates)
        if not candidates:
            return PickOutcome(digits, None, reason)
    return PickOutcome(digits, candidates[0], PickReason.OK)


def select_pick(digits: str, *, debug: bool = False) -> PickOutcome:
    """
    Does: Find the first partition of `digits` (enumeration order) that is a legal pick.
          Filters run cardinality -> uniqueness -> range/leading-zero; when a stage
          leaves nothing, later stages are skipped and that stage is the reason.
    Returns: PickOutcome; never raises for bad digit input (TypeError for non-str).
    Used by: Orchestrator entry points. `debug=True` lists each stage's survivors.
    """
    rejected = precheck(digits)
    if rejected is not None:
        log.debug("Pre-check rejected %r: %s", digits, rejected.value)
        return PickOutcome(digits, None, rejected)

    outcome = _select_staged(digits) if debug else _select_lazy(digits)
    log.debug("Pick for %r: %s (%s)", digits, outcome.pick, outcome.reason.value)
    return outcome
