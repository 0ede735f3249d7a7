"""
types.py.

Does: Define the selector's result type and the reasons a search can end.
Used by: selector, orchestrator, CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lotto_pick_extractor.extraction.general.types import Partition


class PickReason(str, Enum):
    """Why a search ended. Everything except OK means "no pick"."""

    OK = "ok"
    LENGTH_OUT_OF_BOUNDS = "length_out_of_bounds"
    NOT_DIGITS = "not_digits"
    # Filter stages, in the order they run
    WRONG_CARDINALITY = "wrong_cardinality"
    DUPLICATE_NUMBERS = "duplicate_numbers"
    OUT_OF_RANGE = "out_of_range"

    @property
    def is_malformed_input(self) -> bool:
        return self in (PickReason.LENGTH_OUT_OF_BOUNDS, PickReason.NOT_DIGITS)


@dataclass(frozen=True)
class PickOutcome:
    """
    Result of one pick search.

    `pick` is a complete tuple of NUMBERS_IN_PICK tokens when `reason` is OK,
    and None otherwise; partial picks are never reported.
    """

    digits: str
    pick: Partition | None
    reason: PickReason

    @property
    def found(self) -> bool:
        return self.pick is not None

    def numbers(self) -> list[int]:
        """Integer values of the pick in token order ([] when nothing was found)."""
        return [int(t) for t in self.pick] if self.pick is not None else []


__all__ = ["PickReason", "PickOutcome"]
