# tests/conftest.py
"""Shared fixtures: an independent brute-force pick search and clean debug/cache state."""

from __future__ import annotations

import itertools

import pytest

from lotto_pick_extractor.extraction.general.utils import clear_config_cache, reload_topics
from lotto_pick_extractor.extraction.orchestrator import clear_pick_cache


def _brute_force_pick(digits: str) -> list[str] | None:
    """
    Width sequences over {1, 2} in lexicographic order (1 < 2) list 7-token
    splits in the same order as a depth-first, short-token-first walk.
    """
    if not 7 <= len(digits) <= 14 or not all(c in "0123456789" for c in digits):
        return None
    for widths in itertools.product((1, 2), repeat=7):
        if sum(widths) != len(digits):
            continue
        tokens, pos = [], 0
        for w in widths:
            tokens.append(digits[pos : pos + w])
            pos += w
        values = [int(t) for t in tokens]
        if len(set(values)) != 7:
            continue
        if all(1 <= v <= 59 and not t.startswith("0") for t, v in zip(tokens, values)):
            return tokens
    return None


@pytest.fixture
def brute_force_pick():
    return _brute_force_pick


@pytest.fixture(autouse=True)
def _reset_state(monkeypatch):
    """Every topic enabled, no data-dir override, empty caches."""
    monkeypatch.delenv("LOTTO_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("LOTTO_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    reload_topics()
    clear_config_cache()
    clear_pick_cache()
    yield
    clear_pick_cache()
