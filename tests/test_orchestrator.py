# tests/test_orchestrator.py
from __future__ import annotations

import pytest

import lotto_pick_extractor
from lotto_pick_extractor.extraction import orchestrator as O
from lotto_pick_extractor.extraction.pick.types import PickReason


def test_compute_lotto_pick_single_digits():
    assert O.compute_lotto_pick("1234567") == ["1", "2", "3", "4", "5", "6", "7"]


def test_result_is_enumeration_order_not_sorted():
    assert O.compute_lotto_pick("4938532894754") == ["49", "38", "53", "28", "9", "47", "54"]


@pytest.mark.parametrize(
    "digits",
    ["", "123456", "472844278465445", "569815571556", "0101122241229", "10012345", "12a4567"],
)
def test_no_result_is_none(digits):
    assert O.compute_lotto_pick(digits) is None


def test_deterministic_and_fresh_lists():
    a = O.compute_lotto_pick("101122241229")
    b = O.compute_lotto_pick("101122241229")
    assert a == b == ["10", "1", "12", "22", "41", "2", "29"]
    a.append("x")
    assert O.compute_lotto_pick("101122241229") == ["10", "1", "12", "22", "41", "2", "29"]


def test_find_lotto_pick_reports_reason():
    assert O.find_lotto_pick("").reason is PickReason.LENGTH_OUT_OF_BOUNDS
    assert O.find_lotto_pick("1111111").reason is PickReason.DUPLICATE_NUMBERS
    assert O.find_lotto_pick("1234567").reason is PickReason.OK


def test_memoized_until_cleared(monkeypatch):
    calls = []
    real = O.select_pick

    def _counting(text, **kw):
        calls.append(text)
        return real(text, **kw)

    monkeypatch.setattr(O, "select_pick", _counting)
    O.clear_pick_cache()
    O.find_lotto_pick("1234567")
    O.find_lotto_pick("1234567")
    assert calls == ["1234567"]
    O.clear_pick_cache()
    O.find_lotto_pick("1234567")
    assert calls == ["1234567", "1234567"]


def test_debug_bypasses_cache(capsys):
    O.find_lotto_pick("1234567")
    O.find_lotto_pick("1234567", debug=True)
    assert "after has_pick_size" in capsys.readouterr().err


def test_type_error_for_non_str():
    with pytest.raises(TypeError):
        O.compute_lotto_pick(1234567)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        O.find_lotto_pick(None)  # type: ignore[arg-type]


def test_root_package_reexports():
    assert lotto_pick_extractor.compute_lotto_pick is O.compute_lotto_pick
    assert lotto_pick_extractor.find_lotto_pick is O.find_lotto_pick
