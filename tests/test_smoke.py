from lotto_pick_extractor import compute_lotto_pick


def test_smoke():
    out = compute_lotto_pick("1011222401229")
    assert out == ["10", "11", "2", "22", "40", "12", "29"]
    assert len(out) == 7
    assert len({int(n) for n in out}) == 7
    assert all(1 <= int(n) <= 59 and not n.startswith("0") for n in out)
    assert "".join(out) == "1011222401229"
