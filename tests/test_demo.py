# tests/test_demo.py
from __future__ import annotations

import json

import pytest

from lotto_pick_extractor import demo


def test_explicit_inputs_print_found_picks_only(capsys):
    demo.main(["1234567", "1111111"])
    out = capsys.readouterr().out
    assert out.splitlines() == ["1234567 -> 1,2,3,4,5,6,7"]


def test_all_flag_prints_misses_with_reason(capsys):
    demo.main(["--all", "1111111", "123"])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "1111111 -> no pick (duplicate_numbers)",
        "123 -> no pick (length_out_of_bounds)",
    ]


def test_separators_are_stripped(capsys):
    demo.main(["49-38-53-28-9-47-54"])
    assert capsys.readouterr().out.strip() == "4938532894754 -> 49,38,53,28,9,47,54"


def test_default_runs_bundled_samples(capsys):
    demo.main([])
    out = capsys.readouterr().out
    assert out.startswith("Standard test cases\n")
    assert "4938532894754 -> 49,38,53,28,9,47,54" in out
    assert "\nAdditional test cases, with 0\n" in out
    assert "101122241229 -> 10,1,12,22,41,2,29" in out
    assert "\nAdditional negative test cases, with 0\n" in out
    # negative group prints its title and nothing else
    assert out.rstrip().endswith("Additional negative test cases, with 0")
    assert "569815571556" not in out


def test_samples_after_explicit_inputs(capsys):
    demo.main(["1234567", "--samples"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1234567 -> 1,2,3,4,5,6,7"
    assert lines[1] == ""
    assert lines[2] == "Standard test cases"


def test_debug_flag_lists_stages(capsys):
    demo.main(["--debug", "1234567"])
    captured = capsys.readouterr()
    assert "1234567 -> 1,2,3,4,5,6,7" in captured.out
    assert "after has_unique_numbers" in captured.err


def test_bad_sample_file_exits_1(tmp_path, monkeypatch, capsys):
    (tmp_path / "sample_inputs.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    monkeypatch.setenv("LOTTO_DATA_DIR", str(tmp_path))
    with pytest.raises(SystemExit) as exc:
        demo.main([])
    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().err


def test_dash_led_input_after_double_dash(capsys):
    demo.main(["--", "-49-38-53-28-9-47-54"])
    assert capsys.readouterr().out.strip() == "4938532894754 -> 49,38,53,28,9,47,54"


def test_help_mentions_double_dash(capsys):
    with pytest.raises(SystemExit):
        demo.main(["--help"])
    assert "lotto-pick -- -49-38-53-28-9-47-54" in capsys.readouterr().out


def test_data_dir_flag_reads_commented_samples(tmp_path, capsys):
    import os

    (tmp_path / "sample_inputs.json").write_text(
        '// my groups\n{\n  "Mine": ["1011222401229", "1111111",],\n}\n', encoding="utf-8"
    )
    demo.main(["--all", "--data-dir", str(tmp_path)])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Mine",
        "1011222401229 -> 10,11,2,22,40,12,29",
        "1111111 -> no pick (duplicate_numbers)",
    ]
    assert "LOTTO_DATA_DIR" not in os.environ
