"""Tests for the CLI entry point."""

import json
from unittest.mock import patch

import pytest

from src.constats.cli import main


def test_generated_samples_report(capsys):
    main(["-n", "1000", "--seed", "3"])
    captured = capsys.readouterr()
    assert "Sample Size            : 1000" in captured.out
    assert "Summary:" in captured.out
    assert "Generated 1,000 samples" in captured.err


def test_split_report(capsys):
    main(["-n", "400", "--seed", "3", "--split"])
    out = capsys.readouterr().out
    assert "Part 4/4" in out
    assert out.count("Sample Size            : 100") == 4


def test_input_file(tmp_path, capsys):
    path = tmp_path / "samples.txt"
    path.write_text("\n".join(str(v) for v in [-6, 5, 5, 5, 5, 5, 5, 5, 5, 5]))
    main(["-i", str(path)])
    out = capsys.readouterr().out
    assert "Outlier Count   : 1" in out


def test_fixed_threshold_flag(tmp_path, capsys):
    path = tmp_path / "samples.txt"
    path.write_text("\n".join(str(v) for v in [-6, 5, 5, 5, 5, 5, 5, 5, 5, 5]))
    main(["-i", str(path), "--threshold", "100"])
    assert "Outlier Count   : 0" in capsys.readouterr().out


def test_missing_input_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-i", str(tmp_path / "nope.txt")])
    assert exc_info.value.code == 1
    assert "[FAIL]" in capsys.readouterr().err


def test_negative_threshold_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-n", "10", "--threshold", "-1"])
    assert exc_info.value.code == 1
    assert "non-negative" in capsys.readouterr().err


def test_plot_written(tmp_path, capsys):
    target = tmp_path / "hist.png"
    main(["-n", "500", "--seed", "1", "--plot", str(target)])
    assert target.is_file()
    assert target.stat().st_size > 0


def test_plot_split_names(tmp_path, capsys):
    target = tmp_path / "hist.png"
    with patch("src.constats.cli.plot_zhistogram") as plot:
        main(["-n", "400", "--seed", "1", "--split", "--plot", str(target)])
    paths = [c.args[2] for c in plot.call_args_list]
    assert [p.name for p in paths] == [f"hist_part{i}.png" for i in range(1, 5)]


def test_log_file(tmp_path, capsys):
    log_path = tmp_path / "logs" / "runs.jsonl"
    main(["-n", "200", "--seed", "9", "--log-file", str(log_path)])
    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert len(records) == 1
    assert records[0]["event"] == "analysis_complete"
    assert records[0]["count"] == 200
    assert records[0]["strategy"] == "sketch"


def test_non_utf8_input_exits_1(tmp_path, capsys):
    path = tmp_path / "samples.txt"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(SystemExit) as exc_info:
        main(["-i", str(path)])
    assert exc_info.value.code == 1
    assert "UTF-8" in capsys.readouterr().err


def test_corrupt_npy_input_exits_1(tmp_path, capsys):
    path = tmp_path / "samples.npy"
    path.write_bytes(b"garbage")
    with pytest.raises(SystemExit) as exc_info:
        main(["-i", str(path)])
    assert exc_info.value.code == 1
    assert "[FAIL]" in capsys.readouterr().err


def test_range_beyond_int64_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-n", "10", "--low", str(-(2**70))])
    assert exc_info.value.code == 1
    assert "64-bit" in capsys.readouterr().err


def test_degenerate_log_record_is_strict_json(tmp_path, capsys):
    path = tmp_path / "samples.txt"
    path.write_text("1\n3\n")
    log_path = tmp_path / "runs.jsonl"
    main(["-i", str(path), "--threshold", "0", "--log-file", str(log_path)])

    def reject(token):
        raise ValueError(f"non-standard JSON constant {token}")

    (line,) = log_path.read_text().splitlines()
    record = json.loads(line, parse_constant=reject)
    assert record["outlier_count"] == 2
    assert record["norm_mean"] is None
    assert record["norm_min"] is None
    assert record["tolerance"] == 0


def test_unbounded_tolerance_logged_as_null(tmp_path, capsys):
    log_path = tmp_path / "runs.jsonl"
    main(["-n", "100", "--seed", "2", "--low", str(-(2**62)), "--high", str(2**62),
          "--log-file", str(log_path)])
    record = json.loads(log_path.read_text().splitlines()[0])
    assert record["tolerance"] is None
    assert record["outlier_count"] == 0


def test_degenerate_plot_is_skipped_with_warning(tmp_path, capsys):
    path = tmp_path / "samples.txt"
    path.write_text("1\n3\n")
    target = tmp_path / "hist.png"
    main(["-i", str(path), "--threshold", "0", "--plot", str(target)])
    assert not target.exists()
    assert "[WARN]" in capsys.readouterr().err
