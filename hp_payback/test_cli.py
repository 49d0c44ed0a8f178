"""
Tests for the command-line interface and terminal formatting.

Run with: pytest hp_payback/test_cli.py -v
"""

import json

import pytest

from .cli import main
from .formatter import (
    MISSING, colorize, degrees, dollars, signed_dollars, summarize_result,
    summarize_sweep, years,
)
from .model import calculate
from .sweep import create_default_sweeper


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def config_file(tmp_path):
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path
    return _write


class TestMain:
    """Tests for main()."""

    def test_defaults_summary(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Heat Pump Payback: defaults" in out
        assert "Crossover temperature: 39.0°F" in out
        assert "$11,148" in out

    def test_stdout_json(self, capsys):
        assert main(["--stdout"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["display"]["baseline"] == 11148
        assert data["display"]["hybrid"] == 8091

    def test_matrix(self, capsys):
        assert main(["--matrix"]) == 0
        assert "Dispatch by Temperature Bin" in capsys.readouterr().out

    def test_config_file_and_output(self, config_file, tmp_path, capsys):
        path = config_file({"name": "cheap gas", "inputs": {"gas_supply": 0.3}})
        out_path = tmp_path / "result.json"
        assert main([str(path), "-o", str(out_path), "-q"]) == 0
        assert capsys.readouterr().out == ""
        data = json.loads(out_path.read_text())
        assert data["meta"]["name"] == "cheap gas"

    def test_output_dir(self, config_file, tmp_path):
        path = config_file({"name": "dir run"})
        assert main([str(path), "--output-dir", str(tmp_path / "results"), "-q"]) == 0
        run_dir = tmp_path / "results" / "dir_run"
        assert (run_dir / "results.json").exists()
        assert (run_dir / "summary.txt").exists()
        assert (run_dir / "bins.csv").exists()

    def test_output_dir_name_matches_result_filename(self, config_file, tmp_path):
        path = config_file({"name": "north/side run"})
        assert main([str(path), "--output-dir", str(tmp_path), "-q"]) == 0
        assert (tmp_path / "north_side_run" / "results.json").exists()

    def test_sweep_config(self, config_file, capsys):
        path = config_file({"name": "sweep", "sweep": {"parameter": "afue", "values": [0.8, 0.95]}})
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "Sweep: sweep" in out
        assert "afue" in out

    def test_missing_config(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_unreadable_config(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{broken")
        assert main([str(path)]) == 1
        assert "Could not read" in capsys.readouterr().err

    def test_invalid_config(self, config_file, capsys):
        path = config_file({"name": "bad", "sweep": {"parameter": "nope", "values": [1]}})
        assert main([str(path)]) == 1
        assert "Invalid sweep parameter" in capsys.readouterr().err

    def test_multiple_configs_report_counts(self, config_file, tmp_path, capsys):
        good = config_file({"name": "good"}, "good.json")
        assert main([str(good), str(tmp_path / "missing.json")]) == 1
        assert "Completed: 1 succeeded, 1 failed" in capsys.readouterr().out

    def test_output_with_multiple_configs_rejected(self, config_file):
        a = config_file({"name": "a"}, "a.json")
        b = config_file({"name": "b"}, "b.json")
        with pytest.raises(SystemExit):
            main([str(a), str(b), "-o", "out.json"])

    def test_stdout_with_output_rejected(self):
        with pytest.raises(SystemExit):
            main(["--stdout", "-o", "out.json"])


class TestFormatter:
    """Tests for value formatting and summaries."""

    def test_dollars(self):
        assert dollars(11148.18) == "$11,148"
        assert dollars(-65.18) == "-$65"
        assert dollars(None) == MISSING

    def test_signed_dollars(self):
        assert signed_dollars(2988.09) == "+$2,988"
        assert signed_dollars(-10) == "-$10"

    def test_years_and_degrees(self):
        assert years(2.595) == "2.6 yrs"
        assert years(None) == MISSING
        assert degrees(38.99) == "39.0°F"

    def test_summary_includes_hybrid_split(self):
        text = summarize_result(calculate(), name="x")
        assert "Hybrid split: Gas 30.0 MMBtu | HP 677 kWh" in text
        assert "+$3,057" in text

    def test_summary_without_table_shows_note(self):
        text = summarize_result(calculate(use_cop_table=False))
        assert "Crossover: Provide a COP table" in text
        assert "Hybrid split" not in text

    def test_summary_of_overflowed_result(self):
        """Amounts too large for a float print as the missing marker."""
        text = summarize_result(calculate({"heat_mmbtu": "1e308"}), matrix=True)
        baseline = next(line for line in text.splitlines() if "Baseline (Gas+AC)" in line)
        assert baseline.endswith(MISSING)
        assert "Crossover temperature: 39.0°F" in text

    def test_sweep_summary(self):
        sweep = create_default_sweeper().sweep_parameter("gas_supply", [0.4, 0.6])
        text = summarize_sweep(sweep, name="gas")
        assert "Sweep: gas" in text
        assert "0.4" in text and "0.6" in text

    def test_colorize_marks_savings(self):
        colored = colorize("  ▸ Hybrid: +$3,057\n  ▸ Loss: -$12")
        assert "\033[32m+$3,057" in colored
        assert "\033[31m-$12" in colored
