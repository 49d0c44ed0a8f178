"""
Unit tests for the config runner, result files and output directories.

Run with: pytest hp_payback/test_runner.py -v
"""

import csv
import json

import pytest

from .config import CalculatorConfig, SweepSpec
from .output import OutputWriter
from .runner import VERSION, Runner, generate_output_filename, load_result, safe_name, save_result


@pytest.fixture
def single_run():
    return Runner(CalculatorConfig(name="defaults"), config_path="configs/x.json").run()


@pytest.fixture
def sweep_run():
    config = CalculatorConfig(name="gas sweep", sweep=SweepSpec("gas_supply", [0.4, 0.6, 0.8]))
    return Runner(config).run()


class TestRunner:
    """Tests for Runner."""

    def test_single_run(self, single_run):
        assert single_run.results is not None
        assert single_run.sweep_results is None
        assert single_run.meta["name"] == "defaults"
        assert single_run.meta["version"] == VERSION
        assert single_run.meta["config_file"] == "configs/x.json"
        assert single_run.config["name"] == "defaults"

    def test_sweep_run(self, sweep_run):
        assert sweep_run.results is None
        assert sweep_run.sweep_results.param_values == [0.4, 0.6, 0.8]

    def test_invalid_config_raises(self):
        with pytest.raises(ValueError, match="Invalid config"):
            Runner(CalculatorConfig(name="bad", sweep=SweepSpec("nope", [1.0])))

    def test_to_dict_has_raw_and_display(self, single_run):
        d = single_run.to_dict()
        assert d["display"]["baseline"] == 11148
        assert d["results"]["baseline_cost"] == pytest.approx(11148.18)
        assert "sweep_results" not in d

    def test_sweep_to_dict(self, sweep_run):
        d = sweep_run.to_dict()
        assert "results" not in d
        assert len(d["sweep_results"]["points"]) == 3


class TestResultFiles:
    """Tests for save_result(), load_result() and output filenames."""

    def test_save_and_load(self, single_run, tmp_path):
        path = tmp_path / "out" / "result.json"
        save_result(single_run, path)
        loaded = load_result(path)
        assert loaded["meta"]["name"] == "defaults"
        assert loaded["display"]["crossover_temp_f"] == 39.0
        assert len(loaded["results"]["bins"]) == 15

    def test_generate_output_filename(self):
        config = CalculatorConfig(name="my run/2")
        name = generate_output_filename(config, "2026-01-08T12:34:56.789+00:00")
        assert name == "my_run_2_20260108_123456.json"

    def test_safe_name(self):
        assert safe_name("my run/2") == "my_run_2"
        assert safe_name("plain") == "plain"

    def test_generate_output_filename_now(self):
        name = generate_output_filename(CalculatorConfig(name="now"))
        assert name.startswith("now_")
        assert name.endswith(".json")


class TestOutputWriter:
    """Tests for OutputWriter."""

    def test_single_run_files(self, single_run, tmp_path):
        written = OutputWriter(tmp_path / "run").write(single_run, generate_plots=False)
        names = sorted(p.name for p in written)
        assert names == ["bins.csv", "config.json", "cost_curve.csv", "results.json", "summary.txt"]

        with open(tmp_path / "run" / "bins.csv") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 15
        assert {r["fuel"] for r in rows} == {"HP", "Gas"}

        summary = (tmp_path / "run" / "summary.txt").read_text(encoding="utf-8")
        assert "Dispatch by Temperature Bin" in summary

        config = json.loads((tmp_path / "run" / "config.json").read_text())
        assert config["name"] == "defaults"

    def test_seasonal_run_skips_empty_tables(self, tmp_path):
        run = Runner(CalculatorConfig(name="seasonal", use_cop_table=False)).run()
        written = OutputWriter(tmp_path).write(run, generate_plots=False)
        names = {p.name for p in written}
        assert "bins.csv" not in names
        assert "cost_curve.csv" not in names

    def test_sweep_files(self, sweep_run, tmp_path):
        written = OutputWriter(tmp_path).write(sweep_run, generate_plots=False)
        assert "sweep.csv" in {p.name for p in written}
        with open(tmp_path / "sweep.csv") as f:
            rows = list(csv.DictReader(f))
        assert [float(r["value"]) for r in rows] == [0.4, 0.6, 0.8]
