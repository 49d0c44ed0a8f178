"""
Smoke tests for plotting. Skipped when matplotlib is not installed.

Run with: pytest hp_payback/test_plot.py -v
"""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from .config import CalculatorConfig, SweepSpec
from .model import calculate
from .output import OutputWriter
from .plot import close_figure, plot_cost_curve, plot_result, plot_scenario_costs, plot_sweep
from .runner import Runner
from .sweep import create_default_sweeper


class TestPlots:
    """Each plot renders and saves without error."""

    def test_scenario_costs(self, tmp_path):
        path = tmp_path / "costs.png"
        fig = plot_scenario_costs(calculate(), save_path=path, show=False)
        close_figure(fig)
        assert path.exists()

    def test_cost_curve(self, tmp_path):
        path = tmp_path / "curve.png"
        fig = plot_cost_curve(calculate(), save_path=path, show=False)
        close_figure(fig)
        assert path.exists()

    @pytest.mark.parametrize("metric", ["savings", "payback", "cost"])
    def test_sweep(self, metric, tmp_path):
        sweep = create_default_sweeper().sweep_parameter("gas_supply", [0.3, 0.5, 0.7])
        path = tmp_path / f"{metric}.png"
        close_figure(plot_sweep(sweep, metric=metric, save_path=path, show=False))
        assert path.exists()

    def test_sweep_unknown_metric(self):
        sweep = create_default_sweeper().sweep_parameter("afue", [0.9])
        with pytest.raises(ValueError, match="Unknown metric"):
            plot_sweep(sweep, metric="carbon", show=False)

    def test_plot_result_seasonal(self, tmp_path):
        run = Runner(CalculatorConfig(name="seasonal", use_cop_table=False)).run()
        path = tmp_path / "seasonal.png"
        close_figure(plot_result(run, save_path=path, show=False))
        assert path.exists()

    def test_output_writer_plots(self, tmp_path):
        config = CalculatorConfig(name="s", sweep=SweepSpec("credits", [0, 2600]))
        written = OutputWriter(tmp_path).write(Runner(config).run(), generate_plots=True)
        assert tmp_path / "plots" / "result.png" in written
