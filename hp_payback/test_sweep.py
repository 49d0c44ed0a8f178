"""
Unit tests for parameter sweeps.

Run with: pytest hp_payback/test_sweep.py -v
"""

import pytest

from .model import RateInputs, calculate
from .sweep import ParameterSweeper, SWEEPABLE_PARAMETERS, create_default_sweeper, sweep_values


class TestParameterSweeper:
    """Tests for ParameterSweeper."""

    def test_evaluate_matches_calculate(self):
        sweeper = ParameterSweeper()
        assert sweeper.evaluate().to_dict() == calculate().to_dict()

    def test_sweep_gas_supply(self):
        sweeper = create_default_sweeper()
        result = sweeper.sweep_parameter("gas_supply", [0.3, 0.52, 1.0])

        assert result.param_name == "gas_supply"
        assert result.param_values == [0.3, 0.52, 1.0]
        assert len(result.baseline_cost) == 3
        # Pricier gas raises the gas baseline and the savings from switching
        assert result.baseline_cost[0] < result.baseline_cost[1] < result.baseline_cost[2]
        assert result.savings_hybrid[0] < result.savings_hybrid[2]
        # All-electric cost doesn't depend on gas price
        assert result.all_electric_cost[0] == pytest.approx(result.all_electric_cost[2])

    def test_sweep_point_matches_single_run(self):
        result = create_default_sweeper().sweep_parameter("gas_supply", [0.65])
        single = calculate(RateInputs(gas_supply=0.65))
        assert result.hybrid_cost[0] == pytest.approx(single.hybrid_cost)
        assert result.crossover_temp_f[0] == pytest.approx(single.crossover_temp_f)

    def test_crossover_moves_colder_as_gas_gets_pricier(self):
        result = create_default_sweeper().sweep_parameter("gas_supply", [0.52, 0.8])
        assert result.crossover_temp_f[1] < result.crossover_temp_f[0]

    def test_base_inputs_untouched(self):
        sweeper = create_default_sweeper(kwh_base=9000)
        sweeper.sweep_parameter("kwh_base", [1000, 2000])
        assert sweeper.inputs.kwh_base == 9000

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown sweep parameter"):
            create_default_sweeper().sweep_parameter("not_a_field", [1.0])

    def test_seasonal_sweep_has_no_hybrid(self):
        sweeper = ParameterSweeper(use_cop_table=False)
        result = sweeper.sweep_parameter("seasonal_cop", [2.0, 3.0])
        assert result.hybrid_cost == [None, None]
        assert result.crossover_temp_f == [None, None]
        assert result.all_electric_cost[1] < result.all_electric_cost[0]

    def test_rows_and_to_dict(self):
        result = create_default_sweeper().sweep_parameter("credits", [0, 2600])
        rows = result.rows()
        assert [r["value"] for r in rows] == [0.0, 2600.0]
        assert rows[1]["payback_all_electric"] < rows[0]["payback_all_electric"]
        d = result.to_dict()
        assert d["param_name"] == "credits"
        assert d["points"] == rows

    def test_non_finite_values_use_the_default(self):
        result = create_default_sweeper().sweep_parameter("gas_supply", [float("inf"), float("nan")])
        default = calculate().baseline_cost
        assert result.baseline_cost == [pytest.approx(default), pytest.approx(default)]

    def test_every_rate_input_is_sweepable(self):
        assert "afue" in SWEEPABLE_PARAMETERS
        assert "dfc_electric_heat_c" in SWEEPABLE_PARAMETERS
        assert len(SWEEPABLE_PARAMETERS) == 12


class TestSweepValues:
    """Tests for sweep_values()."""

    def test_inclusive_range(self):
        assert sweep_values(0, 1, 0.25) == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_float_step_reaches_stop(self):
        values = sweep_values(0.3, 0.9, 0.1)
        assert len(values) == 7
        assert values[-1] == pytest.approx(0.9)

    def test_step_must_be_positive(self):
        with pytest.raises(ValueError):
            sweep_values(0, 1, 0)
