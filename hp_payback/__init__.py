"""
Heat Pump Break-Even & Payback Calculator

Estimates the annual energy cost, savings and simple payback of replacing
gas heating with an electric heat pump, optionally blended with gas in a
per-temperature-bin "hybrid" dispatch, and finds the outdoor crossover
temperature where the two heat sources cost the same per delivered MMBtu.

Example usage (programmatic):
    from hp_payback import calculate, RateInputs

    result = calculate(RateInputs(gas_supply=0.65))
    print(f"Hybrid saves ${result.savings_hybrid:,.0f}/yr")
    print(f"Crossover: {result.crossover_temp_f:.1f}°F")

Example usage (raw form values, JSON config):
    from hp_payback import calculate, load_config, Runner, save_result

    result = calculate({"kwhBase": "9000", "afue": "0.8"}, cop_table_text="47:3.9, 17:2.4")

    config = load_config("configs/chicago.json")
    run = Runner(config).run()
    save_result(run, "results/chicago.json")

CLI usage:
    hp-payback configs/chicago.json --matrix
"""

from .pairs import (
    Coordinate,
    to_number,
    parse_pairs,
    format_pairs,
    pairs_from_list,
)

from .model import (
    RateInputs,
    CostRates,
    BinDispatch,
    CostCurvePoint,
    CrossoverResult,
    ScenarioResult,
    HeatPumpModel,
    calculate,
    interp_cop,
    normalize_bins,
    kwh_per_mmbtu,
    DEFAULT_COP,
    DEFAULT_COP_TABLE,
    DEFAULT_BINS,
    KWH_PER_MMBTU,
    MMBTU_PER_THERM,
)

from .sweep import (
    ParameterSweeper,
    SweepResult,
    create_default_sweeper,
    sweep_values,
)

from .config import (
    CalculatorConfig,
    SweepSpec,
    load_config,
    save_config,
    validate_config,
)

from .runner import (
    Runner,
    RunResult,
    save_result,
    load_result,
)

# Plotting (optional, requires matplotlib)
from .plot import (
    HAS_MATPLOTLIB,
    plot_scenario_costs,
    plot_cost_curve,
    plot_sweep,
    plot_result,
)

__all__ = [
    # Parsing
    'Coordinate',
    'to_number',
    'parse_pairs',
    'format_pairs',
    'pairs_from_list',
    # Core model
    'RateInputs',
    'CostRates',
    'BinDispatch',
    'CostCurvePoint',
    'CrossoverResult',
    'ScenarioResult',
    'HeatPumpModel',
    'calculate',
    'interp_cop',
    'normalize_bins',
    'kwh_per_mmbtu',
    'DEFAULT_COP',
    'DEFAULT_COP_TABLE',
    'DEFAULT_BINS',
    'KWH_PER_MMBTU',
    'MMBTU_PER_THERM',
    # Sweep utilities
    'ParameterSweeper',
    'SweepResult',
    'create_default_sweeper',
    'sweep_values',
    # Config
    'CalculatorConfig',
    'SweepSpec',
    'load_config',
    'save_config',
    'validate_config',
    # Runner
    'Runner',
    'RunResult',
    'save_result',
    'load_result',
    # Plotting (optional)
    'HAS_MATPLOTLIB',
    'plot_scenario_costs',
    'plot_cost_curve',
    'plot_sweep',
    'plot_result',
]

__version__ = '1.0.0'
