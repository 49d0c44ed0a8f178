"""
Parameter sweep utilities for the heat pump payback model.

Provides functions for sweeping one rate input and seeing how costs,
payback and the crossover temperature respond.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence
import numpy as np

from .model import (
    DEFAULT_BINS, DEFAULT_COP_TABLE, HeatPumpModel, RateInputs,
    ScenarioResult, RATE_INPUT_FIELDS, normalize_bins,
)
from .pairs import parse_pairs


SWEEPABLE_PARAMETERS = list(RATE_INPUT_FIELDS)


@dataclass
class SweepResult:
    """Result of a parameter sweep."""
    param_name: str
    param_values: List[float]
    baseline_cost: List[Optional[float]] = field(default_factory=list)
    all_electric_cost: List[Optional[float]] = field(default_factory=list)
    hybrid_cost: List[Optional[float]] = field(default_factory=list)
    savings_all_electric: List[Optional[float]] = field(default_factory=list)
    savings_hybrid: List[Optional[float]] = field(default_factory=list)
    payback_all_electric: List[Optional[float]] = field(default_factory=list)
    payback_hybrid: List[Optional[float]] = field(default_factory=list)
    crossover_temp_f: List[Optional[float]] = field(default_factory=list)

    def rows(self) -> List[Dict[str, Any]]:
        """One dict per swept value (for tables and CSV)."""
        return [
            {
                "value": value,
                "baseline_cost": self.baseline_cost[i],
                "all_electric_cost": self.all_electric_cost[i],
                "hybrid_cost": self.hybrid_cost[i],
                "savings_all_electric": self.savings_all_electric[i],
                "savings_hybrid": self.savings_hybrid[i],
                "payback_all_electric": self.payback_all_electric[i],
                "payback_hybrid": self.payback_hybrid[i],
                "crossover_temp_f": self.crossover_temp_f[i],
            }
            for i, value in enumerate(self.param_values)
        ]

    def to_dict(self) -> dict:
        return {"param_name": self.param_name, "points": self.rows()}


class ParameterSweeper:
    """
    Utility class for sweeping one RateInputs field.

    The base inputs are never modified; every point is evaluated on a
    copy with the swept field replaced.
    """

    def __init__(
        self,
        inputs: Optional[RateInputs] = None,
        cop_table_text: str = DEFAULT_COP_TABLE,
        bins_text: str = DEFAULT_BINS,
        use_cop_table: bool = True,
    ):
        self.inputs = inputs or RateInputs()
        self.use_cop_table = use_cop_table
        self.cop_table = parse_pairs(cop_table_text)
        self.bins = normalize_bins(parse_pairs(bins_text))

    def evaluate(self, inputs: Optional[RateInputs] = None) -> ScenarioResult:
        """Evaluate the tables against the given (or base) inputs."""
        model = HeatPumpModel(inputs or self.inputs)
        return model.evaluate(self.cop_table, self.bins, self.use_cop_table)

    def sweep_parameter(self, param_name: str, values: Sequence[float]) -> SweepResult:
        """
        Sweep a parameter and record the headline metrics at each value.

        param_name must be a RateInputs field.
        """
        if param_name not in SWEEPABLE_PARAMETERS:
            raise ValueError(f"Unknown sweep parameter: {param_name}. "
                             f"Valid: {SWEEPABLE_PARAMETERS}")

        result = SweepResult(param_name=param_name, param_values=[float(v) for v in values])
        for value in result.param_values:
            point = self.evaluate(replace(self.inputs, **{param_name: value}))
            result.baseline_cost.append(point.baseline_cost)
            result.all_electric_cost.append(point.all_electric_cost)
            result.hybrid_cost.append(point.hybrid_cost)
            result.savings_all_electric.append(point.savings_all_electric)
            result.savings_hybrid.append(point.savings_hybrid)
            result.payback_all_electric.append(point.payback_all_electric)
            result.payback_hybrid.append(point.payback_hybrid)
            result.crossover_temp_f.append(point.crossover_temp_f)
        return result


def sweep_values(start: float, stop: float, step: float) -> List[float]:
    """Inclusive range from start to stop (half a step of slack at the end)."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return [float(v) for v in np.arange(start, stop + step / 2, step)]


def create_default_sweeper(**kwargs) -> ParameterSweeper:
    """Create a ParameterSweeper on default inputs, overriding RateInputs fields with kwargs."""
    return ParameterSweeper(inputs=RateInputs(**kwargs))
