"""
Heat Pump vs Gas Heating Cost / Payback Model

This module provides a first-order temperature-bin model of annual heating
cost for three ways of heating the same home:
- Baseline: gas furnace for heat, electricity for everything else
- All-Electric: heat pump serves the entire heat load
- Hybrid: per temperature bin, whichever of heat pump or gas is cheaper

It also finds the crossover temperature where heat-pump and gas cost per
delivered MMBtu are equal, and derives savings, simple payback and the
delivery-charge (DFC) benefit of moving to an electric-heat rate class.

Every calculation is a pure function of its inputs. Degenerate inputs are
replaced by fallbacks rather than raised, and any amount that would still
overflow is reported as None, so no result field is ever NaN or infinite.
"""

from dataclasses import dataclass, field, asdict, fields
from decimal import Decimal, ROUND_HALF_DOWN, ROUND_HALF_UP, localcontext
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
import logging
import math

from .pairs import Coordinate, parse_pairs, to_number

logger = logging.getLogger(__name__)


# --- Physical constants ---

KWH_PER_MMBTU = 293.071   # thermal -> electric conversion
MMBTU_PER_THERM = 0.1

# COP assumed when no table is available (kept exact for reproducibility)
DEFAULT_COP = 2.2
DEFAULT_AFUE = 0.95

# Crossover scan always covers at least this range (°F)
CROSSOVER_MIN_F = -20.0
CROSSOVER_MAX_F = 65.0
# ...and never more than this, whatever the COP table says
CROSSOVER_SCAN_LIMIT_F = 200.0

FUEL_HP = "HP"
FUEL_GAS = "Gas"

NOTE_HP_CHEAPER = "HP cheaper at all modeled temperatures"
NOTE_GAS_CHEAPER = "Gas cheaper at all modeled temperatures"
NOTE_OUTSIDE_RANGE = "Crossover outside modeled temperature range"
NOTE_NEED_TABLE = "Provide a COP table to compute a precise crossover temperature"


# Chicago-style defaults
DEFAULT_COP_TABLE = """60:3.77
55:3.56
50:3.39
45:3.24
40:3.12
35:2.75
30:2.62
25:2.50
20:2.37
15:2.24
10:2.11
5:2.00
0:1.87
-5:1.74
-10:1.65"""

DEFAULT_BINS = """60:0
55:2
50:4
45:6
40:8
35:11
30:13
25:14
20:13
15:10
10:8
5:6
0:3
-5:1.5
-10:0.5"""


@dataclass(frozen=True)
class RateInputs:
    """
    Economic and physical parameters for one calculation.

    Electric rates are in cents/kWh, gas rates in $/therm, costs in $.
    """
    kwh_base: float = 97300.0            # Non-heating electricity use (kWh/yr)
    supply_c: float = 3.331              # Electric supply (¢/kWh)
    transmission_c: float = 1.767        # Electric transmission (¢/kWh)
    dfc_non_heating_c: float = 6.062     # Delivery charge, non-electric-heat class
    dfc_electric_heat_c: float = 2.924   # Delivery charge, electric-heat class
    gas_supply: float = 0.52             # $/therm
    gas_delivery: float = 0.2134         # $/therm
    afue: float = DEFAULT_AFUE           # Furnace efficiency (0-1)
    heat_mmbtu: float = 37.5             # Annual delivered heat load (MMBtu/yr)
    seasonal_cop: float = DEFAULT_COP    # Used when no COP table is in play
    gross_cost: float = 10354.0          # Installed equipment cost ($)
    credits: float = 2600.0              # Tax credits / rebates ($)

    def __post_init__(self):
        # Non-finite or non-numeric fields take their default, however constructed
        for f in fields(self):
            value = getattr(self, f.name)
            number = to_number(value, math.nan)
            if math.isnan(number):
                logger.warning("%s=%r is not a finite number; using %s", f.name, value, f.default)
                number = f.default
            object.__setattr__(self, f.name, number)

    @property
    def net_cost(self) -> float:
        """Equipment cost after credits."""
        return self.gross_cost - self.credits

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_raw(cls, data: Optional[Mapping[str, Any]] = None) -> "RateInputs":
        """
        Build inputs from raw form values, falling back to defaults.

        Each known field is coerced with to_number(); missing, blank,
        non-numeric or non-finite values take the field default. Unknown
        keys are ignored. The camelCase names of the web calculator
        form (kwhBase, dfcEH, ...) are accepted as aliases.

        Args:
            data: Mapping of field name (or alias) -> raw value

        Returns:
            RateInputs with every field finite
        """
        raw = {}
        for key, value in (data or {}).items():
            name = RAW_ALIASES.get(key, key)
            if name in RATE_INPUT_FIELDS:
                raw[name] = value

        defaults = cls()
        return cls(**{
            name: to_number(raw.get(name), getattr(defaults, name))
            for name in RATE_INPUT_FIELDS
        })


RATE_INPUT_FIELDS = tuple(f.name for f in fields(RateInputs))

RAW_ALIASES: Dict[str, str] = {
    "kwhBase": "kwh_base",
    "supplyC": "supply_c",
    "txC": "transmission_c",
    "dfcNon": "dfc_non_heating_c",
    "dfcEH": "dfc_electric_heat_c",
    "gasSupply": "gas_supply",
    "gasDist": "gas_delivery",
    "heatMMBtu": "heat_mmbtu",
    "seasonalCOP": "seasonal_cop",
    "gross": "gross_cost",
}


def _effective_afue(afue: float) -> float:
    if not afue > 0:
        logger.warning("AFUE %r is not positive; using %s", afue, DEFAULT_AFUE)
        return DEFAULT_AFUE
    return afue


def _effective_cop(cop: float) -> float:
    if not cop > 0:
        logger.warning("COP %r is not positive; using %s", cop, DEFAULT_COP)
        return DEFAULT_COP
    return cop


def kwh_per_mmbtu(cop: float) -> float:
    """kWh of electricity needed to deliver 1 MMBtu of heat at the given COP."""
    return KWH_PER_MMBTU / _effective_cop(cop)


@dataclass(frozen=True)
class CostRates:
    """
    Blended per-unit energy costs derived from RateInputs.

    The electric-heat delivery class is typically cheaper than the
    non-heating class; it applies once the home heats electrically.
    """
    gas_unit_cost: float                # $/therm (supply + delivery)
    electric_rate_non_heating: float    # $/kWh
    electric_rate_electric_heat: float  # $/kWh
    gas_cost_per_mmbtu: float           # $ per delivered MMBtu from the furnace
    afue: float                         # Efficiency actually used (after fallback)

    @classmethod
    def from_inputs(cls, inputs: RateInputs) -> "CostRates":
        afue = _effective_afue(inputs.afue)
        gas_unit_cost = inputs.gas_supply + inputs.gas_delivery
        return cls(
            gas_unit_cost=gas_unit_cost,
            electric_rate_non_heating=(
                inputs.supply_c + inputs.transmission_c + inputs.dfc_non_heating_c) / 100,
            electric_rate_electric_heat=(
                inputs.supply_c + inputs.transmission_c + inputs.dfc_electric_heat_c) / 100,
            gas_cost_per_mmbtu=(1 / MMBTU_PER_THERM / afue) * gas_unit_cost,
            afue=afue,
        )

    def therms_for_heat(self, mmbtu: float) -> float:
        """Therms of gas burned to deliver mmbtu of heat."""
        return mmbtu / MMBTU_PER_THERM / self.afue

    def hp_cost_per_mmbtu(self, cop: float) -> float:
        """$ per delivered MMBtu from the heat pump at the given COP."""
        return kwh_per_mmbtu(cop) * self.electric_rate_electric_heat


def interp_cop(table: Sequence[Coordinate], temp_f: float) -> float:
    """
    Piecewise-linear COP lookup with flat extrapolation.

    Args:
        table: COP samples sorted ascending by outdoor temperature
        temp_f: Outdoor temperature (°F)

    Returns:
        Interpolated COP; DEFAULT_COP for an empty table
    """
    if not table:
        return DEFAULT_COP
    if temp_f <= table[0].x:
        return table[0].y  # cold side: flat
    if temp_f >= table[-1].x:
        return table[-1].y  # warm side: flat
    for a, b in zip(table, table[1:]):
        if a.x <= temp_f <= b.x:
            frac = (temp_f - a.x) / ((b.x - a.x) or 1)
            return a.y + frac * (b.y - a.y)
    return table[-1].y


def normalize_bins(bins: Sequence[Coordinate]) -> List[Coordinate]:
    """
    Rescale bin weights so they sum to 100, keeping temperatures.

    A zero total is treated as 1, so all-zero weights stay zero.
    """
    total = sum(b.y for b in bins) or 1
    return [Coordinate(b.x, b.y * 100 / total) for b in bins]


def _round_display(value: float, digits: int = 0) -> Union[int, float]:
    """
    Round for display the way the calculator UI does, not like round().

    Whole numbers round halves toward +inf (-100.5 -> -100, like
    Math.round); decimal places round halves away from zero (like toFixed).
    """
    if digits == 0:
        rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    else:
        rounding = ROUND_HALF_UP
    # Enough precision for any finite float at two decimals
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=rounding)
    return int(rounded) if digits == 0 else float(rounded)


def _round_opt(value: Optional[float], digits: int = 0) -> Optional[Union[int, float]]:
    if value is None or not math.isfinite(value):
        return None
    return _round_display(value, digits)


def _clamp_at_zero(value: Optional[int]) -> Optional[int]:
    return None if value is None else max(0, value)


def _drop_non_finite(record, level: int = logging.WARNING):
    """Replace inf/NaN float fields of a result dataclass with None, in place."""
    for f in fields(record):
        value = getattr(record, f.name)
        if isinstance(value, float) and not math.isfinite(value):
            logger.log(level, "%s.%s overflowed to %r; reporting it as absent",
                       type(record).__name__, f.name, value)
            setattr(record, f.name, None)
    return record


@dataclass
class BinDispatch:
    """One row of the hybrid dispatch matrix."""
    temp_f: float
    share_pct: float            # Share of annual heat load (normalized)
    heat_mmbtu: float           # Heat delivered in this bin
    cop: float
    hp_cost_per_mmbtu: Optional[float]
    gas_cost_per_mmbtu: Optional[float]
    fuel: str                   # FUEL_HP or FUEL_GAS, whichever is cheaper
    hp_kwh: Optional[float]     # Electricity if served by the heat pump
    cost: Optional[float]       # Cost of the chosen fuel for this bin

    @property
    def hp_cheaper(self) -> bool:
        return self.fuel == FUEL_HP


@dataclass
class CostCurvePoint:
    """Heat-pump vs gas cost per delivered MMBtu at one temperature."""
    temp_f: float
    hp_cost: Optional[float]
    gas_cost: Optional[float]


@dataclass
class CrossoverResult:
    """
    Outcome of the crossover search.

    temp_f is None when no crossover exists in the scanned range or no
    usable COP table was given; note then says why.
    """
    temp_f: Optional[float]
    note: str = ""
    curve: List[CostCurvePoint] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.temp_f is not None


@dataclass
class ScenarioResult:
    """
    Results from evaluating all three scenarios.

    Any amount that overflows to inf or NaN (absurdly large inputs) is
    reported as None rather than as a non-finite number.
    """
    use_cop_table: bool

    # Annual cost ($/yr)
    baseline_cost: Optional[float]
    all_electric_cost: Optional[float]
    hybrid_cost: Optional[float]  # None unless a COP table is used

    # Energy
    heating_kwh: Optional[float]            # All-electric heat pump kWh
    hybrid_hp_kwh: Optional[float]
    hybrid_gas_mmbtu: Optional[float]

    # Derived metrics
    savings_all_electric: Optional[float]
    savings_hybrid: Optional[float]
    payback_all_electric: Optional[float]   # Years; None when savings <= 0
    payback_hybrid: Optional[float]
    dfc_savings: Optional[float]
    gas_heat_cost: Optional[float]
    hp_heat_cost: Optional[float]
    fuel_switch_savings: Optional[float]    # Unclamped; may be negative

    # Crossover
    crossover_temp_f: Optional[float]
    crossover_note: str

    bins: List[BinDispatch] = field(default_factory=list)
    cost_curve: List[CostCurvePoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    def chart_data(self) -> List[Dict[str, Any]]:
        """Bar-chart series of the scenario costs, rounded to dollars (None if overflowed)."""
        chart = [
            {"name": "Baseline (Gas+AC)", "cost": _round_opt(self.baseline_cost)},
            {"name": "All-Electric HP", "cost": _round_opt(self.all_electric_cost)},
        ]
        if self.use_cop_table:
            chart.append({"name": "Hybrid (cheapest)", "cost": _round_opt(self.hybrid_cost)})
        return chart

    def display(self) -> Dict[str, Any]:
        """
        Rounded presentation record.

        Dollars and kWh to whole numbers; payback, hybrid gas MMBtu and
        crossover to one decimal; cost curve to cents. Fuel-switch savings
        are clamped at zero here (and only here).
        """
        return {
            "baseline": _round_opt(self.baseline_cost),
            "all_electric": _round_opt(self.all_electric_cost),
            "hybrid": _round_opt(self.hybrid_cost),
            "hybrid_gas_mmbtu": _round_opt(self.hybrid_gas_mmbtu, 1),
            "hybrid_hp_kwh": _round_opt(self.hybrid_hp_kwh),
            "savings_all_electric": _round_opt(self.savings_all_electric),
            "savings_hybrid": _round_opt(self.savings_hybrid),
            "payback_all_electric": _round_opt(self.payback_all_electric, 1),
            "payback_hybrid": _round_opt(self.payback_hybrid, 1),
            "dfc_savings": _round_opt(self.dfc_savings),
            "gas_heat_cost": _round_opt(self.gas_heat_cost),
            "hp_heat_cost": _round_opt(self.hp_heat_cost),
            "fuel_switch_savings": _clamp_at_zero(_round_opt(self.fuel_switch_savings)),
            "crossover_temp_f": _round_opt(self.crossover_temp_f, 1),
            "crossover_note": self.crossover_note,
            "chart": self.chart_data(),
            "cost_curve": [
                {
                    "t": p.temp_f,
                    "hp_cost": _round_opt(p.hp_cost, 2),
                    "gas_cost": _round_opt(p.gas_cost, 2),
                }
                for p in self.cost_curve
            ],
        }


class HeatPumpModel:
    """
    Core model for comparing gas, heat pump and hybrid heating costs.
    """

    def __init__(self, inputs: RateInputs):
        self.inputs = inputs
        self.rates = CostRates.from_inputs(inputs)

    # --- Scenario costs ---

    def baseline_cost(self) -> float:
        """Non-heating electricity at the non-heating rate plus gas heat."""
        inputs, rates = self.inputs, self.rates
        electric = inputs.kwh_base * rates.electric_rate_non_heating
        return electric + self.gas_heat_cost()

    def gas_heat_cost(self) -> float:
        """Cost of serving the full heat load with the furnace."""
        return self.rates.therms_for_heat(self.inputs.heat_mmbtu) * self.rates.gas_unit_cost

    def heating_kwh_from_bins(
        self,
        cop_table: Sequence[Coordinate],
        bins: Sequence[Coordinate],
    ) -> float:
        """Heat pump kWh summed over normalized bins, each at its own COP."""
        total = 0.0
        for b in bins:
            cop = _effective_cop(interp_cop(cop_table, b.x))
            mmbtu = self.inputs.heat_mmbtu * (b.y / 100)
            total += (mmbtu * KWH_PER_MMBTU) / cop
        return total

    def heating_kwh_seasonal(self) -> float:
        """Heat pump kWh for the whole load at the single seasonal COP."""
        cop = _effective_cop(self.inputs.seasonal_cop)
        return self.inputs.heat_mmbtu * KWH_PER_MMBTU / cop

    def all_electric_cost(self, heating_kwh: float) -> float:
        """All electricity (base + heating) billed at the electric-heat rate."""
        return (self.inputs.kwh_base + heating_kwh) * self.rates.electric_rate_electric_heat

    def dispatch_bins(
        self,
        cop_table: Sequence[Coordinate],
        bins: Sequence[Coordinate],
    ) -> List[BinDispatch]:
        """
        Choose the cheaper fuel for each normalized bin.

        Ties go to the heat pump.
        """
        rates = self.rates
        gas_cost = rates.gas_cost_per_mmbtu
        rows = []
        for b in bins:
            cop = _effective_cop(interp_cop(cop_table, b.x))
            mmbtu = self.inputs.heat_mmbtu * (b.y / 100)
            kwh_per = KWH_PER_MMBTU / cop
            hp_cost = kwh_per * rates.electric_rate_electric_heat
            if hp_cost <= gas_cost:
                fuel, cost = FUEL_HP, mmbtu * hp_cost
            else:
                fuel, cost = FUEL_GAS, mmbtu * gas_cost
            rows.append(BinDispatch(
                temp_f=b.x,
                share_pct=b.y,
                heat_mmbtu=mmbtu,
                cop=cop,
                hp_cost_per_mmbtu=hp_cost,
                gas_cost_per_mmbtu=gas_cost,
                fuel=fuel,
                hp_kwh=mmbtu * kwh_per,
                cost=cost,
            ))
        return rows

    def hybrid_cost(self, dispatch: Sequence[BinDispatch]) -> float:
        """Base electricity at the electric-heat rate plus each bin's chosen cost."""
        base = self.inputs.kwh_base * self.rates.electric_rate_electric_heat
        return base + sum(row.cost for row in dispatch)

    # --- Crossover ---

    def hp_cost_at(self, cop_table: Sequence[Coordinate], temp_f: float) -> float:
        """Heat pump $ per delivered MMBtu at an outdoor temperature."""
        return self.rates.hp_cost_per_mmbtu(interp_cop(cop_table, temp_f))

    def find_crossover(self, cop_table: Sequence[Coordinate]) -> CrossoverResult:
        """
        Find the outdoor temperature where heat pump and gas cost the same.

        Scans whole-degree steps from min(-20, coldest sample) to
        max(65, warmest sample), clipped to ±CROSSOVER_SCAN_LIMIT_F. At the first step where the cost
        difference changes sign (or touches zero) the zero crossing is
        linearly interpolated between the two grid points.

        Args:
            cop_table: COP samples sorted by temperature

        Returns:
            CrossoverResult with the temperature (unrounded) or a note, and
            the full cost curve over the scanned range
        """
        if len(cop_table) < 2:
            return CrossoverResult(temp_f=None, note=NOTE_NEED_TABLE)

        gas_cost = self.rates.gas_cost_per_mmbtu
        t_min = min(CROSSOVER_MIN_F, cop_table[0].x)
        t_max = max(CROSSOVER_MAX_F, cop_table[-1].x)
        if t_min < -CROSSOVER_SCAN_LIMIT_F or t_max > CROSSOVER_SCAN_LIMIT_F:
            logger.warning("COP table spans %s..%s°F; scanning only %s..%s°F",
                           t_min, t_max, -CROSSOVER_SCAN_LIMIT_F, CROSSOVER_SCAN_LIMIT_F)
            t_min = max(t_min, -CROSSOVER_SCAN_LIMIT_F)
            t_max = min(t_max, CROSSOVER_SCAN_LIMIT_F)
        grid = [t_min + step for step in range(int(math.floor(t_max - t_min)) + 1)]

        curve = [CostCurvePoint(t, self.hp_cost_at(cop_table, t), gas_cost) for t in grid]
        diffs = [p.hp_cost - gas_cost for p in curve]

        for i in range(1, len(grid)):
            prev_diff, diff = diffs[i - 1], diffs[i]
            if (prev_diff <= 0 and diff >= 0) or (prev_diff >= 0 and diff <= 0):
                if abs(diff - prev_diff) < 1e-9:
                    frac = 0.0
                else:
                    frac = -prev_diff / (diff - prev_diff)
                temp = grid[i - 1] + frac * (grid[i] - grid[i - 1])
                if math.isfinite(temp):
                    return CrossoverResult(temp_f=temp, curve=curve)

        if diffs[0] < 0 and diffs[-1] < 0:
            note = NOTE_HP_CHEAPER
        elif diffs[0] > 0 and diffs[-1] > 0:
            note = NOTE_GAS_CHEAPER
        else:
            note = NOTE_OUTSIDE_RANGE
        return CrossoverResult(temp_f=None, note=note, curve=curve)

    # --- Full evaluation ---

    def payback_years(self, savings: Optional[float]) -> Optional[float]:
        """Simple payback on net cost; None unless savings are positive."""
        if savings is None or not math.isfinite(savings) or savings <= 0:
            return None
        years = self.inputs.net_cost / savings
        return years if math.isfinite(years) else None

    def evaluate(
        self,
        cop_table: Sequence[Coordinate],
        bins: Sequence[Coordinate],
        use_cop_table: bool = True,
    ) -> ScenarioResult:
        """
        Evaluate Baseline, All-Electric and Hybrid scenarios.

        Args:
            cop_table: Parsed, sorted COP table (ignored unless use_cop_table)
            bins: Normalized weather bins (ignored unless use_cop_table)
            use_cop_table: Bin the load by temperature and run hybrid dispatch;
                otherwise use the seasonal COP and skip hybrid/crossover

        Returns:
            ScenarioResult
        """
        inputs, rates = self.inputs, self.rates
        baseline = self.baseline_cost()

        hybrid = None
        hybrid_hp_kwh = None
        hybrid_gas_mmbtu = None
        dispatch: List[BinDispatch] = []

        if use_cop_table:
            heating_kwh = self.heating_kwh_from_bins(cop_table, bins)
            dispatch = self.dispatch_bins(cop_table, bins)
            hybrid = self.hybrid_cost(dispatch)
            hybrid_hp_kwh = sum(r.hp_kwh for r in dispatch if r.hp_cheaper)
            hybrid_gas_mmbtu = sum(r.heat_mmbtu for r in dispatch if not r.hp_cheaper)
            crossover = self.find_crossover(cop_table)
        else:
            heating_kwh = self.heating_kwh_seasonal()
            crossover = CrossoverResult(temp_f=None, note=NOTE_NEED_TABLE)

        all_electric = self.all_electric_cost(heating_kwh)

        savings_all = baseline - all_electric
        savings_hybrid = baseline - hybrid if hybrid is not None else None

        gas_heat_cost = self.gas_heat_cost()
        hp_heat_cost = heating_kwh * rates.electric_rate_electric_heat

        logger.debug(
            "baseline=%.2f all_electric=%.2f hybrid=%s crossover=%s",
            baseline, all_electric, hybrid,
            crossover.temp_f if crossover.found else crossover.note,
        )

        for row in dispatch:
            _drop_non_finite(row, logging.DEBUG)
        for point in crossover.curve:
            _drop_non_finite(point, logging.DEBUG)

        return _drop_non_finite(ScenarioResult(
            use_cop_table=use_cop_table,
            baseline_cost=baseline,
            all_electric_cost=all_electric,
            hybrid_cost=hybrid,
            heating_kwh=heating_kwh,
            hybrid_hp_kwh=hybrid_hp_kwh,
            hybrid_gas_mmbtu=hybrid_gas_mmbtu,
            savings_all_electric=savings_all,
            savings_hybrid=savings_hybrid,
            payback_all_electric=self.payback_years(savings_all),
            payback_hybrid=self.payback_years(savings_hybrid),
            dfc_savings=inputs.kwh_base * (
                (inputs.dfc_non_heating_c - inputs.dfc_electric_heat_c) / 100),
            gas_heat_cost=gas_heat_cost,
            hp_heat_cost=hp_heat_cost,
            fuel_switch_savings=gas_heat_cost - hp_heat_cost,
            crossover_temp_f=crossover.temp_f,
            crossover_note=crossover.note,
            bins=dispatch,
            cost_curve=crossover.curve,
        ))


def calculate(
    inputs: Union[RateInputs, Mapping[str, Any], None] = None,
    use_cop_table: bool = True,
    cop_table_text: Optional[str] = DEFAULT_COP_TABLE,
    bins_text: Optional[str] = DEFAULT_BINS,
) -> ScenarioResult:
    """
    Compute a full ScenarioResult from raw calculator inputs.

    This is the engine boundary: raw text tables and (possibly raw)
    numeric inputs in, structured result out. Identical input always
    gives identical output, and malformed input degrades to defaults.

    Args:
        inputs: RateInputs, or a mapping of raw values for RateInputs.from_raw
        use_cop_table: Use the COP table / weather bins and hybrid dispatch
        cop_table_text: "°F:COP" pairs
        bins_text: "°F:weight" pairs (normalized to 100%)

    Returns:
        ScenarioResult
    """
    if not isinstance(inputs, RateInputs):
        inputs = RateInputs.from_raw(inputs)

    cop_table = parse_pairs(cop_table_text)
    bins = normalize_bins(parse_pairs(bins_text))
    return HeatPumpModel(inputs).evaluate(cop_table, bins, use_cop_table)
