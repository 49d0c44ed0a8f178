"""
Plain-text formatting for calculator results in the terminal.

Everything here returns plain text drawn with box characters. ANSI color
is added afterwards by colorize(), and only when the terminal supports it.
"""

import os
import re
import sys
from typing import Any, List, Optional, Sequence, Tuple

from .model import ScenarioResult
from .sweep import SweepResult


def supports_color() -> bool:
    """Detect whether stdout should get ANSI color.

    Respects NO_COLOR (https://no-color.org/) and FORCE_COLOR env vars.
    """
    if os.environ.get('NO_COLOR') is not None:
        return False
    if os.environ.get('FORCE_COLOR') is not None:
        return True
    return hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()


_HEAVY = '═'
_LIGHT = '─'
_VL = '│'
_CORNERS = {
    'top': ('┌', '┬', '┐'),
    'mid': ('├', '┼', '┤'),
    'bottom': ('└', '┴', '┘'),
}

MISSING = '—'


# ── Value formatting ───────────────────────────────────────────────

def dollars(value: Optional[float]) -> str:
    """$1,234 (whole dollars), or — when absent."""
    if value is None:
        return MISSING
    sign = '-' if value < 0 else ''
    return f"{sign}${abs(value):,.0f}"


def signed_dollars(value: Optional[float]) -> str:
    """+$1,234 / -$1,234, for savings."""
    if value is None:
        return MISSING
    return ('+' if value >= 0 else '') + dollars(value)


def years(value: Optional[float]) -> str:
    return MISSING if value is None else f"{value:.1f} yrs"


def degrees(value: Optional[float]) -> str:
    return MISSING if value is None else f"{value:.1f}°F"


def _per_mmbtu(value: Optional[float]) -> str:
    return MISSING if value is None else f"${value:.2f}"


def _number(value: Optional[float], fmt: str) -> str:
    return MISSING if value is None else format(value, fmt)


# ── Layout primitives ──────────────────────────────────────────────

def title(text: str, width: int = 60) -> str:
    """Centered title between heavy rules."""
    pad = max(width - len(text) - 2, 4)
    left = pad // 2
    return f"{_HEAVY * left} {text} {_HEAVY * (pad - left)}"


def heading(text: str) -> str:
    return f"  {text}\n  {_LIGHT * len(text)}"


def kv_block(items: Sequence[Tuple[str, str]], indent: int = 2) -> str:
    """Key/value lines with dot leaders, values aligned."""
    if not items:
        return ""
    width = max(len(k) for k, _ in items)
    prefix = ' ' * indent
    return "\n".join(
        f"{prefix}{key} {'·' * (width - len(key) + 2)} {value}" for key, value in items
    )


def table(
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    aligns: Optional[Sequence[str]] = None,
) -> str:
    """
    Bordered table.

    Args:
        headers: Column header strings
        rows: Row values (converted with str())
        aligns: 'l' or 'r' per column (default all left)
    """
    if not headers:
        return ""
    aligns = list(aligns or ['l'] * len(headers))
    cells = [[str(h) for h in headers]] + [
        [str(row[i]) if i < len(row) else '' for i in range(len(headers))] for row in rows
    ]
    widths = [max(len(r[i]) for r in cells) for i in range(len(headers))]

    def rule(kind: str) -> str:
        left, mid, right = _CORNERS[kind]
        return left + mid.join(_LIGHT * (w + 2) for w in widths) + right

    def line(values: List[str]) -> str:
        padded = [
            v.rjust(w) if a == 'r' else v.ljust(w)
            for v, w, a in zip(values, widths, aligns)
        ]
        return _VL + _VL.join(f" {p} " for p in padded) + _VL

    out = [rule('top'), line(cells[0]), rule('mid')]
    out.extend(line(r) for r in cells[1:])
    out.append(rule('bottom'))
    return "\n".join(out)


def info_line(text: str, indent: int = 2) -> str:
    return f"{' ' * indent}◆ {text}"


def badge(label: str, value: str, indent: int = 2) -> str:
    return f"{' ' * indent}▸ {label}: {value}"


def note_block(lines: Sequence[str], indent: int = 2) -> str:
    prefix = ' ' * indent
    return "\n".join(f"{prefix}· {line}" for line in lines)


def separator(width: int = 60) -> str:
    return _LIGHT * width


# ── Result summaries ───────────────────────────────────────────────

def summarize_result(result: ScenarioResult, name: str = "", matrix: bool = False) -> str:
    """
    Human-readable summary of one calculation.

    Args:
        result: ScenarioResult to describe
        name: Optional config name for the title
        matrix: Include the per-bin dispatch matrix
    """
    d = result.display()
    parts = [title(f"Heat Pump Payback: {name}" if name else "Heat Pump Payback"), ""]

    costs = [("Baseline (Gas+AC)", dollars(d["baseline"])),
             ("All-Electric HP", dollars(d["all_electric"]))]
    if result.use_cop_table:
        costs.append(("Hybrid (cheapest by bin)", dollars(d["hybrid"])))
    parts += [heading("Annual Cost"), kv_block(costs), ""]

    parts.append(heading("Savings vs Baseline"))
    parts.append(badge("All-Electric", signed_dollars(d["savings_all_electric"])))
    parts.append(badge("All-Electric payback", years(d["payback_all_electric"])))
    if result.use_cop_table:
        parts.append(badge("Hybrid", signed_dollars(d["savings_hybrid"])))
        parts.append(badge("Hybrid payback", years(d["payback_hybrid"])))
    parts.append("")

    parts.append(heading("Savings Breakdown"))
    parts.append(kv_block([
        ("DFC savings on base kWh", f"{dollars(d['dfc_savings'])}/yr"),
        ("Fuel-switch savings (gas → HP)", dollars(d["fuel_switch_savings"])),
        ("Heating cost, gas", dollars(d["gas_heat_cost"])),
        ("Heating cost, HP", dollars(d["hp_heat_cost"])),
    ]))
    if result.use_cop_table:
        parts.append(info_line(
            f"Hybrid split: Gas {_number(d['hybrid_gas_mmbtu'], '.1f')} MMBtu"
            f" | HP {_number(d['hybrid_hp_kwh'], ',')} kWh"))
    parts.append("")

    if d["crossover_temp_f"] is not None:
        parts.append(info_line(f"Crossover temperature: {degrees(d['crossover_temp_f'])}"))
    else:
        parts.append(info_line(f"Crossover: {d['crossover_note'] or MISSING}"))

    if matrix and result.bins:
        parts += ["", heading("Dispatch by Temperature Bin"), format_bin_matrix(result)]

    parts += ["", note_block([
        "DFC savings apply to existing (base) kWh only",
        "Heating costs are shown separately to isolate the gas → HP fuel effect",
    ])]
    return "\n".join(parts)


def format_bin_matrix(result: ScenarioResult) -> str:
    """Per-bin dispatch table: temperature, share, COP, unit costs, cheaper fuel."""
    rows = [
        (
            f"{row.temp_f:g}",
            f"{row.share_pct:.1f}%",
            f"{row.cop:.2f}",
            _per_mmbtu(row.hp_cost_per_mmbtu),
            _per_mmbtu(row.gas_cost_per_mmbtu),
            row.fuel,
        )
        for row in result.bins
    ]
    return table(
        ["°F", "Share", "COP", "HP $/MMBtu", "Gas $/MMBtu", "Cheaper"],
        rows,
        aligns=['r', 'r', 'r', 'r', 'r', 'l'],
    )


def summarize_sweep(sweep: SweepResult, name: str = "") -> str:
    """One table row per swept value."""
    rows = [
        (
            f"{p['value']:g}",
            dollars(p["baseline_cost"]),
            dollars(p["all_electric_cost"]),
            dollars(p["hybrid_cost"]),
            years(p["payback_all_electric"]),
            years(p["payback_hybrid"]),
            degrees(p["crossover_temp_f"]),
        )
        for p in sweep.rows()
    ]
    header = title(f"Sweep: {name}" if name else "Sweep")
    return "\n".join([
        header,
        "",
        kv_block([("Parameter", sweep.param_name)]),
        "",
        table(
            [sweep.param_name, "Baseline", "All-Elec", "Hybrid",
             "Payback AE", "Payback Hyb", "Crossover"],
            rows,
            aligns=['r'] * 7,
        ),
    ])


# ── ANSI color post-processing ─────────────────────────────────────

_RESET = '\033[0m'
_BOLD = '\033[1m'
_DIM = '\033[2m'
_GREEN = '\033[32m'
_RED = '\033[31m'
_YELLOW = '\033[33m'
_CYAN = '\033[36m'

_SIGNED_DOLLARS = re.compile(r'(?<![\w$])[+-]\$[\d,]+(?:\.\d+)?')
_FUEL_CELL = re.compile(r'^\s*(HP|Gas)\s*$')


def colorize(text: str) -> str:
    """
    Apply ANSI colors to formatted text.

    - title lines → bold cyan
    - rules, table borders and notes → dim
    - +$ savings → green, -$ savings → red
    - HP / Gas dispatch cells → green / yellow
    - ◆ ▸ markers → yellow, — (absent) → dim
    """
    return '\n'.join(_colorize_line(line) for line in text.split('\n'))


def _color_savings(line: str) -> str:
    def _repl(m: re.Match) -> str:
        s = m.group(0)
        return f"{_GREEN if s.startswith('+') else _RED}{s}{_RESET}"
    return _SIGNED_DOLLARS.sub(_repl, line)


def _colorize_line(line: str) -> str:
    stripped = line.strip()
    if not stripped:
        return line
    if _HEAVY in line:
        return f"{_BOLD}{_CYAN}{line}{_RESET}"
    if all(c == _LIGHT for c in stripped) or stripped[0] in '┌├└':
        return f"{_DIM}{line}{_RESET}"
    if _VL in line:
        cells = []
        for cell in line.split(_VL):
            m = _FUEL_CELL.match(cell)
            if m:
                color = _GREEN if m.group(1) == 'HP' else _YELLOW
                cell = cell.replace(m.group(1), f"{color}{m.group(1)}{_RESET}")
            cells.append(cell)
        return f"{_DIM}{_VL}{_RESET}".join(cells)
    if stripped.startswith('·'):
        return f"{_DIM}{line}{_RESET}"
    line = line.replace('◆', f"{_YELLOW}◆{_RESET}").replace('▸', f"{_YELLOW}▸{_RESET}")
    line = line.replace(MISSING, f"{_DIM}{MISSING}{_RESET}")
    return _color_savings(line)
