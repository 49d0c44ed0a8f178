"""
Plotting utilities for visualizing heat pump payback results.

Requires the 'plot' optional dependency: pip install -e ".[plot]"

Usage:
    from hp_payback import calculate
    from hp_payback.plot import plot_scenario_costs, plot_cost_curve

    result = calculate()
    plot_scenario_costs(result)
    plot_cost_curve(result, save_path="crossover.png", show=False)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union
from pathlib import Path

try:
    import matplotlib.pyplot as plt
    import numpy as np
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from .model import ScenarioResult
from .sweep import SweepResult


COLORS = {
    'baseline': '#7f8c8d',      # Gray for the gas baseline
    'all_electric': '#1a5276',  # Dark blue for all-electric
    'hybrid': '#5dade2',        # Light blue for hybrid
    'hp': '#1a5276',
    'gas': '#e67e22',
    'crossover': '#333333',
    'positive': '#27ae60',
    'negative': '#e74c3c',
}


@dataclass
class PlotStyle:
    """Shared style settings for all plots.

    Override individual fields to customize: ``PlotStyle(dpi=150)``.
    """
    bar_width: float = 0.6
    bar_alpha: float = 0.85
    bar_edgecolor: str = 'black'
    bar_linewidth: float = 0.5

    line_width: float = 2.0
    marker_size: int = 6

    grid: bool = True
    grid_alpha: float = 0.3
    grid_linestyle: str = '--'
    grid_color: str = '#cccccc'

    dpi: int = 150
    facecolor: str = 'white'

    title_fontsize: int = 13
    axis_label_fontsize: int = 11
    annotation_fontsize: int = 9
    legend_fontsize: int = 10


DEFAULT_STYLE = PlotStyle()


def _check_matplotlib():
    """Raise helpful error if matplotlib is not installed."""
    if not HAS_MATPLOTLIB:
        raise ImportError(
            "Plotting requires matplotlib. Install with: pip install -e '.[plot]'"
        )


def _apply_common_style(ax, style: PlotStyle, grid_axis: str = 'y'):
    ax.set_facecolor(style.facecolor)
    if style.grid:
        ax.grid(True, axis=grid_axis, alpha=style.grid_alpha,
                linestyle=style.grid_linestyle, color=style.grid_color)
        ax.set_axisbelow(True)
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)


def _finish(fig, save_path, show: bool, style: PlotStyle):
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=style.dpi, bbox_inches='tight',
                    facecolor=style.facecolor)
    if show:
        plt.show()
    return fig


def _with_gaps(values):
    """Absent (None) values become NaN so matplotlib leaves a gap."""
    return [np.nan if v is None else v for v in values]


def close_figure(fig) -> None:
    """Release a figure returned with show=False."""
    if HAS_MATPLOTLIB and fig is not None:
        plt.close(fig)


def plot_scenario_costs(
    result: ScenarioResult,
    ax=None,
    save_path: Optional[Union[str, Path]] = None,
    figsize: Tuple[float, float] = (7, 5),
    show: bool = True,
    style: Optional[PlotStyle] = None,
) -> Optional[Any]:
    """
    Bar chart of annual cost for Baseline, All-Electric and (if present) Hybrid.

    Args:
        result: ScenarioResult to plot
        ax: Existing axes to draw into (a new figure is created otherwise)
        save_path: Optional path to save the figure
        figsize: Figure size for a new figure
        show: Whether to display the plot
        style: Optional PlotStyle

    Returns:
        matplotlib Figure
    """
    _check_matplotlib()
    style = style or DEFAULT_STYLE

    chart = result.chart_data()
    colors = [COLORS['baseline'], COLORS['all_electric'], COLORS['hybrid']][:len(chart)]

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    x = np.arange(len(chart))
    bars = ax.bar(x, [c['cost'] or 0 for c in chart], width=style.bar_width,
                  color=colors, alpha=style.bar_alpha,
                  edgecolor=style.bar_edgecolor, linewidth=style.bar_linewidth)
    for bar, item in zip(bars, chart):
        label = "—" if item['cost'] is None else f"${item['cost']:,}"
        ax.annotate(label,
                    (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                    ha='center', va='bottom', fontsize=style.annotation_fontsize,
                    xytext=(0, 3), textcoords='offset points')

    ax.set_xticks(x)
    ax.set_xticklabels([c['name'] for c in chart])
    ax.set_ylabel('Annual cost ($/yr)', fontsize=style.axis_label_fontsize)
    ax.set_title('Cost Comparison', fontsize=style.title_fontsize, fontweight='bold')
    _apply_common_style(ax, style)

    if not own_figure:
        return fig
    return _finish(fig, save_path, show, style)


def plot_cost_curve(
    result: ScenarioResult,
    ax=None,
    save_path: Optional[Union[str, Path]] = None,
    figsize: Tuple[float, float] = (8, 5),
    show: bool = True,
    style: Optional[PlotStyle] = None,
) -> Optional[Any]:
    """
    Heat pump vs gas cost per delivered MMBtu across outdoor temperature.

    The crossover temperature, when one was found, is marked with a dashed
    vertical line; otherwise the crossover note is shown in the corner.

    Args:
        result: ScenarioResult with a cost curve (needs a COP table)
        ax: Existing axes to draw into (a new figure is created otherwise)
        save_path: Optional path to save the figure
        figsize: Figure size for a new figure
        show: Whether to display the plot
        style: Optional PlotStyle

    Returns:
        matplotlib Figure
    """
    _check_matplotlib()
    style = style or DEFAULT_STYLE

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    temps = [p.temp_f for p in result.cost_curve]
    ax.plot(temps, _with_gaps(p.hp_cost for p in result.cost_curve), color=COLORS['hp'],
            linewidth=style.line_width, label='HP cost')
    ax.plot(temps, _with_gaps(p.gas_cost for p in result.cost_curve), color=COLORS['gas'],
            linewidth=style.line_width, label='Gas cost')

    if result.crossover_temp_f is not None:
        ax.axvline(result.crossover_temp_f, color=COLORS['crossover'],
                   linestyle=(0, (4, 4)), linewidth=1)
        ax.annotate(f"Crossover {result.crossover_temp_f:.1f}°F",
                    (result.crossover_temp_f, 1.0), xycoords=('data', 'axes fraction'),
                    ha='center', va='bottom', fontsize=style.annotation_fontsize)
    elif result.crossover_note:
        ax.text(0.02, 0.95, result.crossover_note, transform=ax.transAxes,
                va='top', fontsize=style.annotation_fontsize, color=COLORS['crossover'])

    ax.set_xlabel('Outdoor temperature (°F)', fontsize=style.axis_label_fontsize)
    ax.set_ylabel('$/MMBtu (delivered)', fontsize=style.axis_label_fontsize)
    ax.legend(loc='best', fontsize=style.legend_fontsize)
    _apply_common_style(ax, style, grid_axis='both')

    if not own_figure:
        return fig
    return _finish(fig, save_path, show, style)


_SWEEP_METRICS: Dict[str, Tuple[str, str, str]] = {
    # metric -> (all-electric series, hybrid series, axis label)
    'savings': ('savings_all_electric', 'savings_hybrid', 'Annual savings vs baseline ($/yr)'),
    'payback': ('payback_all_electric', 'payback_hybrid', 'Simple payback (years)'),
    'cost': ('all_electric_cost', 'hybrid_cost', 'Annual cost ($/yr)'),
}


def plot_sweep(
    sweep: SweepResult,
    metric: str = 'savings',
    save_path: Optional[Union[str, Path]] = None,
    figsize: Tuple[float, float] = (8, 5),
    show: bool = True,
    title: Optional[str] = None,
    style: Optional[PlotStyle] = None,
) -> Optional[Any]:
    """
    Plot savings, payback or cost across a parameter sweep.

    Points where a value is absent (e.g. no payback because savings are
    not positive) are left out of the line.

    Args:
        sweep: SweepResult
        metric: 'savings', 'payback' or 'cost'
        save_path: Optional path to save the figure
        figsize: Figure size (width, height) in inches
        show: Whether to display the plot
        title: Optional custom title
        style: Optional PlotStyle

    Returns:
        matplotlib Figure
    """
    _check_matplotlib()
    if metric not in _SWEEP_METRICS:
        raise ValueError(f"Unknown metric: {metric}. Valid: {list(_SWEEP_METRICS)}")
    style = style or DEFAULT_STYLE
    ae_attr, hyb_attr, ylabel = _SWEEP_METRICS[metric]

    fig, ax = plt.subplots(figsize=figsize)
    for attr, label, color in ((ae_attr, 'All-Electric', COLORS['all_electric']),
                               (hyb_attr, 'Hybrid', COLORS['hybrid'])):
        points = [(x, y) for x, y in zip(sweep.param_values, getattr(sweep, attr))
                  if y is not None]
        if not points:
            continue
        xs, ys = zip(*points)
        ax.plot(xs, ys, 'o-', color=color, linewidth=style.line_width,
                markersize=style.marker_size, label=label)

    if metric == 'savings':
        ax.axhline(0, color=COLORS['negative'], linestyle=':', linewidth=1)

    ax.set_xlabel(sweep.param_name.replace('_', ' '), fontsize=style.axis_label_fontsize)
    ax.set_ylabel(ylabel, fontsize=style.axis_label_fontsize)
    ax.set_title(title or f"Sensitivity to {sweep.param_name}",
                 fontsize=style.title_fontsize, fontweight='bold')
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='best', fontsize=style.legend_fontsize)
    _apply_common_style(ax, style, grid_axis='both')
    return _finish(fig, save_path, show, style)


def plot_result(
    result,
    save_path: Optional[Union[str, Path]] = None,
    show: bool = True,
    style: Optional[PlotStyle] = None,
) -> Optional[Any]:
    """
    Plot the appropriate visualization for a RunResult.

    Single runs: cost bars, plus the cost-vs-temperature curve when one
    exists. Sweeps: savings across the swept values.

    Args:
        result: RunResult
        save_path: Optional path to save the figure
        show: Whether to display the plot
        style: Optional PlotStyle

    Returns:
        matplotlib Figure
    """
    _check_matplotlib()
    style = style or DEFAULT_STYLE

    if result.sweep_results is not None:
        return plot_sweep(result.sweep_results, save_path=save_path, show=show,
                          title=f"Sensitivity: {result.meta.get('name', '')}", style=style)

    scenario = result.results
    if not scenario.cost_curve:
        return plot_scenario_costs(scenario, save_path=save_path, show=show, style=style)

    fig, (ax_bar, ax_curve) = plt.subplots(1, 2, figsize=(14, 5))
    plot_scenario_costs(scenario, ax=ax_bar, style=style)
    plot_cost_curve(scenario, ax=ax_curve, style=style)
    fig.suptitle(result.meta.get('name', ''), fontsize=style.title_fontsize)
    return _finish(fig, save_path, show, style)
