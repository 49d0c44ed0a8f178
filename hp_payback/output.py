"""
Output management for calculator runs.

Provides structured directory output with:
- results.json: Full run result (raw and rounded display values)
- config.json: Echoed input config
- summary.txt: Human-readable summary
- bins.csv: Hybrid dispatch matrix (single runs with a COP table)
- cost_curve.csv: HP vs gas cost per MMBtu by temperature (single runs)
- sweep.csv: One row per swept value (sweeps)
- plots/: Generated visualizations (if matplotlib available)
"""

import csv
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional
import json
import logging

from .formatter import summarize_result, summarize_sweep
from .plot import HAS_MATPLOTLIB, close_figure, plot_result
from .runner import RunResult

logger = logging.getLogger(__name__)


class OutputWriter:
    """
    Write a run result to a structured directory.

    Output structure:
        output_dir/
            results.json
            config.json
            summary.txt
            bins.csv            # single run
            cost_curve.csv      # single run
            sweep.csv           # sweep
            plots/
                result.png
    """

    def __init__(self, output_dir: str | Path):
        """
        Initialize writer.

        Args:
            output_dir: Path to output directory (will be created if needed)
        """
        self.output_dir = Path(output_dir)

    def write(self, result: RunResult, generate_plots: bool = True) -> List[Path]:
        """
        Write all output files.

        Args:
            result: RunResult to write
            generate_plots: Whether to generate plots (requires matplotlib)

        Returns:
            Paths of the files written
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        written = [self._write_results(result), self._write_config(result),
                   self._write_summary(result)]

        if result.results is not None:
            written.append(self._write_rows(
                'bins.csv', [asdict(row) for row in result.results.bins]))
            written.append(self._write_rows(
                'cost_curve.csv', [asdict(p) for p in result.results.cost_curve]))
        if result.sweep_results is not None:
            written.append(self._write_rows('sweep.csv', result.sweep_results.rows()))

        if generate_plots:
            plot_path = self._write_plots(result)
            if plot_path is not None:
                written.append(plot_path)

        return [p for p in written if p is not None]

    def _write_results(self, result: RunResult) -> Path:
        path = self.output_dir / 'results.json'
        with open(path, 'w') as f:
            json.dump(result.to_dict(), f, indent=2, default=str)
        return path

    def _write_config(self, result: RunResult) -> Path:
        path = self.output_dir / 'config.json'
        with open(path, 'w') as f:
            json.dump(result.config, f, indent=2)
        return path

    def _write_summary(self, result: RunResult) -> Path:
        path = self.output_dir / 'summary.txt'
        name = result.meta.get('name', '')
        if result.results is not None:
            text = summarize_result(result.results, name=name, matrix=True)
        else:
            text = summarize_sweep(result.sweep_results, name=name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        return path

    def _write_rows(self, filename: str, rows: List[dict]) -> Optional[Path]:
        """Write dict rows as CSV; skipped when there are no rows."""
        if not rows:
            return None
        path = self.output_dir / filename
        with open(path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        return path

    def _write_plots(self, result: RunResult) -> Optional[Path]:
        if not HAS_MATPLOTLIB:
            logger.info("matplotlib not installed; skipping plots")
            return None

        plots_dir = self.output_dir / 'plots'
        plots_dir.mkdir(exist_ok=True)
        path = plots_dir / 'result.png'
        close_figure(plot_result(result, save_path=path, show=False))
        return path
