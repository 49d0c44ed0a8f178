"""
Calculator runner for executing configs and producing results.

Turns a CalculatorConfig into a ScenarioResult (or a SweepResult) stamped
with when and from which file it was produced.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any
import json
import logging

from .config import CalculatorConfig, validate_config
from .model import ScenarioResult
from .sweep import ParameterSweeper, SweepResult


VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def _format_timestamp() -> str:
    """Current UTC time, ISO 8601."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class RunResult:
    """
    One calculator run: metadata, the config as evaluated, and either a
    single-scenario result or a sweep.
    """
    meta: Dict[str, Any]
    config: dict
    # For single runs:
    results: Optional[ScenarioResult] = None
    # For sweeps:
    sweep_results: Optional[SweepResult] = None

    def to_dict(self) -> dict:
        """JSON-ready dict; single runs carry both raw and display values."""
        d = {
            "meta": self.meta,
            "config": self.config,
        }
        if self.results is not None:
            d["results"] = self.results.to_dict()
            d["display"] = self.results.display()
        if self.sweep_results is not None:
            d["sweep_results"] = self.sweep_results.to_dict()
        return d


class Runner:
    """
    Evaluates one calculator config.

    Example:
        config = load_config("configs/chicago.json")
        runner = Runner(config)
        result = runner.run()
        save_result(result, "results/chicago_2026-01-08.json")
    """

    def __init__(self, config: CalculatorConfig, config_path: Optional[str] = None):
        """
        Initialize runner with calculator config.

        Args:
            config: Calculator configuration
            config_path: Optional path to config file (for metadata)

        Raises:
            ValueError: If the config fails validation
        """
        self.config = config
        self.config_path = config_path

        errors = validate_config(config)
        if errors:
            raise ValueError(f"Invalid config: {'; '.join(errors)}")

        self.sweeper = ParameterSweeper(
            inputs=config.inputs,
            cop_table_text=config.cop_table,
            bins_text=config.bins,
            use_cop_table=config.use_cop_table,
        )

    def run(self) -> RunResult:
        """
        Execute the config and return results.

        Returns:
            RunResult with meta, the echoed config, and results or sweep_results
        """
        meta = {
            "timestamp": _format_timestamp(),
            "version": VERSION,
            "config_file": self.config_path,
            "name": self.config.name,
        }
        config_dict = self.config.to_dict()

        if self.config.is_sweep():
            sweep = self.config.sweep
            logger.info("Sweeping %s over %d values", sweep.parameter, len(sweep.values))
            return RunResult(
                meta=meta,
                config=config_dict,
                sweep_results=self.sweeper.sweep_parameter(sweep.parameter, sweep.values),
            )

        logger.info("Evaluating %s", self.config.name)
        return RunResult(
            meta=meta,
            config=config_dict,
            results=self.sweeper.evaluate(),
        )


def save_result(result: RunResult, path: str | Path) -> None:
    """
    Write a run result as indented JSON, creating parent directories.

    Args:
        result: RunResult to save
        path: Output file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(result.to_dict(), f, indent=2)


def load_result(path: str | Path) -> dict:
    """
    Read back a saved run result.

    Args:
        path: Path to result file

    Returns:
        Dict containing the result data
    """
    path = Path(path)
    with open(path, 'r') as f:
        return json.load(f)


def safe_name(name: str) -> str:
    """Config name usable as a file or directory name (spaces and slashes -> _)."""
    return name.replace(" ", "_").replace("/", "_")


def generate_output_filename(config: CalculatorConfig, timestamp: Optional[str] = None) -> str:
    """
    Default result filename: config name (spaces and slashes replaced)
    plus a compact timestamp, e.g. chicago_20260108_123456.json.

    Args:
        config: Calculator config
        timestamp: Optional ISO timestamp string (uses current time if not provided)

    Returns:
        Filename string (not full path)
    """
    if timestamp is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    else:
        # 2026-01-08T12:34:56... -> 20260108_123456
        compact = timestamp.replace(":", "").replace("-", "")[:15]
        timestamp = compact.replace("T", "_")

    return f"{safe_name(config.name)}_{timestamp}.json"
