"""
Configuration loading and serialization for calculator configs.

Provides JSON-serializable config structures and conversion utilities.
Config files may contain comments and trailing commas (parsed with json5).
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional
import json
import logging
import math
from pathlib import Path

import json5

from .model import DEFAULT_BINS, DEFAULT_COP_TABLE, RateInputs
from .pairs import format_pairs, pairs_from_list
from .sweep import SWEEPABLE_PARAMETERS

logger = logging.getLogger(__name__)


def _table_text(value: Any, default: str) -> str:
    """Accept a table as "x:y" text or as a list of [x, y] pairs."""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return format_pairs(pairs_from_list(value))
    logger.warning("Ignoring table of type %s; using default", type(value).__name__)
    return default


@dataclass
class SweepSpec:
    """Specification for a parameter sweep."""
    parameter: str
    values: List[float]

    def to_dict(self) -> dict:
        return {
            "parameter": self.parameter,
            "values": self.values,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SweepSpec":
        return cls(
            parameter=data.get("parameter", ""),
            values=list(data.get("values", [])),
        )


@dataclass
class CalculatorConfig:
    """
    Complete calculator configuration.

    This is the top-level config that gets serialized to/from JSON.
    """
    name: str
    description: str = ""
    inputs: RateInputs = field(default_factory=RateInputs)
    use_cop_table: bool = True
    cop_table: str = DEFAULT_COP_TABLE
    bins: str = DEFAULT_BINS
    sweep: Optional[SweepSpec] = None

    def to_dict(self) -> dict:
        """Convert config to JSON-serializable dict."""
        return {
            "name": self.name,
            "description": self.description,
            "inputs": self.inputs.to_dict(),
            "use_cop_table": self.use_cop_table,
            "cop_table": self.cop_table,
            "bins": self.bins,
            "sweep": self.sweep.to_dict() if self.sweep is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CalculatorConfig":
        """Create config from dict (e.g., from JSON)."""
        sweep = None
        if data.get("sweep"):
            sweep = SweepSpec.from_dict(data["sweep"])

        return cls(
            name=data.get("name", "unnamed"),
            description=data.get("description", ""),
            inputs=RateInputs.from_raw(data.get("inputs", {})),
            use_cop_table=bool(data.get("use_cop_table", True)),
            cop_table=_table_text(data.get("cop_table"), DEFAULT_COP_TABLE),
            bins=_table_text(data.get("bins"), DEFAULT_BINS),
            sweep=sweep,
        )

    def is_sweep(self) -> bool:
        """Return True if this config specifies a sweep."""
        return self.sweep is not None


def load_config(path: str | Path) -> CalculatorConfig:
    """
    Load a calculator configuration from a JSON file.

    Args:
        path: Path to JSON (or JSONC/JSON5) config file

    Returns:
        CalculatorConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file isn't valid JSON or isn't a JSON object
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = json5.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
    return CalculatorConfig.from_dict(data)


def save_config(config: CalculatorConfig, path: str | Path) -> None:
    """
    Save a calculator configuration to a JSON file.

    Args:
        config: CalculatorConfig to save
        path: Path to output file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)


def validate_config(config: CalculatorConfig) -> List[str]:
    """
    Validate a configuration and return list of error messages.

    Only structural problems are reported; odd numbers are left to the
    model, which degrades to defaults. Returns empty list if config is valid.
    """
    errors = []

    if not config.name or not config.name.strip():
        errors.append("Config must have a non-empty 'name'")

    if config.sweep:
        if config.sweep.parameter not in SWEEPABLE_PARAMETERS:
            errors.append(f"Invalid sweep parameter: {config.sweep.parameter}. "
                          f"Valid: {SWEEPABLE_PARAMETERS}")
        if not config.sweep.values:
            errors.append("Sweep must have at least one value")
        elif any(isinstance(v, bool) or not isinstance(v, (int, float))
                 for v in config.sweep.values):
            errors.append("Sweep values must all be numbers")
        elif not all(math.isfinite(v) for v in config.sweep.values):
            errors.append("Sweep values must all be finite")

    return errors
