"""
Command-line interface for running the heat pump payback calculator.

Usage:
    hp-payback                                  # built-in defaults
    hp-payback configs/chicago.json --matrix
    hp-payback configs/*.json --output-dir results/
    hp-payback configs/chicago.json --stdout
    hp-payback configs/gas_price_sweep.json --plot --plot-save sweep.png
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import CalculatorConfig, load_config, validate_config
from .formatter import colorize, separator, summarize_result, summarize_sweep, supports_color
from .output import OutputWriter
from .plot import HAS_MATPLOTLIB, plot_result
from .runner import RunResult, Runner, safe_name, save_result


def format_summary(result: RunResult, matrix: bool = False) -> str:
    """Human-readable summary of a single run or a sweep."""
    name = result.meta.get("name", "")
    if result.results is not None:
        return summarize_result(result.results, name=name, matrix=matrix)
    return summarize_sweep(result.sweep_results, name=name)


def _print_summary(text: str) -> None:
    print(colorize(text) if supports_color() else text)


def _load(config_path: Optional[Path]) -> Optional[CalculatorConfig]:
    """Load a config, or the built-in defaults when no path is given."""
    if config_path is None:
        return CalculatorConfig(name="defaults")
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
    except ValueError as e:
        print(f"Error: Could not read {config_path}: {e}", file=sys.stderr)
    return None


def run_single_config(
    config_path: Optional[Path],
    output_path: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    stdout: bool = False,
    quiet: bool = False,
    matrix: bool = False,
    plot: bool = False,
    plot_save_path: Optional[Path] = None,
) -> bool:
    """
    Run one config file (or the defaults when config_path is None).

    Returns True on success, False on failure.
    """
    config = _load(config_path)
    if config is None:
        return False

    errors = validate_config(config)
    if errors:
        print(f"Error: Invalid config {config_path}:", file=sys.stderr)
        for err in errors:
            print(f"  - {err}", file=sys.stderr)
        return False

    result = Runner(config, config_path=str(config_path) if config_path else None).run()

    if stdout:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        if output_dir is not None:
            target = output_dir / safe_name(config.name)
            OutputWriter(target).write(result, generate_plots=plot and HAS_MATPLOTLIB)
            if not quiet:
                print(f"Results saved to: {target}")
        elif output_path is not None:
            save_result(result, output_path)
            if not quiet:
                print(f"Results saved to: {output_path}")

        if not quiet:
            _print_summary(format_summary(result, matrix=matrix))

    if plot and output_dir is None:
        if not HAS_MATPLOTLIB:
            print("Warning: --plot requires matplotlib. Install with: pip install -e '.[plot]'",
                  file=sys.stderr)
        else:
            if plot_save_path is None and output_path is not None:
                plot_save_path = output_path.with_suffix('.png')
            plot_result(result, save_path=plot_save_path, show=(plot_save_path is None))
            if plot_save_path and not quiet:
                print(f"Plot saved to: {plot_save_path}")

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Estimate heat pump vs gas heating cost, savings and payback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s configs/chicago.json --matrix
  %(prog)s configs/*.json --output-dir results/
  %(prog)s configs/chicago.json --stdout
  %(prog)s configs/chicago.json -o result.json --plot
        """,
    )

    parser.add_argument(
        "configs",
        nargs="*",
        type=Path,
        help="Config file(s) to run (default: built-in defaults)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write result JSON to this file (only valid with a single config)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write a results directory per config (JSON, CSV, summary, plots)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print JSON result to stdout instead of a summary",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress summary output",
    )
    parser.add_argument(
        "--matrix",
        action="store_true",
        help="Include the per-bin hybrid dispatch matrix in the summary",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Generate plots (requires matplotlib)",
    )
    parser.add_argument(
        "--plot-save",
        type=Path,
        default=None,
        help="Save plot to file (defaults to output path with .png extension)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress (-vv for debug detail)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.output and len(args.configs) > 1:
        parser.error("--output can only be used with a single config file")
    if args.stdout and (args.output or args.output_dir):
        parser.error("Cannot use --stdout with --output or --output-dir")

    config_paths: List[Optional[Path]] = list(args.configs) or [None]
    success_count = 0
    fail_count = 0

    for config_path in config_paths:
        success = run_single_config(
            config_path,
            output_path=args.output,
            output_dir=args.output_dir,
            stdout=args.stdout,
            quiet=args.quiet,
            matrix=args.matrix,
            plot=args.plot,
            plot_save_path=args.plot_save,
        )
        if success:
            success_count += 1
        else:
            fail_count += 1

        if len(config_paths) > 1 and not args.stdout and not args.quiet:
            print("\n" + separator() + "\n")

    if len(config_paths) > 1 and not args.quiet:
        print(f"Completed: {success_count} succeeded, {fail_count} failed")

    return 0 if fail_count == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
