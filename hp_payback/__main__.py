"""
Main entry point for running the heat pump payback calculator.

Usage:
    python -m hp_payback
    python -m hp_payback configs/chicago.json --matrix
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
