#!/usr/bin/env python3
"""
Calculator Entry Point

Run from a checkout with:
    python run_calc.py "sqrt(16) + 2*(3-1)"
    python run_calc.py -m

Or, once installed:
    calc -m
"""

import sys
import os

# Add app/ to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from calc.cli import main


if __name__ == "__main__":
    sys.exit(main())
