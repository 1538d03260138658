"""
Command Line Interface

Usage: calc [-s | -m | -a] [expression ...]

With no flag and no expression the calculator prompts once.
With no flag and an expression, the words are joined with
spaces and evaluated. Use `--` before an expression that
starts with '-' (calc -- -3+4).
"""

import argparse
import sys
from enum import Enum
from typing import List, Optional

from rich.console import Console

from .config import load_config
from .logging_config import get_logger, setup_logging
from .shell import Calculator

logger = get_logger("cli")


class RunMode(Enum):
    ARGUMENT = "argument"
    SINGLE = "single"
    REPEAT = "repeat"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate arithmetic expressions: + - * / ^, parentheses, "
                    "sqrt, log/ln, sin, cos, tan.",
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "-s", dest="mode", action="store_const", const=RunMode.SINGLE,
        help="Inline single prompt mode (default)",
    )
    modes.add_argument(
        "-m", dest="mode", action="store_const", const=RunMode.REPEAT,
        help="Inline multiple prompt mode",
    )
    modes.add_argument(
        "-a", dest="mode", action="store_const", const=RunMode.ARGUMENT,
        help="Argument mode (evaluate expression from command line)",
    )
    parser.add_argument("expression", nargs="*", help="Expression to evaluate")
    return parser


def resolve_mode(mode: Optional[RunMode], expression: str) -> RunMode:
    """Pick the run mode from the flag and whether an expression was given."""
    if mode is None:
        return RunMode.ARGUMENT if expression else RunMode.SINGLE
    if mode is RunMode.ARGUMENT and not expression:
        # Nothing to evaluate; fall back to prompting
        return RunMode.SINGLE
    return mode


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the calculator.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    err_console = Console(stderr=True, markup=False, highlight=False, soft_wrap=True)

    config = load_config()
    errors = config.validate()
    if errors:
        for error in errors:
            err_console.print(f"Error: {error}")
        return 1

    setup_logging(level=config.log_level, log_file=config.log_file, json_format=config.json_logs)

    expression = " ".join(args.expression)
    mode = resolve_mode(args.mode, expression)
    if expression and mode is not RunMode.ARGUMENT:
        logger.warning(f"Ignoring expression in {mode.value} mode: {expression!r}")

    calculator = Calculator(config, err_console=err_console)
    if mode is RunMode.ARGUMENT:
        return 0 if calculator.run_argument(expression) else 1
    if mode is RunMode.REPEAT:
        calculator.run_repeat()
        return 0
    calculator.run_single()
    return 0


if __name__ == "__main__":
    sys.exit(main())
