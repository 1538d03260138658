"""
Calculator Shell

Connects the evaluator to the outside world:
- argument mode: evaluate one expression from the command line
- single prompt: read one line, evaluate it
- repeat prompt: keep reading lines until the user quits

Every line is appended to the history file before it is evaluated.
Errors are printed to stderr and never stop the loop.
"""

from typing import Optional

from rich.console import Console

from .config import Config, load_config
from .evaluator import calculate
from .history import write_history
from .logging_config import get_logger
from .result import EvalResult

logger = get_logger("shell")

QUIT_COMMANDS = ("q", "quit", "exit")


def format_result(value: float, precision: int = 6) -> str:
    """Format like a default C++ output stream: %g with the given significant digits."""
    return f"{value:.{precision}g}"


class Calculator:
    """
    Interactive front end for the expression evaluator.

    Holds the configuration and the two consoles (stdout for results,
    stderr for errors); each run_* method is one run mode.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.config = config or load_config()
        self.console = console or Console(markup=False, highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, markup=False, highlight=False, soft_wrap=True)

    def evaluate_line(self, line: str) -> EvalResult:
        """Record the line in history, then evaluate it."""
        if self.config.history_enabled:
            write_history(line, self.config.history_file)
        return calculate(line)

    def report(self, result: EvalResult) -> None:
        """Print a result on stdout or its error on stderr."""
        # One line per result, whatever the console width
        if result.success:
            self.console.print(format_result(result.value, self.config.precision), soft_wrap=True)
        else:
            self.err_console.print(f"Error: {result.message}", soft_wrap=True)

    def handle_line(self, line: str) -> bool:
        """
        Evaluate and report one line from the repeat prompt.

        Returns:
            False when the loop should stop
        """
        if line.strip().lower() in QUIT_COMMANDS:
            self.console.print("Exiting...")
            return False

        self.report(self.evaluate_line(line))

        if self.config.confirm_continue:
            return self.ask_continue()
        return True

    def ask_continue(self) -> bool:
        """Ask whether to keep going. Anything but n/N means yes."""
        self.console.print("---------------------")
        answer = self.console.input("Continue? (y/n): ", markup=False).strip()
        if answer[:1] in ("n", "N"):
            self.console.print("Exiting...")
            return False
        return True

    def _read_line(self) -> Optional[str]:
        """Prompt for a line; None on EOF or Ctrl-C."""
        try:
            return self.console.input(self.config.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return None

    # === Run modes ===

    def run_argument(self, expression: str) -> bool:
        """
        Evaluate an expression given on the command line.

        Returns:
            True if it evaluated successfully
        """
        logger.debug(f"Argument mode: {expression!r}")
        result = self.evaluate_line(expression)
        self.report(result)
        return result.success

    def run_single(self) -> bool:
        """Prompt once and evaluate the answer."""
        line = self._read_line()
        if line is None:
            return False
        result = self.evaluate_line(line)
        self.report(result)
        return result.success

    def run_repeat(self) -> None:
        """Prompt until the user quits, EOF, or Ctrl-C."""
        running = True
        while running:
            line = self._read_line()
            if line is None:
                break
            try:
                running = self.handle_line(line)
            except (EOFError, KeyboardInterrupt):
                # Interrupted while asking to continue
                self.console.print()
                break
