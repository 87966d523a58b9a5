#! /usr/bin/env python
"""SM.AI interactive shell: arithmetic expressions and unit conversions.

Usage::

    smcalc                 # interactive
    smcalc "5 * 2 + abs(-10)"
    smcalc conv 100 kg to lb
"""

import atexit
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console

from smcalc.calculator import calculate
from smcalc.errors import CalculatorError
from smcalc.units import is_conversion_command, run_conversion_command

try:
    import readline
except ImportError:  # pragma: no cover
    readline = None

DEFAULT_LOG_LEVEL = logging.ERROR
DEFAULT_HISTORY_PATH = "~/.smcalc_history"
PROMPT = "SM.AI> "
GOODBYE = "SM.AI finished work. Goodbye!"

logger = logging.getLogger(__name__)


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as ``"debug"`` to its number, else ERROR."""
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def history_path() -> str:
    return os.path.expanduser(
        os.environ.get("SMCALC_HISTORY_FILE", DEFAULT_HISTORY_PATH)
    )


HELP_TEXT = """
--- SM.AI HELP ---
  Available Shell Commands:
    exit            - Terminate the program.
    help            - Show this help message.
    clear           - Clear the screen.

  Mathematical Expressions (RPN Parser):
    Supports: +, -, *, /, ^, ( ), unary minus.
    FUNCTIONS: abs().
    Example: 5 * 2 + abs(-10)

  Physics Calculations (Conversion):
    CONVERT [value] [unit_1] TO [unit_2] (or 'conv' ... 'in' ...)
    SPEED: m/s <-> km/h
    TEMPERATURE: C <-> F <-> K (Celsius, Fahrenheit, Kelvin)
    MASS: kg <-> lb (kilograms, pounds)
    Example: conv 100 kg to lb
----------------------"""


class Shell:
    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.running = True
        self.last_error: Optional[CalculatorError] = None

    def _out(self, text: str, style: Optional[str] = None) -> str:
        self.console.print(text, style=style, markup=False)
        return text

    def _err(self, text: str) -> str:
        self.err_console.print(text, style="bold red", markup=False)
        return text

    def show_help(self) -> str:
        return self._out(HELP_TEXT)

    def handle(self, line: str) -> Optional[str]:
        """Process one input line and return what was printed, if anything."""
        self.last_error = None
        words = line.split()
        if not words:
            return None

        command = words[0].lower()
        if command == "exit":
            self.running = False
            return None
        if command == "help":
            return self.show_help()
        if command == "clear":
            self.console.clear()
            return self.show_help()

        try:
            if is_conversion_command(line):
                result = run_conversion_command(line)
            else:
                result = calculate(line)
        except CalculatorError as err:
            logger.debug(f"{type(err).__name__} for {line!r}")
            self.last_error = err
            return self._err(f"!!! ERROR: {err}")
        return self._out(f"Result: {result}", style="green")

    def run(self) -> None:
        self.show_help()
        while self.running:
            try:
                line = input(f"\n{PROMPT}")
            except EOFError:
                break
            except KeyboardInterrupt:
                self.console.print()
                continue
            self.handle(line)
        self._out(GOODBYE)


def setup_history(path: Optional[str] = None) -> None:
    if readline is None:
        return
    path = path or history_path()
    readline.parse_and_bind("tab: complete")
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except (OSError, ValueError):
        corrupted_path = f"{path}.corrupt"
        logger.warning(f"Unreadable history file, moved to {corrupted_path}")
        try:
            os.replace(path, corrupted_path)
        except OSError:
            logger.warning(f"Could not move {path} aside")

    def _persist_history():
        try:
            readline.write_history_file(path)
        except OSError as err:
            logger.warning(f"Could not write history to {path}: {err}")

    atexit.register(_persist_history)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=resolve_log_level(os.environ.get("SMCALC_LOG_LEVEL")),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    args = sys.argv[1:] if argv is None else argv
    shell = Shell()

    if args:
        shell.handle(" ".join(args))
        return 1 if shell.last_error is not None else 0

    setup_history()
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
