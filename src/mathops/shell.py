"""
Interactive menu shell.

Renders the numbered operation menu, reads one line per input, parses it into
the parameter's primitive type, dispatches to the library and prints the
result. All text parsing lives here; the library only sees typed values.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from rich import box
from rich.console import Console
from rich.table import Table

from mathops.core import EXIT_CHOICE, OPERATIONS, ParameterKind, get_operation

if TYPE_CHECKING:
    from collections.abc import Callable

    from mathops.core import Operation, Parameter
    from mathops.result import Result

logger = logging.getLogger(__name__)

WELCOME = "Welcome to the Programming Logic Demonstrations!"
GOODBYE = "Exiting program. Goodbye!"
CHOICE_PROMPT = "Enter your choice: "
PAUSE_PROMPT = "Press Enter to continue..."


class InputParseError(ValueError):
    """Raised when a line of text cannot be parsed into the expected kind."""

    def __init__(self, text: str, kind: ParameterKind) -> None:
        super().__init__(f"Invalid {kind.value}: {text!r}")
        self.text = text
        self.kind = kind


def parse_value(text: str, kind: ParameterKind) -> Any:
    """
    Parse one line of user input.

    Integers parse with ``int``. Numbers try ``int`` first so whole numbers
    keep exact integer arithmetic, then fall back to a finite ``float``.
    Characters and operators pass through as typed, minus the line ending, so
    ``" a"`` reaches the library as two characters; the library validates them.

    Raises:
        InputParseError: If the text is not a valid integer or number
    """
    stripped = text.strip()
    if kind is ParameterKind.INTEGER:
        try:
            return int(stripped)
        except ValueError:
            raise InputParseError(text, kind) from None

    if kind is ParameterKind.NUMBER:
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            value = float(stripped)
        except ValueError:
            raise InputParseError(text, kind) from None
        if not math.isfinite(value):
            raise InputParseError(text, kind)
        return value

    return text.rstrip("\r\n")


def format_result(result: Result) -> str:
    """Render a result the way the menu prints it, with a ``Result:`` label."""
    text = str(result)
    if "\n" in text:
        return f"Result:\n{text}"
    return f"Result: {text}"


def build_menu() -> Table:
    """Build the numbered operation menu, including the exit entry."""
    table = Table(title="Choose an Operation", box=box.SIMPLE, show_header=False)
    table.add_column("#", justify="right", style="bold cyan")
    table.add_column("Operation")
    for operation in OPERATIONS:
        table.add_row(f"{operation.number}.", operation.title)
    table.add_row(f"{EXIT_CHOICE}.", "Exit")
    return table


class Shell:
    """
    Read-dispatch-print loop over the operation registry.

    Example:
        >>> replies = iter(["9", "97", "", "21"])
        >>> Shell(read_line=lambda prompt: next(replies)).run()
        0
    """

    def __init__(
        self,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        pause: bool = True,
    ) -> None:
        """
        Initialize the shell.

        Args:
            console: Where output goes (default: a new stdout console)
            read_line: Returns one line of input for a prompt (default: console input)
            pause: Wait for Enter after each result
        """
        self.console = console or Console()
        self._read_line = read_line or self._console_input
        self.pause = pause

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def run(self) -> int:
        """
        Loop until the exit choice or end of input.

        Returns:
            Process exit status, always 0
        """
        self._print(WELCOME)
        try:
            while self.step():
                pass
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving menu loop")
        self._print(GOODBYE)
        return 0

    def step(self) -> bool:
        """
        Show the menu and handle one choice.

        Returns:
            False once the exit choice is selected, True otherwise
        """
        self.console.print()
        self.console.print(build_menu())
        raw = self._read_line(CHOICE_PROMPT)

        try:
            choice = int(raw.strip())
        except ValueError:
            choice = None

        if choice == EXIT_CHOICE:
            return False

        try:
            operation = get_operation(choice) if choice is not None else None
        except KeyError:
            operation = None

        if operation is None:
            logger.info("Invalid menu choice %r", raw)
            self._print(f"Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}.")
        else:
            self._print(format_result(self.dispatch(operation)))

        if self.pause:
            self._read_line(PAUSE_PROMPT)
        return True

    def dispatch(self, operation: Operation) -> Result:
        """Prompt for each of the operation's inputs, then invoke it."""
        args = [self.ask(parameter) for parameter in operation.parameters]
        logger.debug("Dispatching %s with %r", operation.name, args)
        result = operation.invoke(*args)
        if not result.ok:
            logger.info("%s failed: %s", operation.name, result)
        return result

    def ask(self, parameter: Parameter) -> Any:
        """Read and parse one input, re-prompting until it parses."""
        while True:
            text = self._read_line(parameter.prompt)
            try:
                return parse_value(text, parameter.kind)
            except InputParseError as e:
                logger.info("Rejected input %r for %s", text, parameter.kind.value)
                self._print(str(e))
