"""
Command-line interface for mathops.

Provides commands for:
- Running the interactive menu (the default)
- Listing the available operations
- Running a single operation non-interactively
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from mathops.core import OPERATIONS, get_operation
from mathops.shell import InputParseError, Shell, parse_value

app = typer.Typer(
    name="mathops",
    help="Interactive menu of arithmetic and logic operations.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging once, rendered by rich on stderr."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", envvar="MATHOPS_LOG_LEVEL", help="Logging level"
    ),
):
    """Start the interactive menu when no command is given."""
    setup_logging(log_level)
    if ctx.invoked_subcommand is None:
        raise typer.Exit(Shell(console=console).run())


@app.command()
def shell(
    pause: bool = typer.Option(
        True, "--pause/--no-pause", envvar="MATHOPS_PAUSE", help="Wait for Enter after each result"
    ),
):
    """Run the interactive menu."""
    raise typer.Exit(Shell(console=console, pause=pause).run())


@app.command("list")
def list_operations():
    """List every operation with its menu number and name."""
    table = Table(title="Operations")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Title")
    table.add_column("Inputs")

    for operation in OPERATIONS:
        inputs = ", ".join(parameter.kind.value for parameter in operation.parameters)
        table.add_row(str(operation.number), operation.name, operation.title, inputs)

    console.print(table)


@app.command("run")
def run_operation(
    operation: str = typer.Argument(..., help="Operation name or menu number"),
    args: Optional[List[str]] = typer.Argument(None, help="Operation inputs, in order"),
):
    """
    Run one operation and print its result.

    Use -- before negative inputs, e.g. `mathops run reverse -- -123`.
    """
    try:
        selected = get_operation(operation)
    except KeyError:
        err_console.print(f"[red]Unknown operation:[/] {operation}")
        raise typer.Exit(2)

    args = args or []
    if len(args) == selected.arity:
        try:
            values = [
                parse_value(text, parameter.kind)
                for text, parameter in zip(args, selected.parameters)
            ]
        except InputParseError as e:
            err_console.print(str(e), markup=False)
            raise typer.Exit(1)
    else:
        values = args

    logger.debug("Running %s with %r", selected.name, values)
    result = selected.invoke(*values)
    if not result.ok:
        err_console.print(str(result), markup=False, highlight=False)
        raise typer.Exit(1)

    console.print(str(result), markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
