"""
VECALC CLI.

Commands:
- repl: interactive read-eval-print loop
- eval: evaluate expressions given as arguments in one session
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vecalc import __version__
from vecalc.core.config import VecalcConfig, resolve_config
from vecalc.core.errors import ConfigError, VecalcError
from vecalc.core.interpreter import Interpreter

app = typer.Typer(
    help="Calculator for scalars and 2D vectors with variables",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

BANNER = "Enter an expression to evaluate, or an empty line to quit."

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vecalc {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """VECALC command line."""


def _load(config_path: Path | None) -> VecalcConfig:
    try:
        config = resolve_config(config_path)
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/red] {escape(e.message)}")
        raise typer.Exit(code=2) from e

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return config


def _print_error(error: VecalcError) -> None:
    console.print(f"[red]{type(error).__name__}[/red]")
    console.print(escape(error.report()))


def _print_variables(interpreter: Interpreter) -> None:
    variables = interpreter.variables()
    if not variables:
        console.print("[dim]No variables defined.[/dim]")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Value")
    for name, value in sorted(variables.items()):
        table.add_row(name, value.kind.value, escape(str(value)))
    console.print(table)


@app.command("repl")
def repl(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to vecalc.toml (default: ./vecalc.toml)"
    ),
) -> None:
    """Start an interactive session."""
    config = _load(config_path)
    interpreter = Interpreter(config)

    if config.shell.banner:
        console.print(BANNER)

    while True:
        try:
            line = console.input(escape(config.shell.prompt))
        except EOFError:
            break

        stripped = line.strip()
        if not stripped:
            if config.shell.quit_on_empty_line:
                break
            continue
        if stripped == ":vars":
            _print_variables(interpreter)
            continue
        if stripped == ":clear":
            interpreter.clear()
            console.print("[dim]Variables cleared.[/dim]")
            continue

        try:
            result = interpreter.execute(line)
        except VecalcError as e:
            logger.debug("Line failed: %r", line, exc_info=True)
            _print_error(e)
            continue
        console.print(escape(str(result)))


@app.command("eval")
def eval_command(
    expressions: list[str] = typer.Argument(..., help="Lines to evaluate, in order"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to vecalc.toml (default: ./vecalc.toml)"
    ),
) -> None:
    """Evaluate each EXPRESSION in one session and print the results."""
    config = _load(config_path)
    interpreter = Interpreter(config)

    for line in expressions:
        try:
            result = interpreter.execute(line)
        except VecalcError as e:
            _print_error(e)
            raise typer.Exit(code=1) from e
        console.print(escape(str(result)))


def main() -> None:
    """Entry point for the vecalc console script."""
    app()


if __name__ == "__main__":
    main()
