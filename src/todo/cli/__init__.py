"""
todo CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from todo import __version__
from todo.cli import tasks
from todo.cli.argv import preprocess_argv
from todo.core.config import load_config

app = typer.Typer(
    name="todo",
    help="A minimalistic task manager",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def configure_logging(debug: bool) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging; otherwise only errors
    """
    level = logging.DEBUG if debug else logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    todo - A minimalistic task manager.

    Tasks are short notes: a head line plus an optional body. They are
    numbered 1..N; completing or deleting a task renumbers the rest.

    Quick Start:
        todo new "Buy groceries"     # Add a task
        todo new                     # Write a task in $EDITOR
        todo list                    # Show task heads
        todo get 1                   # View/edit task 1 in $EDITOR
        todo done 1 3                # Complete tasks 1 and 3

    Environment:
        EDITOR      Editor for `new` and `get` (default: nvim)
        TODO_DEV    Use ~/.tasks.dev.bin instead of ~/.tasks.bin
    """
    configure_logging(debug)
    ctx.obj = {"debug": debug, "config": load_config()}


app.command(name="new")(tasks.new)
app.command(name="add", hidden=True)(tasks.new)
app.command(name="list")(tasks.list_tasks)
app.command(name="get")(tasks.get)
app.command(name="edit", hidden=True)(tasks.get)
app.command(name="done")(tasks.done)


@app.command()
def version() -> None:
    """Show todo version and exit."""
    console.print(f"todo version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """
    Main CLI entry point.

    The argv preprocessor normalizes common patterns before Typer
    parses them (e.g. ``todo --version``, ``todo help done``,
    ``todo list --debug``).
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app()


__all__ = ["app", "cli_main"]
