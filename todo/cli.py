"""Todo CLI: add, list and remove tasks in ./todo.json."""

import logging
from typing import Annotated

import typer

from todo import __version__, operations, store
from todo.config import DEFAULT_CONFIG
from todo.errors import InvalidIndexError, StorageError
from todo.format import format_task_list
from todo.logs import setup_logging
from todo.models import TaskList

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=DEFAULT_CONFIG["app_name"],
    no_args_is_help=True,
    add_completion=False,
    help="A simple command-line todo application.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{DEFAULT_CONFIG['app_name']} {__version__}")
        raise typer.Exit()


@app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
):
    setup_logging()


def _load_or_exit() -> TaskList:
    try:
        return store.load()
    except StorageError as e:
        typer.echo(f"Error loading todos: {e}", err=True)
        raise typer.Exit(1) from e


def _save_or_exit(task_list: TaskList, failure: str) -> None:
    try:
        store.save(task_list)
    except StorageError as e:
        typer.echo(f"{failure}: {e}", err=True)
        raise typer.Exit(1) from e


@app.command("add")
def add(
    task: Annotated[str, typer.Argument(metavar="TASK", help="The task description")],
):
    """Add a new task."""
    task_list = _load_or_exit()
    operations.add_task(task_list, task)
    _save_or_exit(task_list, "Error saving task")
    typer.echo(f'Added task: "{task}"')


@app.command("list")
def list_cmd():
    """List all tasks."""
    task_list = _load_or_exit()
    typer.echo(format_task_list(task_list))


@app.command("remove")
def remove(
    index: Annotated[
        int, typer.Argument(metavar="INDEX", help="The index of the task to remove (1-based)")
    ],
):
    """Remove a task by index."""
    task_list = _load_or_exit()
    try:
        removed = operations.remove_task(task_list, index)
    except InvalidIndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    logger.debug("Removed %r at index %d", removed.description, index)
    _save_or_exit(task_list, "Error saving after removal")
    typer.echo(f"Removed task at index {index}")


def main() -> None:
    """Entry point for the todo command."""
    try:
        app()
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


__all__ = ["app", "main"]
