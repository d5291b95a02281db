"""
Error output and exit codes for the todo CLI.
"""

from enum import IntEnum

from rich.console import Console

from todo.core.editor import EDITOR_ENV_VAR

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for todo."""

    SUCCESS = 0
    """Operation completed successfully (including an aborted new task)."""

    GENERAL_ERROR = 1
    """Storage write failure, editor failure or unknown task."""

    USER_ERROR = 2
    """Bad command-line input."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_task_not_found_error(task_id: int) -> None:
    print_error(
        f"Task {task_id} not found",
        reason="IDs are renumbered after tasks are completed or deleted",
        solution="todo list",
    )


def print_editor_error(error: Exception) -> None:
    print_error(
        str(error),
        reason="No task was changed",
        solution=f"export {EDITOR_ENV_VAR}=<your editor>",
    )


def print_storage_write_error(error: Exception) -> None:
    print_error(
        str(error),
        reason="Your changes were not saved",
    )
