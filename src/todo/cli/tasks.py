"""
todo task commands: new, list, get, done.

Every command loads the task store, runs one workflow from TaskService
and writes the store back when it changed.
"""

import typer
from rich.console import Console
from rich.markup import escape

from todo.cli.errors import (
    ExitCode,
    print_editor_error,
    print_error,
    print_storage_write_error,
    print_task_not_found_error,
)
from todo.core.config import TodoConfig, load_config
from todo.core.editor import EditorBridge, EditorError
from todo.core.tasks import (
    EditOutcome,
    StoreWriteError,
    TaskNotFoundError,
    TaskService,
    TaskStore,
)

console = Console()


def _get_config(ctx: typer.Context) -> TodoConfig:
    """Return the config loaded by the app callback, loading it if absent."""
    if ctx.obj and "config" in ctx.obj:
        config: TodoConfig = ctx.obj["config"]
        return config
    return load_config()


def _open_service(ctx: typer.Context) -> tuple[TodoConfig, TaskService]:
    config = _get_config(ctx)
    store = TaskStore.load(config.storage_path)
    return config, TaskService(store, EditorBridge(config.editor))


def _save(config: TodoConfig, service: TaskService) -> None:
    try:
        service.store.save(config.storage_path)
    except StoreWriteError as e:
        print_storage_write_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def new(
    ctx: typer.Context,
    head: str | None = typer.Argument(None, help="Task head (title line)"),
    body: str | None = typer.Argument(None, help="Task body"),
) -> None:
    """
    Create a new task.

    With no arguments, opens $EDITOR: the first line is the head and the
    rest is the body. Saving an empty file aborts without creating a task.

    Examples:
        todo new "Buy groceries"
        todo new "Call Sam" "about the lease"
        todo new
    """
    config, service = _open_service(ctx)

    if head is None and body is None:
        try:
            task_id = service.add_interactive()
        except EditorError as e:
            print_editor_error(e)
            raise typer.Exit(ExitCode.GENERAL_ERROR)

        if task_id is None:
            console.print("[dim]New task aborted.[/dim]")
            return
    else:
        try:
            task_id = service.add(head, body)
        except ValueError as e:
            print_error(str(e), solution='todo new "Buy groceries"')
            raise typer.Exit(ExitCode.USER_ERROR)

    _save(config, service)
    console.print(f"[green]Task {task_id} added![/green]")


def list_tasks(ctx: typer.Context) -> None:
    """
    List all task heads.

    Tasks with a body are marked with HEAD:.
    """
    _, service = _open_service(ctx)
    tasks = service.list_tasks()

    if not tasks:
        console.print("No tasks")
        return

    for task_id, task in tasks:
        if task.has_body:
            console.print(f"[bold]{task_id}.[/bold] [cyan]HEAD:[/cyan] {escape(task.head)}")
        else:
            console.print(f"[bold]{task_id}.[/bold] {escape(task.head)}")


def get(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID (see `todo list`)"),
) -> None:
    """
    Open a task in $EDITOR.

    Saving changes updates the task. Saving an empty file deletes it and
    renumbers the remaining tasks.

    Examples:
        todo get 2
    """
    config, service = _open_service(ctx)

    try:
        result = service.edit(task_id)
    except TaskNotFoundError:
        print_task_not_found_error(task_id)
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except EditorError as e:
        print_editor_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if result.outcome == EditOutcome.UNCHANGED:
        console.print(f"[dim]Task {task_id} unchanged.[/dim]")
        return

    _save(config, service)
    if result.outcome == EditOutcome.DELETED:
        console.print(f"[yellow]Task {task_id} deleted.[/yellow]")
    else:
        console.print(f"[green]Task {task_id} updated.[/green]")


def done(
    ctx: typer.Context,
    task_ids: list[int] = typer.Argument(..., help="Task ID(s) to mark as done"),
) -> None:
    """
    Mark task(s) as done, removing them.

    Remaining tasks are renumbered once all the given IDs are removed, so
    IDs always refer to the list as it was before this command.

    Examples:
        todo done 1
        todo done 1 3 4
    """
    config, service = _open_service(ctx)
    result = service.done(task_ids)

    if result.changed:
        _save(config, service)

    for task_id in result.removed:
        console.print(f"[green]Marked task {task_id} as done![/green]")
    for task_id in result.missing:
        console.print(f"[yellow]Task {task_id} not found![/yellow]")
