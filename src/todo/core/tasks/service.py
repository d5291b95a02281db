"""
Task service: the add / list / edit / done workflows.

Each method performs one user command against a loaded TaskStore, using
the EditorBridge for the interactive flows. Persisting the store is left
to the caller.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from todo.core.editor import EditorBridge

from .models import Task
from .store import TaskNotFoundError, TaskStore

logger = logging.getLogger(__name__)


class EditOutcome(str, Enum):
    """What an edit did to the task."""

    UPDATED = "updated"
    DELETED = "deleted"
    UNCHANGED = "unchanged"


@dataclass
class EditResult:
    task_id: int
    outcome: EditOutcome
    task: Task | None = None


@dataclass
class DoneResult:
    """Outcome of a `done` batch. IDs refer to the store before removal."""

    removed: list[int] = field(default_factory=list)
    missing: list[int] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.removed)


class TaskService:
    """
    Command handlers over a TaskStore.

    Example:
        >>> service = TaskService(TaskStore(), EditorBridge("vim"))
        >>> service.add("Buy groceries")
        1
        >>> service.list_tasks()
        [(1, Task(head='Buy groceries', body=''))]
    """

    def __init__(self, store: TaskStore, editor: EditorBridge | None = None):
        self.store = store
        self.editor = editor or EditorBridge()

    def add(self, head: str | None, body: str | None = None) -> int:
        """
        Add a task from command-line arguments, without the editor.

        The arguments go through the same text rule as editor input, so an
        unchanged edit of the task later is a no-op. A blank head with a
        body makes the body's first line the head.

        Raises:
            ValueError: If both head and body are blank
        """
        task = Task.from_text(Task(head=head or "", body=body or "").to_text())
        if task is None:
            raise ValueError("Task head cannot be empty")

        task_id = self.store.add(task)
        logger.debug("Added task %d", task_id)
        return task_id

    def add_interactive(self) -> int | None:
        """
        Add a task written in the editor.

        Returns:
            The new task ID, or None if the editor returned blank text

        Raises:
            EditorError: If the editor fails
        """
        task = Task.from_text(self.editor.edit(""))
        if task is None:
            logger.debug("Editor returned blank text, nothing added")
            return None

        task_id = self.store.add(task)
        logger.debug("Added task %d from editor", task_id)
        return task_id

    def list_tasks(self) -> list[tuple[int, Task]]:
        return self.store.items()

    def edit(self, task_id: int) -> EditResult:
        """
        Open an existing task in the editor and apply the result.

        Blank text deletes the task (and reindexes the rest). Changed text
        replaces it in place. Unchanged text leaves the store untouched.

        Raises:
            TaskNotFoundError: If task_id does not exist
            EditorError: If the editor fails
        """
        current = self.store.get(task_id)
        if current is None:
            raise TaskNotFoundError(task_id)

        edited = Task.from_text(self.editor.edit(current.to_text()))

        if edited is None:
            self.store.remove_many([task_id])
            logger.debug("Task %d emptied in editor, deleted", task_id)
            return EditResult(task_id, EditOutcome.DELETED)

        if edited == current:
            return EditResult(task_id, EditOutcome.UNCHANGED, current)

        self.store.replace(task_id, edited)
        logger.debug("Task %d updated", task_id)
        return EditResult(task_id, EditOutcome.UPDATED, edited)

    def done(self, task_ids: Iterable[int]) -> DoneResult:
        """
        Remove a batch of tasks, reindexing once at the end.

        IDs that don't exist are reported as missing, not treated as errors.
        """
        requested = list(dict.fromkeys(task_ids))
        missing = [task_id for task_id in requested if task_id not in self.store]
        removed = self.store.remove_many(requested)
        return DoneResult(removed=removed, missing=missing)
