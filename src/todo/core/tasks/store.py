"""
Task store: the in-memory task table and its persistence.

The store maps integer IDs to tasks, ordered by ID. IDs are always the
contiguous range 1..N once a load or removal completes, so a user typing
IDs at the shell only ever deals with small sequential numbers. The price
is that IDs shift after a removal; callers must re-list to get fresh IDs.

Loading never fails: a missing, empty or undecodable file is an empty
store. Saving is atomic (temp file + rename) and its errors propagate.
"""

import logging
import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from .codec import CorruptStoreError, decode, encode
from .models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Base class for task store errors."""

    pass


class StoreWriteError(TaskStoreError):
    """Raised when the task table cannot be written to disk."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause


class TaskNotFoundError(TaskStoreError):
    """Raised when a task ID does not exist in the store."""

    def __init__(self, task_id: int):
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """
    Ordered ID -> Task table.

    Example:
        >>> store = TaskStore()
        >>> store.add(Task(head="A"))
        1
        >>> store.add(Task(head="B"))
        2
        >>> store.remove_many({1})
        [1]
        >>> store.items()
        [(1, Task(head='B', body=''))]
    """

    def __init__(self, tasks: dict[int, Task] | None = None):
        self._tasks: dict[int, Task] = dict(sorted((tasks or {}).items()))

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "TaskStore":
        """
        Load the store from a storage file.

        A missing file is created empty. An empty, unreadable or corrupt file
        yields an empty store; the failure is logged, never raised.

        Args:
            path: Storage file path

        Returns:
            A reindexed TaskStore
        """
        path = Path(path)

        if not path.exists():
            logger.debug("Storage file %s does not exist, creating it", path)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
            except OSError as e:
                logger.warning("Failed to create storage file %s: %s", path, e)
            return cls()

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning("Failed to read storage file %s: %s", path, e)
            return cls()

        if not data:
            return cls()

        try:
            tasks = decode(data)
        except CorruptStoreError as e:
            logger.warning("Storage file %s is corrupt, starting empty: %s", path, e)
            return cls()

        store = cls(tasks)
        store.reindex()
        logger.debug("Loaded %d task(s) from %s", len(store), path)
        return store

    def save(self, path: Path) -> None:
        """
        Write the store to a storage file atomically.

        Uses a temporary file in the same directory and an atomic rename so
        the previous contents survive a failed write.

        Args:
            path: Storage file path

        Raises:
            StoreWriteError: If the file cannot be written
        """
        path = Path(path)
        encoded = encode(self._tasks)

        try:
            fd, temp_path = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StoreWriteError(path, e) from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(encoded)
            os.replace(temp_path, path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StoreWriteError(path, e) from e

        logger.debug("Saved %d task(s) to %s", len(self), path)

    # -------------------------------------------------------------------------
    # Table operations
    # -------------------------------------------------------------------------

    def add(self, task: Task) -> int:
        """
        Insert a task under the next free ID.

        Returns:
            The new task's ID (max existing ID + 1, or 1 when empty)
        """
        new_id = max(self._tasks, default=0) + 1
        self._tasks[new_id] = task
        return new_id

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def replace(self, task_id: int, task: Task) -> None:
        """
        Overwrite the task stored under task_id, keeping its ID.

        Raises:
            TaskNotFoundError: If task_id is not in the store
        """
        if task_id not in self._tasks:
            raise TaskNotFoundError(task_id)
        self._tasks[task_id] = task

    def remove_many(self, task_ids: Iterable[int]) -> list[int]:
        """
        Remove a batch of tasks, then reindex once.

        All targets are resolved against the current IDs before anything is
        removed. IDs not present in the store are ignored.

        Args:
            task_ids: IDs to remove

        Returns:
            IDs that were actually removed, ascending
        """
        targets = sorted({task_id for task_id in task_ids if task_id in self._tasks})
        for task_id in targets:
            del self._tasks[task_id]
        if targets:
            self.reindex()
        return targets

    def reindex(self) -> None:
        """Renumber tasks to 1..N, preserving ascending-ID order."""
        ordered = [self._tasks[task_id] for task_id in sorted(self._tasks)]
        self._tasks = {new_id: task for new_id, task in enumerate(ordered, start=1)}

    def items(self) -> list[tuple[int, Task]]:
        return list(self._tasks.items())

    def ids(self) -> list[int]:
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[tuple[int, Task]]:
        return iter(self.items())
