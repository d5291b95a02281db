"""
Task storage engine.

Models, binary codec, the ID-indexed store and the command workflows.
"""

from .codec import CorruptStoreError, decode, encode
from .models import Task, is_blank
from .service import DoneResult, EditOutcome, EditResult, TaskService
from .store import StoreWriteError, TaskNotFoundError, TaskStore, TaskStoreError

__all__ = [
    "CorruptStoreError",
    "DoneResult",
    "EditOutcome",
    "EditResult",
    "StoreWriteError",
    "Task",
    "TaskNotFoundError",
    "TaskService",
    "TaskStore",
    "TaskStoreError",
    "decode",
    "encode",
    "is_blank",
]
