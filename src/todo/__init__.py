"""
todo - A minimalistic task manager

Short notes kept in a local file, edited with your $EDITOR.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from todo.core.tasks.models import Task
from todo.core.tasks.store import TaskStore

__all__ = ["Task", "TaskStore", "__version__"]
