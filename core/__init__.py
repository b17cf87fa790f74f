from .task_item import TaskItem
from .task_store import TaskIndexError, TaskStore

__all__ = [
    "TaskItem",
    "TaskStore",
    "TaskIndexError",
]
