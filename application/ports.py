from pathlib import Path
from typing import Protocol

from core import TaskStore


class TaskListRepository(Protocol):
    def exists(self, path: Path) -> bool:
        ...

    def load(self, path: Path) -> TaskStore:
        ...

    def save(self, path: Path, store: TaskStore) -> None:
        ...
