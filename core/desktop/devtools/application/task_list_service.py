"""Startup composition and read-only views over a task list."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from core import TaskStore
from application.ports import TaskListRepository
from infrastructure.file_repository import TaskFileError
from core.desktop.devtools.application.task_merge import habits_store, merge_into

logger = logging.getLogger("todo.session")


def load_with_habits(repo: TaskListRepository, path: Path, habits: Sequence[str] = ()) -> TaskStore:
    """Load a list; a list that does not exist yet starts with the habits."""
    is_new = not repo.exists(path)
    store = repo.load(path)
    if is_new and habits:
        added = merge_into(store, habits_store(habits))
        logger.debug("New list %s: added %d habits", path, added)
    return store


def open_task_list(
    repo: TaskListRepository,
    path: Path,
    habits: Sequence[str] = (),
    import_path: Optional[Path] = None,
) -> TaskStore:
    store = load_with_habits(repo, path, habits)
    if import_path is not None:
        if not repo.exists(import_path):
            raise TaskFileError(import_path, "import source not found")
        added = merge_into(store, repo.load(import_path))
        logger.info("Imported %d tasks from %s", added, import_path)
    return store


def summarize(store: TaskStore) -> Tuple[int, int]:
    return store.summary()


def checklist_lines(store: TaskStore) -> List[str]:
    return [item.checklist_line() for _, item in store.iter()]


__all__ = ["load_with_habits", "open_task_list", "summarize", "checklist_lines"]
