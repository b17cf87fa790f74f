"""Single merge path shared by file import and habit pre-population."""

from typing import Iterable

from core import TaskItem, TaskStore


def merge_into(target: TaskStore, source: TaskStore) -> int:
    """Append copies of every source task, in order, keeping their done flags.

    No deduplication: merging the same source twice appends it twice.
    """
    return target.extend([item for _, item in source.iter()])


def habits_store(habits: Iterable[str]) -> TaskStore:
    items = []
    for habit in habits or ():
        text = str(habit).strip()
        if text:
            items.append(TaskItem(text, False))
    return TaskStore(items)


__all__ = ["merge_into", "habits_store"]
