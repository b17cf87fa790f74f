"""Ordered in-memory collection of checklist items for one list file."""

from typing import Iterable, Iterator, List, Optional, Tuple

from .task_item import TaskItem


class TaskIndexError(IndexError):
    """Index outside the store; signals a caller bug, never user input."""

    def __init__(self, index: int, size: int):
        super().__init__(f"task index {index} out of range (size {size})")
        self.index = index
        self.size = size


class TaskStore:
    def __init__(self, items: Optional[Iterable[TaskItem]] = None):
        self._items: List[TaskItem] = list(items or [])

    def _check(self, index: int) -> None:
        # Negative indices are bugs here, not "count from the end".
        if not 0 <= index < len(self._items):
            raise TaskIndexError(index, len(self._items))

    def append(self, text: str) -> Optional[int]:
        """Append an open task; blank text is ignored and returns None."""
        text = (text or "").strip()
        if not text:
            return None
        self._items.append(TaskItem(text))
        return len(self._items) - 1

    def append_draft(self) -> int:
        """Append an empty placeholder that is being typed into."""
        self._items.append(TaskItem(""))
        return len(self._items) - 1

    def extend(self, items: Iterable[TaskItem]) -> int:
        added = 0
        for item in items:
            self._items.append(item.copy())
            added += 1
        return added

    def toggle(self, index: int) -> None:
        self._check(index)
        self._items[index].toggle()

    def remove(self, index: int) -> TaskItem:
        self._check(index)
        return self._items.pop(index)

    def move_up(self, index: int) -> int:
        self._check(index)
        if index == 0:
            return index
        items = self._items
        items[index - 1], items[index] = items[index], items[index - 1]
        return index - 1

    def move_down(self, index: int) -> int:
        self._check(index)
        if index == len(self._items) - 1:
            return index
        items = self._items
        items[index + 1], items[index] = items[index], items[index + 1]
        return index + 1

    def set_text(self, index: int, text: str) -> bool:
        """Replace the text in place. Empty text deletes the task; returns False then."""
        self._check(index)
        text = (text or "").strip()
        if not text:
            self._items.pop(index)
            return False
        self._items[index].text = text
        return True

    def iter(self) -> Iterator[Tuple[int, TaskItem]]:
        return enumerate(self._items)

    def __iter__(self) -> Iterator[Tuple[int, TaskItem]]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> TaskItem:
        self._check(index)
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"TaskStore({self._items!r})"

    @property
    def items(self) -> Tuple[TaskItem, ...]:
        return tuple(self._items)

    def copy(self) -> "TaskStore":
        return TaskStore(item.copy() for item in self._items)

    def done_count(self) -> int:
        return sum(1 for item in self._items if item.done)

    def summary(self) -> Tuple[int, int]:
        return self.done_count(), len(self._items)
