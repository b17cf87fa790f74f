"""Interactive task-list state machine.

The session owns one TaskStore for the lifetime of the interactive loop and
translates key names into transitions. It never draws anything: the TUI reads
``snapshot()`` after every key and renders it.

Key names follow prompt_toolkit (``"up"``, ``"escape"``, ``"home"``...) plus
``"enter"`` and ``"backspace"``; printable characters are passed as themselves.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Tuple

from core import TaskItem, TaskStore
from application.ports import TaskListRepository
from infrastructure.file_repository import TaskFileError
from core.desktop.devtools.application.task_list_service import load_with_habits

logger = logging.getLogger("todo.session")

# offset in days from today -> (title, list path)
DayNavigator = Callable[[int], Tuple[str, Path]]


class Mode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


@dataclass
class EditBuffer:
    text: str = ""
    position: int = 0

    def reset(self, text: str = "") -> None:
        self.text = text
        self.position = len(text)

    def insert(self, chars: str) -> None:
        self.text = self.text[: self.position] + chars + self.text[self.position:]
        self.position += len(chars)

    def backspace(self) -> None:
        if self.position == 0:
            return
        self.text = self.text[: self.position - 1] + self.text[self.position:]
        self.position -= 1

    def delete(self) -> None:
        self.text = self.text[: self.position] + self.text[self.position + 1:]

    def move(self, delta: int) -> None:
        self.position = max(0, min(self.position + delta, len(self.text)))


@dataclass(frozen=True)
class SessionView:
    """Read-only picture of the session for rendering."""

    title: str
    path: Path
    items: Tuple[TaskItem, ...]
    cursor: Optional[int]
    mode: Mode
    edit_text: str
    edit_position: int
    dirty: bool
    status_message: str
    can_change_day: bool

    @property
    def editing(self) -> bool:
        return self.mode is Mode.EDITING

    @property
    def done_count(self) -> int:
        return sum(1 for item in self.items if item.done)


class TodoSession:
    NORMAL_KEYS: Dict[str, Tuple] = {
        "j": ("move_cursor", 1),
        "down": ("move_cursor", 1),
        "k": ("move_cursor", -1),
        "up": ("move_cursor", -1),
        "g": ("move_to_first",),
        "home": ("move_to_first",),
        "G": ("move_to_last",),
        "end": ("move_to_last",),
        "x": ("toggle_current",),
        " ": ("toggle_current",),
        "a": ("new_task",),
        "o": ("new_task",),
        "e": ("edit_current",),
        "i": ("edit_current",),
        "enter": ("edit_current",),
        "d": ("delete_current",),
        "delete": ("delete_current",),
        "K": ("reorder", -1),
        "J": ("reorder", 1),
        "h": ("change_day", -1),
        "l": ("change_day", 1),
        "t": ("go_today",),
        "q": ("request_quit",),
    }
    EDITING_KEYS: Dict[str, Tuple] = {
        "enter": ("confirm_edit",),
        "escape": ("cancel_edit",),
        "backspace": ("backspace",),
        "delete": ("delete_forward",),
        "left": ("move_text_cursor", -1),
        "right": ("move_text_cursor", 1),
        "home": ("text_home",),
        "end": ("text_end",),
    }

    def __init__(
        self,
        store: TaskStore,
        path: Path,
        repository: TaskListRepository,
        *,
        title: str = "",
        navigator: Optional[DayNavigator] = None,
        habits: Sequence[str] = (),
        day_offset: int = 0,
        dirty: bool = False,
    ):
        self.store = store
        self.path = Path(path)
        self.repository = repository
        self.title = title or self.path.stem
        self.navigator = navigator
        self.habits = list(habits)
        self.day_offset = day_offset
        self.mode = Mode.NORMAL
        self.edit = EditBuffer()
        self._edit_is_draft = False
        self.dirty = dirty
        self.status_message = ""
        self.quit_requested = False
        self.cursor: Optional[int] = 0 if len(store) else None

    # ------------------------------------------------------------------ helpers

    @property
    def editing(self) -> bool:
        return self.mode is Mode.EDITING

    @property
    def current_item(self) -> Optional[TaskItem]:
        if self.cursor is None:
            return None
        return self.store[self.cursor]

    def _clamp_cursor(self) -> None:
        if not len(self.store):
            self.cursor = None
            return
        current = self.cursor if self.cursor is not None else 0
        self.cursor = max(0, min(current, len(self.store) - 1))

    def _touch(self) -> None:
        self.dirty = True

    def set_status_message(self, message: str) -> None:
        self.status_message = message

    def snapshot(self) -> SessionView:
        return SessionView(
            title=self.title,
            path=self.path,
            items=tuple(item.copy() for _, item in self.store.iter()),
            cursor=self.cursor,
            mode=self.mode,
            edit_text=self.edit.text,
            edit_position=self.edit.position,
            dirty=self.dirty,
            status_message=self.status_message,
            can_change_day=self.navigator is not None,
        )

    # ----------------------------------------------------------------- dispatch

    def dispatch(self, key: str) -> bool:
        """Apply the transition bound to ``key`` in the current mode."""
        self.status_message = ""
        keymap = self.EDITING_KEYS if self.editing else self.NORMAL_KEYS
        binding = keymap.get(key)
        if binding is None:
            if self.editing and len(key) == 1 and key.isprintable():
                self.insert_text(key)
                return True
            return False
        name, *args = binding
        getattr(self, name)(*args)
        return True

    # ------------------------------------------------------------- normal mode

    def move_cursor(self, delta: int) -> None:
        if self.cursor is None:
            return
        self.cursor = max(0, min(self.cursor + delta, len(self.store) - 1))

    def move_to_first(self) -> None:
        if self.cursor is not None:
            self.cursor = 0

    def move_to_last(self) -> None:
        if self.cursor is not None:
            self.cursor = len(self.store) - 1

    def toggle_current(self) -> None:
        if self.cursor is None:
            return
        self.store.toggle(self.cursor)
        self._touch()

    def new_task(self) -> None:
        self.cursor = self.store.append_draft()
        self._edit_is_draft = True
        self.edit.reset("")
        self.mode = Mode.EDITING

    def edit_current(self) -> None:
        if self.cursor is None:
            return
        self._edit_is_draft = False
        self.edit.reset(self.current_item.text)
        self.mode = Mode.EDITING

    def delete_current(self) -> None:
        if self.cursor is None:
            return
        self.store.remove(self.cursor)
        self._clamp_cursor()
        self._touch()

    def reorder(self, delta: int) -> None:
        if self.cursor is None:
            return
        if delta < 0:
            new_index = self.store.move_up(self.cursor)
        else:
            new_index = self.store.move_down(self.cursor)
        if new_index != self.cursor:
            self.cursor = new_index
            self._touch()

    def request_quit(self) -> None:
        self.quit_requested = True

    def change_day(self, delta: int) -> None:
        self._open_day(self.day_offset + delta)

    def go_today(self) -> None:
        self._open_day(0)

    def _open_day(self, offset: int) -> None:
        if self.navigator is None:
            self.set_status_message("Day navigation needs a dated list")
            return
        title, path = self.navigator(offset)
        try:
            self.save()
            store = load_with_habits(self.repository, path, self.habits)
        except TaskFileError as exc:
            logger.warning("Day switch to %s failed: %s", path, exc)
            self.set_status_message(f"Error: {exc}")
            return
        self.store = store
        self.path = Path(path)
        self.title = title
        self.day_offset = offset
        self.cursor = 0 if len(store) else None
        self.dirty = False

    # ------------------------------------------------------------ editing mode

    def insert_text(self, chars: str) -> None:
        # A list line cannot hold a line break.
        chars = chars.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
        if chars:
            self.edit.insert(chars)

    def backspace(self) -> None:
        if not self.edit.text:
            self.cancel_edit()
            return
        self.edit.backspace()

    def delete_forward(self) -> None:
        self.edit.delete()

    def move_text_cursor(self, delta: int) -> None:
        self.edit.move(delta)

    def text_home(self) -> None:
        self.edit.position = 0

    def text_end(self) -> None:
        self.edit.position = len(self.edit.text)

    def confirm_edit(self) -> None:
        if not self.editing or self.cursor is None:
            return
        was_draft = self._edit_is_draft
        previous = self.current_item.text
        kept = self.store.set_text(self.cursor, self.edit.text)
        if not kept:
            # edit-to-empty deletes; an abandoned draft was never a real task
            self._clamp_cursor()
            if not was_draft:
                self._touch()
        elif was_draft or self.current_item.text != previous:
            self._touch()
        self._finish_edit()

    def cancel_edit(self) -> None:
        if not self.editing:
            return
        if self._edit_is_draft and self.cursor is not None:
            self.store.remove(self.cursor)
            self._clamp_cursor()
        self._finish_edit()

    def _finish_edit(self) -> None:
        self.mode = Mode.NORMAL
        self._edit_is_draft = False
        self.edit.reset("")

    # -------------------------------------------------------------- persistence

    def save(self) -> None:
        self.repository.save(self.path, self.store)
        self.dirty = False

    def close(self) -> None:
        """Exit sequence: drop an unfinished edit, then always save."""
        self.cancel_edit()
        self.save()
        logger.debug("Session for %s closed", self.path)


__all__ = ["DayNavigator", "EditBuffer", "Mode", "SessionView", "TodoSession"]
