from pathlib import Path

import pytest

from core import TaskItem, TaskStore
from core.desktop.devtools.application.session import EditBuffer, Mode, TodoSession
from infrastructure.file_repository import FileTaskListRepository, TaskFileError


def _session(tmp_path: Path, *items, **kwargs) -> TodoSession:
    store = TaskStore(TaskItem(text, done) for text, done in items)
    return TodoSession(store, tmp_path / "list.md", FileTaskListRepository(), **kwargs)


def _texts(session):
    return [(item.text, item.done) for _, item in session.store]


class TestInitialState:
    def test_cursor_starts_at_first_task(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        assert session.cursor == 0
        assert session.mode is Mode.NORMAL
        assert session.dirty is False

    def test_cursor_is_none_for_empty_store(self, tmp_path):
        assert _session(tmp_path).cursor is None

    def test_title_defaults_to_file_stem(self, tmp_path):
        assert _session(tmp_path).title == "list"

    def test_current_item_follows_cursor(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", True))
        assert session.current_item == TaskItem("A", False)
        session.move_cursor(1)
        assert session.current_item == TaskItem("B", True)
        assert _session(tmp_path).current_item is None


class TestNormalMode:
    def test_cursor_clamps_without_wraparound(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", False))
        session.move_cursor(-1)
        assert session.cursor == 0
        session.move_cursor(5)
        assert session.cursor == 1
        session.move_to_first()
        assert session.cursor == 0
        session.move_to_last()
        assert session.cursor == 1

    def test_toggle_marks_dirty(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", True))
        session.toggle_current()
        assert _texts(session) == [("A", True), ("B", True)]
        assert session.dirty is True

    def test_toggle_on_empty_is_noop(self, tmp_path):
        session = _session(tmp_path)
        session.toggle_current()
        assert session.dirty is False

    def test_delete_last_task_leaves_no_cursor(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.delete_current()
        assert len(session.store) == 0
        assert session.cursor is None

    def test_delete_reclamps_cursor(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", False), ("C", False))
        session.move_to_last()
        session.delete_current()
        assert session.cursor == 1
        session.move_to_first()
        session.delete_current()
        assert session.cursor == 0
        assert _texts(session) == [("B", False)]

    def test_reorder_moves_task_and_cursor_follows(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", True), ("C", False))
        session.move_cursor(1)
        session.reorder(-1)
        assert _texts(session)[0] == ("B", True)
        assert session.cursor == 0
        session.reorder(-1)
        assert session.cursor == 0
        session.reorder(1)
        session.reorder(1)
        assert [t for t, _ in _texts(session)] == ["A", "C", "B"]
        assert session.cursor == 2

    def test_reorder_at_boundary_is_not_a_change(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.reorder(-1)
        assert session.dirty is False


class TestEditing:
    def test_new_task_enters_editing_on_draft(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.new_task()
        assert session.mode is Mode.EDITING
        assert session.cursor == 1
        assert session.edit.text == ""

    def test_new_task_confirm_appends(self, tmp_path):
        session = _session(tmp_path)
        session.new_task()
        session.insert_text("Gym")
        session.confirm_edit()
        assert session.mode is Mode.NORMAL
        assert _texts(session) == [("Gym", False)]
        assert session.cursor == 0
        assert session.dirty is True

    def test_new_task_confirm_empty_discards_draft(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.new_task()
        session.insert_text("   ")
        session.confirm_edit()
        assert _texts(session) == [("A", False)]
        assert session.cursor == 0
        assert session.dirty is False

    def test_new_task_cancel_removes_draft(self, tmp_path):
        session = _session(tmp_path)
        session.new_task()
        session.insert_text("half")
        session.cancel_edit()
        assert len(session.store) == 0
        assert session.cursor is None
        assert session.mode is Mode.NORMAL

    def test_edit_prefills_and_confirm_replaces(self, tmp_path):
        session = _session(tmp_path, ("Read", True))
        session.edit_current()
        assert session.edit.text == "Read"
        assert session.edit.position == 4
        session.insert_text(" book")
        session.confirm_edit()
        assert _texts(session) == [("Read book", True)]
        assert session.dirty is True

    def test_edit_unchanged_is_not_dirty(self, tmp_path):
        session = _session(tmp_path, ("Read", False))
        session.edit_current()
        session.confirm_edit()
        assert session.dirty is False

    def test_edit_to_empty_deletes_task(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", False))
        session.move_to_last()
        session.edit_current()
        session.edit.reset("")
        session.confirm_edit()
        assert _texts(session) == [("A", False)]
        assert session.cursor == 0
        assert session.dirty is True

    def test_cancel_edit_keeps_original_text(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.edit_current()
        session.insert_text("zzz")
        session.cancel_edit()
        assert _texts(session) == [("A", False)]
        assert session.dirty is False

    def test_backspace_deletes_before_cursor(self, tmp_path):
        session = _session(tmp_path, ("abc", False))
        session.edit_current()
        session.move_text_cursor(-1)
        session.backspace()
        assert session.edit.text == "ac"
        assert session.edit.position == 1

    def test_backspace_on_empty_buffer_cancels_existing_edit(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.edit_current()
        session.backspace()
        assert session.edit.text == ""
        assert session.mode is Mode.EDITING
        session.backspace()
        assert session.mode is Mode.NORMAL
        assert _texts(session) == [("A", False)]

    def test_backspace_on_empty_draft_removes_it(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.new_task()
        session.backspace()
        assert session.mode is Mode.NORMAL
        assert _texts(session) == [("A", False)]
        assert session.cursor == 0

    def test_insert_at_text_cursor_and_newlines_flattened(self, tmp_path):
        session = _session(tmp_path, ("ac", False))
        session.edit_current()
        session.text_home()
        session.move_text_cursor(1)
        session.insert_text("b")
        session.text_end()
        session.insert_text("\nd")
        assert session.edit.text == "abc d"
        session.insert_text("\r\ne")
        assert session.edit.text == "abc d e"

    def test_delete_forward(self, tmp_path):
        session = _session(tmp_path, ("abc", False))
        session.edit_current()
        session.text_home()
        session.delete_forward()
        assert session.edit.text == "bc"


def test_edit_buffer_move_clamps():
    buf = EditBuffer()
    buf.reset("ab")
    buf.move(10)
    assert buf.position == 2
    buf.move(-10)
    assert buf.position == 0
    buf.backspace()
    assert buf.text == "ab"


class TestPersistence:
    def test_close_saves_even_when_clean(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.close()
        assert (tmp_path / "list.md").read_text(encoding="utf-8") == "- [ ] A\n"

    def test_close_drops_open_draft(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.new_task()
        session.insert_text("unfinished")
        session.close()
        assert (tmp_path / "list.md").read_text(encoding="utf-8") == "- [ ] A\n"

    def test_toggle_save_load_scenario(self, tmp_path):
        session = _session(tmp_path, ("A", False), ("B", True))
        session.toggle_current()
        session.close()
        loaded = FileTaskListRepository().load(tmp_path / "list.md")
        assert loaded == session.store
        assert [(i.text, i.done) for _, i in loaded] == [("A", True), ("B", True)]

    def test_close_propagates_save_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        session = TodoSession(TaskStore(), blocker / "list.md", FileTaskListRepository())
        with pytest.raises(TaskFileError):
            session.close()


class TestDayNavigation:
    def _navigator(self, tmp_path):
        return lambda offset: (f"day{offset}", tmp_path / f"day{offset}.md")

    def test_change_day_saves_and_loads_with_habits(self, tmp_path):
        session = _session(
            tmp_path,
            ("A", False),
            navigator=self._navigator(tmp_path),
            habits=["Gym"],
        )
        session.toggle_current()
        session.change_day(1)
        assert (tmp_path / "list.md").read_text(encoding="utf-8") == "- [x] A\n"
        assert session.title == "day1"
        assert session.path == tmp_path / "day1.md"
        assert _texts(session) == [("Gym", False)]
        assert session.cursor == 0
        assert session.day_offset == 1
        assert session.dirty is False

    def test_go_today_returns_to_offset_zero(self, tmp_path):
        (tmp_path / "day0.md").write_text("- [x] Done today\n", encoding="utf-8")
        session = _session(tmp_path, navigator=self._navigator(tmp_path), day_offset=-2)
        session.go_today()
        assert session.day_offset == 0
        assert _texts(session) == [("Done today", True)]

    def test_without_navigator_shows_message(self, tmp_path):
        session = _session(tmp_path, ("A", False))
        session.change_day(1)
        assert session.path == tmp_path / "list.md"
        assert session.status_message

    def test_failed_save_keeps_current_day(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        session = TodoSession(
            TaskStore([TaskItem("A", False)]),
            blocker / "list.md",
            FileTaskListRepository(),
            navigator=self._navigator(tmp_path),
        )
        session.change_day(1)
        assert session.path == blocker / "list.md"
        assert session.status_message.startswith("Error")


def test_snapshot_is_detached_copy(tmp_path):
    session = _session(tmp_path, ("A", False))
    view = session.snapshot()
    session.toggle_current()
    assert view.items[0].done is False
    assert view.cursor == 0
    assert view.editing is False
    assert view.can_change_day is False
