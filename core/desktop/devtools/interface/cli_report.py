"""Read-only reporting commands: status and details."""

from core.desktop.devtools.application.task_list_service import (
    checklist_lines,
    load_with_habits,
    summarize,
)
from core.desktop.devtools.interface.cli_context import resolve_target
from infrastructure.file_repository import FileTaskListRepository


def _load_target(args):
    target = resolve_target(args)
    store = load_with_habits(FileTaskListRepository(), target.path, target.config.habits)
    return target, store


def format_status(done: int, total: int) -> str:
    return f"{done}/{total}"


def cmd_status(args) -> int:
    """Print done/total for the list without opening the TUI."""
    _, store = _load_target(args)
    print(format_status(*summarize(store)))
    return 0


def cmd_details(args) -> int:
    """Print the list as markdown checklist lines."""
    _, store = _load_target(args)
    for line in checklist_lines(store):
        print(line)
    return 0


__all__ = ["cmd_status", "cmd_details", "format_status"]
