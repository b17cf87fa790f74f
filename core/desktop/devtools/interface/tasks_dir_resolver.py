"""Resolve list names and dates to list files under the tasks directory."""

from datetime import date, timedelta
from pathlib import Path
from typing import Callable, Optional, Tuple

LIST_SUFFIX = ".md"
DAY_WORDS = {"yesterday": -1, "today": 0, "tomorrow": 1}


def day_name(offset: int, date_format: str, today: Optional[date] = None) -> str:
    base = today or date.today()
    return (base + timedelta(days=offset)).strftime(date_format)


def list_path(tasks_dir: Path, name: str) -> Path:
    """Map a list name to its file; names already ending in .md are kept."""
    name = name.strip()
    if not name:
        raise ValueError("List name must not be empty")
    filename = name if name.endswith(LIST_SUFFIX) else f"{name}{LIST_SUFFIX}"
    candidate = Path(filename).expanduser()
    if candidate.is_absolute():
        return candidate
    return Path(tasks_dir) / candidate


def resolve_list(
    tasks_dir: Path,
    date_format: str,
    name: Optional[str] = None,
    offset: int = 0,
    today: Optional[date] = None,
) -> Tuple[str, Path, Optional[int]]:
    """Return (title, path, day offset). The offset is None for named lists."""
    if name:
        word = name.strip().lower()
        if word in DAY_WORDS:
            offset = DAY_WORDS[word]
        else:
            path = list_path(tasks_dir, name)
            return path.stem, path, None
    title = day_name(offset, date_format, today)
    return title, list_path(tasks_dir, title), offset


def day_navigator(
    tasks_dir: Path, date_format: str, today: Optional[date] = None
) -> Callable[[int], Tuple[str, Path]]:
    # Pin "today" so paging across midnight stays on the same calendar.
    anchor = today or date.today()

    def navigate(offset: int) -> Tuple[str, Path]:
        title = day_name(offset, date_format, anchor)
        return title, list_path(tasks_dir, title)

    return navigate


__all__ = ["day_name", "list_path", "resolve_list", "day_navigator", "DAY_WORDS", "LIST_SUFFIX"]
