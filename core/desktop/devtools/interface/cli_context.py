"""Turn parsed CLI arguments plus user config into the list a command works on."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config import TodoConfig, load_config
from core.desktop.devtools.interface.tasks_dir_resolver import list_path, resolve_list, DAY_WORDS


@dataclass
class ListTarget:
    config: TodoConfig
    title: str
    path: Path
    day_offset: Optional[int]
    import_path: Optional[Path] = None


def _date_offset(args) -> int:
    if getattr(args, "tomorrow", False):
        return 1
    if getattr(args, "yesterday", False):
        return -1
    return 0


def resolve_target(args) -> ListTarget:
    config_path = getattr(args, "config", None)
    config = load_config(Path(config_path) if config_path else None)
    tasks_dir_arg = getattr(args, "tasks_dir", None)
    if tasks_dir_arg:
        config.path = str(tasks_dir_arg)
    tasks_dir = config.tasks_dir

    title, path, offset = resolve_list(
        tasks_dir,
        config.date_format,
        name=getattr(args, "name", None),
        offset=_date_offset(args),
    )

    import_path = None
    import_name = getattr(args, "import_from", None)
    if import_name:
        word = import_name.strip().lower()
        if word in DAY_WORDS:
            _, import_path, _ = resolve_list(tasks_dir, config.date_format, name=word)
        else:
            import_path = list_path(tasks_dir, import_name)
        if import_path == path:
            raise ValueError(f"Cannot import a list into itself: {path}")
    return ListTarget(config=config, title=title, path=path, day_offset=offset, import_path=import_path)


__all__ = ["ListTarget", "resolve_target"]
