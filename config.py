from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger("todo.config")

CONFIG_DIRNAME = "todo"
CONFIG_FILENAMES = ("config.json", "config.yaml", "config.yml")
DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class ConfigError(ValueError):
    pass


def config_home() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config"
    return Path(".config")


def default_tasks_dir() -> str:
    return str(Path.home() / ".config" / CONFIG_DIRNAME)


@dataclass
class TodoConfig:
    path: str = field(default_factory=default_tasks_dir)
    date_format: str = DEFAULT_DATE_FORMAT
    habits: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TodoConfig":
        cfg = cls()
        path = data.get("path")
        if isinstance(path, str) and path.strip():
            cfg.path = path.strip()
        date_format = data.get("date_format")
        if isinstance(date_format, str) and date_format.strip():
            cfg.date_format = date_format
        habits = data.get("habits")
        if isinstance(habits, list):
            cfg.habits = [str(h) for h in habits if h is not None]
        elif habits is not None:
            logger.warning("Ignoring 'habits': expected a list, got %s", type(habits).__name__)
        return cfg

    @property
    def tasks_dir(self) -> Path:
        return Path(os.path.expandvars(self.path)).expanduser()


def default_config_path() -> Optional[Path]:
    base = config_home() / CONFIG_DIRNAME
    for name in CONFIG_FILENAMES:
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Cannot read config %s, using defaults: %s", path, exc)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config %s is not a mapping, using defaults", path)
        return {}
    return data


def load_config(path: Optional[Path] = None) -> TodoConfig:
    """Load the user config.

    An explicit ``path`` must exist. Without one, the XDG location is tried and a
    missing file means defaults. ``TODO_DIR`` overrides the tasks directory.
    """
    if path is not None:
        path = Path(path).expanduser()
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        cfg = TodoConfig.from_dict(_read_config(path))
    else:
        found = default_config_path()
        cfg = TodoConfig.from_dict(_read_config(found)) if found else TodoConfig()
    env_dir = os.environ.get("TODO_DIR")
    if env_dir:
        cfg.path = env_dir
    return cfg


__all__ = ["ConfigError", "TodoConfig", "load_config", "default_config_path", "config_home"]
