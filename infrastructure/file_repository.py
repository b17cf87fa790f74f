import logging
import os
import tempfile
from pathlib import Path

from core import TaskStore
from application.ports import TaskListRepository
from infrastructure.task_list_parser import TaskListParser

logger = logging.getLogger("todo.storage")


class TaskFileError(OSError):
    """Reading or writing a list file failed for a reason other than absence."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.reason = message


class FileTaskListRepository(TaskListRepository):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def load(self, path: Path) -> TaskStore:
        """Load a list file; a missing file is a new, empty list."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            logger.debug("No list at %s, starting empty", path)
            return TaskStore()
        except OSError as exc:
            raise TaskFileError(path, f"cannot read list: {exc}") from exc
        store, warnings = TaskListParser.parse_bytes(data, self.encoding)
        for warning in warnings:
            logger.warning("%s:%d: skipping unreadable line %r", path, warning.line_no, warning.line)
        return store

    def save(self, path: Path, store: TaskStore) -> None:
        """Write the list atomically: temp file in the same directory, then rename."""
        path = Path(path)
        data = TaskListParser.format_store(store)
        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding=self.encoding,
                delete=False,
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(path))
        except OSError as exc:
            raise TaskFileError(path, f"cannot save list: {exc}") from exc
        finally:
            if tmp_path is not None and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_path)
        logger.debug("Saved %d tasks to %s", len(store), path)


__all__ = ["FileTaskListRepository", "TaskFileError"]
