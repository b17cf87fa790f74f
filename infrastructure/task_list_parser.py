import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from core import TaskItem, TaskStore


@dataclass(frozen=True)
class ParseWarning:
    """A non-blank line that could not be read as a checklist item."""

    line_no: int
    line: str


class TaskListParser:
    ITEM_PATTERN = re.compile(r"^- \[(x|X| )\] (.*)$")
    DONE_MARKER = "- [x]"
    OPEN_MARKER = "- [ ]"

    @classmethod
    def parse_line(cls, line: str) -> Optional[TaskItem]:
        match = cls.ITEM_PATTERN.match(line.rstrip("\r\n"))
        if not match:
            return None
        text = match.group(2).strip()
        if not text:
            return None
        return TaskItem(text, match.group(1) in ("x", "X"))

    @classmethod
    def parse_text(cls, content: str) -> Tuple[TaskStore, List[ParseWarning]]:
        # Only "\n" separates items; other Unicode line breaks are task text.
        return cls._parse_numbered(enumerate(content.split("\n"), start=1))

    @classmethod
    def parse_bytes(cls, data: bytes, encoding: str = "utf-8") -> Tuple[TaskStore, List[ParseWarning]]:
        """Decode line by line so one undecodable line is skipped, not fatal."""
        lines: List[Tuple[int, str]] = []
        undecodable: List[ParseWarning] = []
        for line_no, raw in enumerate(data.split(b"\n"), start=1):
            try:
                lines.append((line_no, raw.decode(encoding)))
            except UnicodeDecodeError:
                undecodable.append(ParseWarning(line_no, raw.decode(encoding, errors="replace").rstrip("\r")))
        store, warnings = cls._parse_numbered(lines)
        return store, sorted(warnings + undecodable, key=lambda w: w.line_no)

    @classmethod
    def _parse_numbered(cls, lines: Iterable[Tuple[int, str]]) -> Tuple[TaskStore, List[ParseWarning]]:
        items: List[TaskItem] = []
        warnings: List[ParseWarning] = []
        for line_no, line in lines:
            if not line.strip():
                continue
            item = cls.parse_line(line)
            if item is None:
                warnings.append(ParseWarning(line_no, line.rstrip("\r")))
                continue
            items.append(item)
        return TaskStore(items), warnings

    @classmethod
    def format_item(cls, item: TaskItem) -> str:
        marker = cls.DONE_MARKER if item.done else cls.OPEN_MARKER
        return f"{marker} {item.text}"

    @classmethod
    def format_items(cls, items: Iterable[TaskItem]) -> str:
        lines = [cls.format_item(item) for item in items if item.text.strip()]
        return "".join(f"{line}\n" for line in lines)

    @classmethod
    def format_store(cls, store: TaskStore) -> str:
        return cls.format_items(item for _, item in store.iter())


__all__ = ["ParseWarning", "TaskListParser"]
