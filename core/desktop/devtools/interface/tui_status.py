"""Status bar builder for TodoTUI."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core.desktop.devtools.application.session import SessionView
from util.display_width import display_width, trim_display


def build_status_text(view: SessionView, width: int = 80) -> FormattedText:
    total = len(view.items)
    parts: List[Tuple[str, str]] = [
        ("class:border", "─ "),
        ("class:header", view.title),
        ("class:border", " ─"),
        ("class:text.dim", f" {view.done_count}/{total} "),
    ]
    if view.dirty:
        parts.append(("class:status.dirty", "● modified "))
    if view.status_message:
        style = "class:status.error" if view.status_message.startswith("Error") else "class:text.dim"
        used = sum(display_width(text) for _, text in parts)
        parts.append((style, trim_display(view.status_message, max(0, width - used))))
    return FormattedText(parts)


__all__ = ["build_status_text"]
