"""Rendering helpers for TodoTUI: pure functions from a SessionView to formatted text."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core.desktop.devtools.application.session import SessionView
from util.display_width import pad_display

DONE_GLYPH = "[x]"
OPEN_GLYPH = "[ ]"


def build_list_text(view: SessionView, width: int, height: int, offset: int = 0) -> FormattedText:
    """Task rows ``offset .. offset+height`` of the list, one line each."""
    width = max(10, width)
    parts: List[Tuple[str, str]] = []
    if not view.items:
        parts.append(("class:text.dim", pad_display(" No tasks yet. Press a to add one.", width)))
        return FormattedText(parts)

    text_width = max(1, width - 6)
    rows = view.items[offset: offset + max(1, height)]
    for row_no, item in enumerate(rows):
        index = offset + row_no
        selected = index == view.cursor
        if selected and view.editing:
            style = "class:editing"
            text = view.edit_text
        elif selected:
            style = "class:selected.done" if item.done else "class:selected"
            text = item.text
        else:
            style = "class:task.done" if item.done else "class:task.open"
            text = item.text
        mark_style = "class:mark.done" if item.done else "class:mark.open"
        if selected:
            mark_style = style
        pointer = "›" if selected else " "
        parts.append((style, f"{pointer} "))
        parts.append((mark_style, DONE_GLYPH if item.done else OPEN_GLYPH))
        parts.append((style, " " + pad_display(text, text_width)))
        if row_no < len(rows) - 1:
            parts.append(("", "\n"))
    return FormattedText(parts)


def build_edit_line(view: SessionView) -> FormattedText:
    """The input line; carries the cursor marker while editing."""
    if not view.editing:
        return FormattedText([])
    before = view.edit_text[: view.edit_position]
    after = view.edit_text[view.edit_position:]
    return FormattedText([
        ("class:key", "> "),
        ("", before),
        ("[SetCursorPosition]", ""),
        ("", after),
    ])


__all__ = [
    "build_list_text",
    "build_edit_line",
    "DONE_GLYPH",
    "OPEN_GLYPH",
]
