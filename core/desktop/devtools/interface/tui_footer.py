"""Footer renderer for TodoTUI: key help for the current mode."""

from typing import List, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core.desktop.devtools.application.session import SessionView

NORMAL_HELP: Tuple[Tuple[str, str], ...] = (
    ("q", "quit"),
    ("j/k", "move"),
    ("x", "toggle"),
    ("a", "add"),
    ("e", "edit"),
    ("d", "delete"),
    ("J/K", "reorder"),
)
DAY_HELP: Tuple[Tuple[str, str], ...] = (
    ("h/l", "prev/next day"),
    ("t", "today"),
)
EDIT_HELP: Tuple[Tuple[str, str], ...] = (
    ("Enter", "save"),
    ("Esc", "cancel"),
)


def _help_fragments(pairs: Sequence[Tuple[str, str]]) -> List[Tuple[str, str]]:
    parts: List[Tuple[str, str]] = []
    for idx, (key, label) in enumerate(pairs):
        if idx:
            parts.append(("class:border", " · "))
        parts.append(("class:key", key))
        parts.append(("class:text.dim", f" {label}"))
    return parts


def build_footer_text(view: SessionView) -> FormattedText:
    if view.editing:
        return FormattedText(_help_fragments(EDIT_HELP))
    pairs = NORMAL_HELP + (DAY_HELP if view.can_change_day else ())
    return FormattedText(_help_fragments(pairs))


__all__ = ["build_footer_text", "NORMAL_HELP", "DAY_HELP", "EDIT_HELP"]
