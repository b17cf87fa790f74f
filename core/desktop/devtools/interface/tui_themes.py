#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "task.done": "#9ad974",
        "task.open": "#d7dfe6",
        "mark.done": "#9ad974 bold",
        "mark.open": "#97a0a9",
        "text.dim": "#97a0a9",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.done": "bg:#3b3b3b #9ad974 bold",
        "editing": "bg:#3b3b3b #ffb347",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "key": "#e5c07b bold",
        "status.dirty": "#e5c07b bold",
        "status.error": "#e06c75 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "task.done": "#b8f171",
        "task.open": "#e8eaec",
        "mark.done": "#b8f171 bold",
        "mark.open": "#a7b0ba",
        "text.dim": "#a7b0ba",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.done": "bg:#3d4047 #b8f171 bold",
        "editing": "bg:#3d4047 #ffb347",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "key": "#f0c674 bold",
        "status.dirty": "#f0c674 bold",
        "status.error": "#ff6b6b bold",
    },
    "mono": {
        "": "",
        "task.done": "",
        "task.open": "",
        "mark.done": "bold",
        "mark.open": "",
        "text.dim": "",
        "selected": "reverse",
        "selected.done": "reverse",
        "editing": "underline",
        "header": "bold",
        "border": "",
        "key": "bold",
        "status.dirty": "bold",
        "status.error": "bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
