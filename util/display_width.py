"""Terminal cell width helpers for task text (wide CJK glyphs, emoji, combining marks)."""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    width = 0
    for ch in text or "":
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int, ellipsis: str = "…") -> str:
    """Cut text so that its visible width fits ``width``; marks the cut with ``ellipsis``."""
    text = (text or "").expandtabs(4)
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    limit = max(0, width - display_width(ellipsis))
    acc = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch) or 0)
        if used + w > limit:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + (ellipsis if width >= display_width(ellipsis) else "")


def pad_display(text: str, width: int) -> str:
    trimmed = trim_display(text, width)
    return trimmed + " " * max(0, width - display_width(trimmed))


__all__ = ["display_width", "trim_display", "pad_display"]
