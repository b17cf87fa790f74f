"""Scroll bookkeeping for the task list window."""


def scroll_offset(cursor, total: int, rows: int, offset: int) -> int:
    """Return a list offset that keeps ``cursor`` inside a window of ``rows`` lines."""
    rows = max(1, rows)
    if total <= rows or cursor is None:
        return 0
    offset = max(0, min(offset, total - rows))
    if cursor < offset:
        return cursor
    if cursor >= offset + rows:
        return cursor - rows + 1
    return offset


__all__ = ["scroll_offset"]
