#!/usr/bin/env python3
"""TUI application - TodoTUI class and cmd_tui command."""

import logging
import os
import sys

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from core import TaskIndexError
from core.desktop.devtools.application.session import TodoSession
from core.desktop.devtools.application.task_list_service import open_task_list
from core.desktop.devtools.interface.cli_context import resolve_target
from core.desktop.devtools.interface.tasks_dir_resolver import day_navigator
from core.desktop.devtools.interface.tui_navigation import scroll_offset
from core.desktop.devtools.interface.tui_footer import build_footer_text
from core.desktop.devtools.interface.tui_render import build_edit_line, build_list_text
from core.desktop.devtools.interface.tui_status import build_status_text
from infrastructure.file_repository import FileTaskListRepository

from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("todo.session")

# Keys forwarded to the session under their own names; everything else goes
# through the catch-all binding as typed characters.
NAMED_KEYS = ("up", "down", "left", "right", "home", "end", "delete")

# status bar, two rules, edit line, footer
CHROME_ROWS = 5


class TodoTUI:
    @staticmethod
    def get_theme_palette(theme: str):
        from .tui_themes import get_theme_palette as _get_theme_palette
        return _get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(self, session: TodoSession, theme: str = DEFAULT_THEME, *, input=None, output=None):
        self.session = session
        self.list_offset = 0
        self.style = self.build_style(theme)

        kb = KeyBindings()
        kb.timeout = 0
        editing = Condition(lambda: self.session.editing)

        @kb.add(Keys.Any)
        def _(event):
            self.handle_key(event.app, event.data)

        for name in NAMED_KEYS:
            kb.add(name)(self._forward(name))

        @kb.add("enter")
        def _(event):
            self.handle_key(event.app, "enter")

        @kb.add("backspace")
        def _(event):
            self.handle_key(event.app, "backspace")

        @kb.add("escape", eager=True)
        def _(event):
            self.handle_key(event.app, "escape")

        @kb.add(Keys.BracketedPaste)
        def _(event):
            self.handle_paste(event.data)

        @kb.add("c-c")
        def _(event):
            """Ctrl+C - leave like q, an open edit is dropped."""
            self.session.cancel_edit()
            self.session.request_quit()
            event.app.exit()

        self.status_bar = Window(
            content=FormattedTextControl(self.get_status_text),
            height=1,
            always_hide_cursor=True,
        )
        self.task_list = Window(
            content=FormattedTextControl(self.get_task_list_text),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.edit_window = Window(
            content=FormattedTextControl(self.get_edit_text, focusable=True, show_cursor=True),
            height=1,
            always_hide_cursor=~editing,
        )
        self.footer = Window(
            content=FormattedTextControl(self.get_footer_text),
            height=1,
            always_hide_cursor=True,
        )
        root = HSplit([
            self.status_bar,
            Window(height=1, char="─", style="class:border"),
            self.task_list,
            Window(height=1, char="─", style="class:border"),
            self.edit_window,
            self.footer,
        ])

        self.app = Application(
            layout=Layout(root, focused_element=self.edit_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )
        # Esc must not wait for the rest of an ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TODO_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    def _forward(self, key: str):
        def handler(event):
            self.handle_key(event.app, key)
        return handler

    def handle_paste(self, data: str) -> None:
        """Pasted text goes into the edit buffer; outside editing it is ignored."""
        if self.session.editing:
            self.session.insert_text(data)

    def handle_key(self, app, key: str) -> None:
        try:
            self.session.dispatch(key)
        except TaskIndexError as exc:
            app.exit(exception=exc)
            return
        if self.session.quit_requested:
            app.exit()

    # ----------------------------------------------------------------- render

    def terminal_size(self):
        try:
            size = self.app.output.get_size()
            return size.columns, size.rows
        except (AttributeError, OSError, ValueError):
            return 80, 24

    def list_rows(self) -> int:
        _, rows = self.terminal_size()
        return max(1, rows - CHROME_ROWS)

    def get_status_text(self) -> FormattedText:
        width, _ = self.terminal_size()
        return build_status_text(self.session.snapshot(), width)

    def get_task_list_text(self) -> FormattedText:
        view = self.session.snapshot()
        width, _ = self.terminal_size()
        rows = self.list_rows()
        self.list_offset = scroll_offset(view.cursor, len(view.items), rows, self.list_offset)
        return build_list_text(view, width, rows, self.list_offset)

    def get_edit_text(self) -> FormattedText:
        return build_edit_line(self.session.snapshot())

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self.session.snapshot())

    def run(self) -> None:
        self.app.run()


def cmd_tui(args) -> int:
    target = resolve_target(args)
    repo = FileTaskListRepository()
    is_new = not repo.exists(target.path)
    store = open_task_list(repo, target.path, target.config.habits, target.import_path)
    navigator = None
    if target.day_offset is not None:
        navigator = day_navigator(target.config.tasks_dir, target.config.date_format)
    session = TodoSession(
        store,
        target.path,
        repo,
        title=target.title,
        navigator=navigator,
        habits=target.config.habits,
        day_offset=target.day_offset or 0,
        dirty=is_new or target.import_path is not None,
    )
    tui = TodoTUI(session, theme=getattr(args, "theme", DEFAULT_THEME))
    try:
        tui.run()
    except TaskIndexError as exc:
        logger.error("Internal index error, %s left untouched: %s", session.path, exc)
        print(f"todo: internal error, {session.path} was not saved: {exc}", file=sys.stderr)
        return 2
    session.close()
    return 0


__all__ = ["TodoTUI", "cmd_tui", "NAMED_KEYS"]
