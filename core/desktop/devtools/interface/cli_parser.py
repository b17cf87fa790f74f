"""CLI parser construction for the todo CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="todo: daily checklist in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", help="config file (default: $XDG_CONFIG_HOME/todo/config.json)")
    parser.add_argument("--dir", dest="tasks_dir", help="directory holding the list files")
    when = parser.add_mutually_exclusive_group()
    when.add_argument("--name", "-n", help="open a named list instead of a date (today/tomorrow/yesterday work too)")
    when.add_argument("--tomorrow", action="store_true", help="open tomorrow's list")
    when.add_argument("--yesterday", action="store_true", help="open yesterday's list")
    parser.add_argument("--import", dest="import_from", metavar="NAME", help="append the tasks of another list on start")
    parser.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="color palette")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")
    parser.add_argument("--version", action="store_true", help="show version and exit")
    parser.set_defaults(func=commands.cmd_tui)

    sub = parser.add_subparsers(dest="command")

    tui_p = sub.add_parser("tui", help="interactive list (default)")
    tui_p.set_defaults(func=commands.cmd_tui)

    status_p = sub.add_parser("status", help="print done/total")
    status_p.set_defaults(func=commands.cmd_status)

    details_p = sub.add_parser("details", help="print the list as checklist lines")
    details_p.set_defaults(func=commands.cmd_details)

    return parser
