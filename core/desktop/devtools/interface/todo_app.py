#!/usr/bin/env python3
"""
todo: daily checklist manager (CLI/TUI).

Lists live under the configured directory as <name>.md, one file per day by default.

This is a thin facade that delegates to specialized modules.
"""

import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError

from config import ConfigError
from core import TaskIndexError
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from infrastructure.file_repository import TaskFileError

from .cli_report import cmd_status, cmd_details
from .tui_app import cmd_tui, TodoTUI
from .tui_themes import THEMES, DEFAULT_THEME

__all__ = [
    "cmd_tui",
    "cmd_status",
    "cmd_details",
    "TodoTUI",
    "THEMES",
    "DEFAULT_THEME",
    "build_parser",
    "main",
]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser():
    """Build CLI argument parser."""
    return build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=DEFAULT_THEME)


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("daily-todo"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    try:
        return args.func(args)
    except TaskFileError as exc:
        print(f"todo: error: {exc}", file=sys.stderr)
        return 1
    except (ConfigError, ValueError) as exc:
        print(f"todo: error: {exc}", file=sys.stderr)
        return 1
    except TaskIndexError as exc:
        print(f"todo: internal error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
