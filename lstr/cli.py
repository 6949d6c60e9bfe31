"""Command-line front door for lstr.

``lstr [PATH]`` prints the classic tree; ``lstr interactive [PATH]`` (or
``lstr i``) starts the explorer. Parsing, config merging and logging setup
happen here; ``LstrError`` is reported and turned into exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .config import OPEN_MODE_EXIT, OPEN_MODES, load_config
from .editor import resolve_editor_command, run_editor
from .errors import LstrError
from .logs import configure_logging
from .runtime import run_interactive
from .runtime.app import InteractiveOptions
from .ui_theme import COLOR_CHOICES, available_theme_names
from .view import ViewOptions, run_view

logger = logging.getLogger(__name__)

INTERACTIVE_COMMANDS = ("interactive", "i")


def _non_negative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    common.add_argument("-v", "--verbose", action="count", default=0, help="Log more (repeat for debug).")
    common.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    common.add_argument("-a", "--all", action="store_true", dest="show_hidden", help="Show all files, including hidden ones.")
    common.add_argument(
        "-g",
        "--gitignore",
        action="store_true",
        dest="respect_ignore_rules",
        help="Respect .gitignore and other standard ignore files.",
    )
    common.add_argument("--icons", action="store_true", default=None, help="Display file-specific icons (requires a Nerd Font).")
    common.add_argument("-s", "--size", action="store_true", help="Display the size of files.")
    common.add_argument("-p", "--permissions", action="store_true", help="Display file permissions.")
    common.add_argument("-G", "--git-status", action="store_true", help="Show git status for files.")
    common.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    return common


def build_view_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lstr",
        description="A minimalist directory tree viewer. Use 'lstr interactive' for the explorer.",
        parents=[_common_parser()],
    )
    parser.add_argument("path", nargs="?", type=Path, default=Path("."), help="Directory to display (default: .).")
    parser.add_argument("--color", choices=COLOR_CHOICES, default="auto", help="When to use colorized output.")
    parser.add_argument("-L", "--level", type=_non_negative_int, default=None, help="Maximum depth to descend.")
    parser.add_argument("-d", "--dirs-only", action="store_true", help="Display directories only.")
    return parser


def build_interactive_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lstr interactive",
        description="Explore a directory tree interactively.",
        parents=[_common_parser()],
    )
    parser.add_argument("path", nargs="?", type=Path, default=Path("."), help="Directory to explore (default: .).")
    parser.add_argument(
        "--expand-level",
        type=_non_negative_int,
        default=None,
        metavar="LEVEL",
        help="Initial depth to expand the directory tree.",
    )
    parser.add_argument(
        "--open-mode",
        choices=OPEN_MODES,
        default=None,
        help="suspend: edit in place and keep browsing; exit: leave, then open the file.",
    )
    parser.add_argument(
        "--print",
        action="store_true",
        dest="print_path",
        help="Print the chosen file instead of opening it (implies --open-mode exit).",
    )
    return parser


def _run_interactive_command(args: argparse.Namespace) -> None:
    user_config = load_config()
    open_mode = OPEN_MODE_EXIT if args.print_path else (args.open_mode or user_config.open_mode)
    options = InteractiveOptions(
        path=args.path,
        show_hidden=args.show_hidden,
        respect_ignore_rules=args.respect_ignore_rules,
        icons=user_config.icons if args.icons is None else args.icons,
        size=args.size,
        permissions=args.permissions,
        git_status=args.git_status,
        expand_level=args.expand_level if args.expand_level is not None else user_config.expand_level,
        open_mode=open_mode,
        theme=args.theme or user_config.theme,
        no_color=bool(os.environ.get("NO_COLOR")),
        editor=user_config.editor,
    )
    chosen = run_interactive(options)
    if chosen is None:
        return
    if args.print_path:
        sys.stdout.write(f"{chosen}\n")
        return

    command = resolve_editor_command(user_config.editor)
    try:
        status = run_editor(chosen, command)
    except OSError as exc:
        raise LstrError(f"Failed to launch editor '{command[0]}': {exc}") from exc
    if status != 0:
        logger.warning("editor %s exited with status %d", command[0], status)


def _run_view_command(args: argparse.Namespace) -> None:
    user_config = load_config()
    run_view(
        ViewOptions(
            path=args.path,
            color=args.color,
            level=args.level,
            dirs_only=args.dirs_only,
            size=args.size,
            permissions=args.permissions,
            git_status=args.git_status,
            show_hidden=args.show_hidden,
            respect_ignore_rules=args.respect_ignore_rules,
            icons=user_config.icons if args.icons is None else args.icons,
            theme=args.theme or user_config.theme,
        )
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the classic view or the explorer."""
    raw_args = list(sys.argv[1:] if argv is None else argv)
    interactive = bool(raw_args) and raw_args[0] in INTERACTIVE_COMMANDS
    if interactive:
        args = build_interactive_parser().parse_args(raw_args[1:])
    else:
        args = build_view_parser().parse_args(raw_args)

    try:
        configure_logging(args.verbose, args.log_file, allow_stderr=not interactive)
        if interactive:
            _run_interactive_command(args)
        else:
            _run_view_command(args)
    except LstrError as exc:
        raise SystemExit(f"lstr: Error: {exc}") from exc


if __name__ == "__main__":
    main()
