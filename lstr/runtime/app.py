"""Interactive explorer bootstrap.

Validates the root, scans it into a tree model, wires the real terminal,
key reader and editor into the loop, and returns the loop's result.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..config import OPEN_MODE_SUSPEND
from ..editor import launch_editor, resolve_editor_command
from ..input import read_key_event
from ..terminal import TerminalController
from ..tree_model import RowOptions, ScanOptions, TreeModel, collect_entries
from ..ui_theme import resolve_theme
from ..walker import resolve_root
from .loop import ExplorerState, ExitResult, RuntimeLoopCallbacks, run_main_loop

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteractiveOptions:
    path: Path = Path(".")
    show_hidden: bool = False
    respect_ignore_rules: bool = False
    icons: bool = False
    size: bool = False
    permissions: bool = False
    git_status: bool = False
    expand_level: int | None = None
    open_mode: str = OPEN_MODE_SUSPEND
    theme: str | None = None
    no_color: bool = False
    editor: str | None = None


def build_state(options: InteractiveOptions) -> ExplorerState:
    """Scan the root and build the initial explorer state.

    Raises ``LstrError`` for an invalid or unreadable root, before any
    terminal mode change.
    """
    root = resolve_root(options.path)
    entries = collect_entries(
        root,
        ScanOptions(
            show_hidden=options.show_hidden,
            respect_ignore_rules=options.respect_ignore_rules,
            initial_expand_depth=options.expand_level,
            with_size=options.size,
            with_permissions=options.permissions,
            with_git_status=options.git_status,
        ),
    )
    return ExplorerState.for_model(
        root,
        TreeModel(entries),
        row_options=RowOptions(
            show_git_status=options.git_status,
            show_permissions=options.permissions,
            show_icons=options.icons,
            show_size=options.size,
        ),
        theme=resolve_theme(options.theme, no_color=options.no_color),
        open_mode=options.open_mode,
    )


def run_interactive(options: InteractiveOptions) -> Path | None:
    """Run one explorer session; return the path chosen in exit mode."""
    state = build_state(options)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    editor_command = resolve_editor_command(options.editor)
    callbacks = RuntimeLoopCallbacks(
        read_key=partial(read_key_event, stdin_fd),
        open_in_editor=partial(launch_editor, terminal=terminal, command=editor_command),
    )
    result: ExitResult = run_main_loop(state, terminal, callbacks)
    logger.info("explorer exited with %s", result.open_path or "no action")
    return result.open_path
