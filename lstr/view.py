"""Classic, non-interactive tree printout."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .formatting import format_size
from .git_status import load_status
from .tree_model import ScanOptions, make_entry
from .tree_model.rendering import git_status_cell, icon_cell, indent_for, name_cell, permissions_cell
from .ui_theme import color_enabled, resolve_theme
from .walker import resolve_root, scan

logger = logging.getLogger(__name__)

BRANCH = "└── "


@dataclass(frozen=True)
class ViewOptions:
    path: Path = Path(".")
    color: str = "auto"
    level: int | None = None
    dirs_only: bool = False
    size: bool = False
    permissions: bool = False
    git_status: bool = False
    show_hidden: bool = False
    respect_ignore_rules: bool = False
    icons: bool = False
    theme: str | None = None


def run_view(options: ViewOptions, out: TextIO | None = None, err: TextIO | None = None) -> tuple[int, int]:
    """Print the tree for ``options.path`` and return ``(dirs, files)``.

    Raises ``LstrError`` when the path is not a directory. A closed output
    stream stops printing quietly.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    root = resolve_root(options.path)
    theme = resolve_theme(options.theme, no_color=not color_enabled(options.color, out))
    scan_options = ScanOptions(with_size=options.size, with_permissions=options.permissions)
    git_status = load_status(root) if options.git_status else None

    dir_count = 0
    file_count = 0
    try:
        out.write(theme.paint(str(root), theme.header) + "\n")
        records = scan(
            root,
            show_hidden=options.show_hidden,
            respect_ignore_rules=options.respect_ignore_rules,
            max_depth=options.level,
        )
        for record in records:
            if record.error is not None:
                err.write(f"lstr: ERROR: {record.path}: {record.error}\n")
                continue
            if record.path == root:
                continue
            if options.dirs_only and not record.is_dir:
                continue

            entry = make_entry(record, scan_options, git_status)
            parts: list[str] = []
            if options.git_status:
                parts.append(git_status_cell(entry.git_status, theme))
            if options.permissions:
                parts.append(permissions_cell(entry.permissions, theme))
            parts.append(indent_for(entry))
            parts.append(BRANCH)
            if options.icons:
                parts.append(icon_cell(entry, theme))
            parts.append(name_cell(entry, theme))
            if entry.is_dir:
                dir_count += 1
            else:
                file_count += 1
                if entry.size is not None:
                    parts.append(theme.paint(f" ({format_size(entry.size)})", theme.tree_size))
            out.write("".join(parts) + "\n")

        out.write(f"\n{dir_count} directories, {file_count} files\n")
        out.flush()
    except BrokenPipeError:
        logger.debug("output closed after %d directories, %d files", dir_count, file_count)
    return dir_count, file_count
