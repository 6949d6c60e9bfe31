"""Formatting helpers for tree rows.

Shared by the interactive renderer and the classic printout so both show
git status, permissions, icons and names the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width
from ..formatting import PERMISSIONS_PLACEHOLDER, format_size
from ..git_status import FileStatus
from ..icons import get_icon_for_path
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import Entry

INDENT_UNIT = "    "
EXPANDED_MARKER = "▼ "
COLLAPSED_MARKER = "▶ "
FILE_MARKER = "  "


@dataclass(frozen=True)
class RowOptions:
    """Which optional columns a tree row shows."""

    show_git_status: bool = False
    show_permissions: bool = False
    show_icons: bool = False
    show_size: bool = False


def git_status_style(status: FileStatus, theme: UITheme) -> str:
    """Return the theme style for one status class."""
    if status in (FileStatus.NEW, FileStatus.RENAMED):
        return theme.git_new
    if status in (FileStatus.MODIFIED, FileStatus.TYPECHANGE):
        return theme.git_modified
    if status is FileStatus.DELETED:
        return theme.git_deleted
    if status is FileStatus.CONFLICTED:
        return theme.git_conflicted
    return theme.git_untracked


def git_status_cell(status: FileStatus | None, theme: UITheme) -> str:
    if status is None:
        return "  "
    return theme.paint(status.char, git_status_style(status, theme)) + " "


def permissions_cell(permissions: str | None, theme: UITheme) -> str:
    return theme.paint(permissions or PERMISSIONS_PLACEHOLDER, theme.permissions) + " "


def icon_cell(entry: Entry, theme: UITheme) -> str:
    glyph, color = get_icon_for_path(entry.path, entry.is_dir)
    return theme.paint(glyph, color) + " "


def name_cell(entry: Entry, theme: UITheme) -> str:
    if entry.is_dir:
        return theme.paint(entry.name, theme.tree_dir)
    return theme.paint(entry.name, theme.tree_file)


def indent_for(entry: Entry) -> str:
    return INDENT_UNIT * max(0, entry.depth - 1)


def branch_marker(entry: Entry) -> str:
    if not entry.is_dir:
        return FILE_MARKER
    return EXPANDED_MARKER if entry.is_expanded else COLLAPSED_MARKER


def format_entry_row(
    entry: Entry,
    options: RowOptions,
    width: int,
    theme: UITheme | None = None,
) -> str:
    """Render one explorer row, padding the size label to ``width`` columns."""
    active_theme = theme or DEFAULT_THEME
    parts: list[str] = []
    if options.show_git_status:
        parts.append(git_status_cell(entry.git_status, active_theme))
    if options.show_permissions:
        parts.append(permissions_cell(entry.permissions, active_theme))
    parts.append(indent_for(entry))
    parts.append(active_theme.paint(branch_marker(entry), active_theme.tree_marker))
    if options.show_icons:
        parts.append(icon_cell(entry, active_theme))
    parts.append(name_cell(entry, active_theme))

    if options.show_size and entry.size is not None:
        size_label = format_size(entry.size)
        used = sum(display_width(part) for part in parts)
        padding = max(1, width - used - len(size_label))
        parts.append(" " * padding)
        parts.append(active_theme.paint(size_label, active_theme.tree_size))
    return "".join(parts)
