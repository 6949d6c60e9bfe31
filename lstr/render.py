"""Frame rendering for the explorer.

``build_frame`` is a pure projection of the visible list, selection and
scroll offset into one ANSI string; ``TerminalController.write`` sends it
to the screen in a single call.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .ansi import clip_ansi_line
from .tree_model import Entry, RowOptions, format_entry_row
from .ui_theme import DEFAULT_THEME, UITheme

SELECTED_PREFIX = "> "
UNSELECTED_PREFIX = "  "
EMPTY_PLACEHOLDER = "(empty)"
CLEAR_SCREEN = "\033[2J"
HOME_AND_CLEAR = "\033[H\033[J"


@dataclass
class RenderContext:
    root: Path
    visible: Sequence[Entry]
    selected: int | None
    scroll_offset: int
    width: int
    height: int
    row_options: RowOptions
    theme: UITheme = DEFAULT_THEME
    status_message: str = ""
    full_redraw: bool = False


def list_rows(height: int) -> int:
    """Rows available for entries after the header and status rows."""
    return max(1, height - 2)


def clamp_scroll_offset(selected: int | None, offset: int, rows: int, total: int) -> int:
    """Return an offset that keeps ``selected`` inside a ``rows``-tall window."""
    if selected is not None:
        if selected < offset:
            offset = selected
        elif selected >= offset + rows:
            offset = selected - rows + 1
    return max(0, min(offset, max(0, total - rows)))


def _selected_row(text: str, theme: UITheme) -> str:
    if not theme.colored or not theme.selected_row:
        return text
    # Re-apply the highlight after every inner reset so it spans the row.
    return theme.selected_row + text.replace(theme.reset, theme.reset + theme.selected_row) + theme.reset


def build_frame(context: RenderContext) -> str:
    """Compose a full screen for ``context``."""
    theme = context.theme
    width = max(1, context.width)
    rows = list_rows(context.height)
    offset = clamp_scroll_offset(context.selected, context.scroll_offset, rows, len(context.visible))

    out: list[str] = []
    if context.full_redraw:
        out.append(CLEAR_SCREEN)
    out.append(HOME_AND_CLEAR)
    out.append(clip_ansi_line(theme.paint(str(context.root), theme.header), width))
    out.append("\r\n")

    row_width = max(1, width - len(SELECTED_PREFIX))
    window = context.visible[offset : offset + rows]
    for position, entry in enumerate(window, start=offset):
        row = format_entry_row(entry, context.row_options, row_width, theme)
        if position == context.selected:
            line = _selected_row(SELECTED_PREFIX + row, theme)
        else:
            line = UNSELECTED_PREFIX + row
        out.append(clip_ansi_line(line, width))
        out.append("\r\n")
    if not context.visible:
        out.append(clip_ansi_line(UNSELECTED_PREFIX + theme.paint(EMPTY_PLACEHOLDER, theme.tree_size), width))
        out.append("\r\n")

    drawn = max(1, len(window))
    out.append("\r\n" * max(0, rows - drawn))
    if context.status_message:
        message = theme.paint(context.status_message, theme.status_message)
        out.append(clip_ansi_line(message, width))
    return "".join(out)
