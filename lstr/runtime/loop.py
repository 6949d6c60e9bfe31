"""Interaction loop for the explorer.

A synchronous state machine: draw, block on one key, dispatch, repeat.
Browsing returns to itself, Suspended runs the editor and resumes
Browsing, Exited leaves the terminal session and returns the result.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..config import OPEN_MODE_EXIT, OPEN_MODE_SUSPEND
from ..render import RenderContext, build_frame, clamp_scroll_offset, list_rows
from ..tree_model import RowOptions, SelectionCursor, TreeModel
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ESC", "CTRL_C"})
DOWN_KEYS = frozenset({"DOWN", "j"})
UP_KEYS = frozenset({"UP", "k"})
ACTIVATE_KEYS = frozenset({"ENTER"})


class LoopState(enum.Enum):
    BROWSING = "browsing"
    SUSPENDED = "suspended"
    EXITED = "exited"


@dataclass(frozen=True)
class Transition:
    """Next loop state plus the path it acts on (editor target or result)."""

    state: LoopState
    path: Path | None = None


@dataclass(frozen=True)
class ExitResult:
    """What the session ended with; ``open_path`` is ``None`` for a plain quit."""

    open_path: Path | None = None


@dataclass
class ExplorerState:
    """Mutable per-session state owned by the loop."""

    root: Path
    model: TreeModel
    cursor: SelectionCursor
    row_options: RowOptions
    theme: UITheme = DEFAULT_THEME
    open_mode: str = OPEN_MODE_SUSPEND
    scroll_offset: int = 0
    status_message: str = ""
    needs_full_redraw: bool = True

    @classmethod
    def for_model(cls, root: Path, model: TreeModel, **kwargs) -> ExplorerState:
        return cls(root=root, model=model, cursor=SelectionCursor(model), **kwargs)


class LoopTerminal(Protocol):
    def session(self) -> AbstractContextManager[object]: ...

    def size(self) -> tuple[int, int]: ...

    def write(self, data: str) -> None: ...


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop``.

    ``read_key`` blocks for one key token (``""`` means input closed).
    ``open_in_editor`` runs the editor on a path and returns an error
    message or ``None``.
    """

    read_key: Callable[[], str]
    open_in_editor: Callable[[Path], str | None]


def handle_key(key: str, state: ExplorerState) -> Transition:
    """Apply one key in the Browsing state and return the transition."""
    if key in QUIT_KEYS:
        return Transition(LoopState.EXITED)
    if key in DOWN_KEYS:
        state.cursor.next()
        return Transition(LoopState.BROWSING)
    if key in UP_KEYS:
        state.cursor.previous()
        return Transition(LoopState.BROWSING)
    if key in ACTIVATE_KEYS:
        entry = state.cursor.selected()
        if entry is None:
            return Transition(LoopState.BROWSING)
        if entry.is_dir:
            state.cursor.toggle_selected()
            return Transition(LoopState.BROWSING)
        if state.open_mode == OPEN_MODE_EXIT:
            return Transition(LoopState.EXITED, entry.path)
        return Transition(LoopState.SUSPENDED, entry.path)
    return Transition(LoopState.BROWSING)


def draw(state: ExplorerState, terminal: LoopTerminal) -> None:
    """Render the current state as one full frame."""
    columns, lines = terminal.size()
    state.scroll_offset = clamp_scroll_offset(
        state.cursor.index,
        state.scroll_offset,
        list_rows(lines),
        len(state.model.visible),
    )
    frame = build_frame(
        RenderContext(
            root=state.root,
            visible=state.model.visible,
            selected=state.cursor.index,
            scroll_offset=state.scroll_offset,
            width=columns,
            height=lines,
            row_options=state.row_options,
            theme=state.theme,
            status_message=state.status_message,
            full_redraw=state.needs_full_redraw,
        )
    )
    state.needs_full_redraw = False
    terminal.write(frame)


def run_main_loop(
    state: ExplorerState,
    terminal: LoopTerminal,
    callbacks: RuntimeLoopCallbacks,
) -> ExitResult:
    """Run the explorer until a quit or exit-with-path action.

    The terminal session is entered once before the first frame and left on
    every way out, including exceptions raised by drawing or reading.
    """
    with terminal.session():
        while True:
            draw(state, terminal)
            key = callbacks.read_key()
            if key == "":
                logger.info("input closed; leaving explorer")
                return ExitResult()
            state.status_message = ""

            transition = handle_key(key, state)
            if transition.state is LoopState.EXITED:
                return ExitResult(open_path=transition.path)
            if transition.state is LoopState.SUSPENDED and transition.path is not None:
                state.status_message = callbacks.open_in_editor(transition.path) or ""
                state.needs_full_redraw = True
