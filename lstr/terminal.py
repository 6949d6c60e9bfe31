"""Terminal control helpers for the explorer session.

Owns raw-mode lifecycle and alternate-screen switching, including the
temporary release around a suspended external editor.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

from .errors import LstrError

ENTER_SESSION_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_SESSION_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage raw/alternate-screen transitions for one tty."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise LstrError(f"Cannot control terminal: {exc}") from exc
        self.active = False

    def enter_session(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_SESSION_SEQUENCE)
        self.active = True

    def leave_session(self) -> None:
        """Show the cursor, restore the main screen and the saved tty state."""
        self.active = False
        try:
            os.write(self.stdout_fd, LEAVE_SESSION_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the terminal."""
        term = shutil.get_terminal_size((80, 24))
        return max(1, term.columns), max(1, term.lines)

    def write(self, data: str) -> None:
        os.write(self.stdout_fd, data.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def session(self):
        """Bracket the interactive loop with enter/leave calls."""
        try:
            self.enter_session()
        except (OSError, termios.error) as exc:
            with contextlib.suppress(termios.error):
                termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            raise LstrError(f"Cannot enter interactive mode: {exc}") from exc
        try:
            yield self
        finally:
            self.leave_session()

    @contextlib.contextmanager
    def suspended(self):
        """Leave the session for the duration of the block, then re-enter."""
        self.leave_session()
        try:
            yield
        finally:
            self.enter_session()
