"""External editor resolution and launch.

The editor comes from config, then ``$VISUAL``, then ``$EDITOR``, falling
back to ``notepad`` on Windows and ``vim`` elsewhere. Failures are logged
and returned as messages; they never end the session.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class SuspendableTerminal(Protocol):
    def suspended(self): ...


def default_editor() -> str:
    return "notepad" if sys.platform.startswith("win") else "vim"


def resolve_editor_command(configured: str | None = None) -> list[str]:
    """Return the editor argv prefix, never empty."""
    for candidate in (configured, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if not candidate or not candidate.strip():
            continue
        try:
            cmd = shlex.split(candidate)
        except ValueError:
            logger.warning("ignoring unparsable editor setting %r", candidate)
            continue
        if cmd:
            return cmd
    return [default_editor()]


def run_editor(target: Path, command: list[str]) -> int:
    """Run ``command target`` to completion and return its exit status.

    Raises ``OSError`` when the editor binary cannot be started.
    """
    logger.info("opening %s with %s", target, command[0])
    proc = subprocess.run([*command, str(target)], check=False)
    return proc.returncode


def launch_editor(
    target: Path,
    terminal: SuspendableTerminal,
    command: list[str],
) -> str | None:
    """Edit ``target`` while ``terminal`` is suspended.

    Returns an error message for the status row, or ``None`` on success.
    """
    with terminal.suspended():
        try:
            status = run_editor(target, command)
        except OSError as exc:
            logger.warning("failed to launch editor %s: %s", command[0], exc)
            return f"Failed to launch editor: {exc}"
    if status != 0:
        logger.warning("editor %s exited with status %d", command[0], status)
        return f"Editor exited with status {status}"
    return None
