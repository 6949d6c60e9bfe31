"""Ignore-rule matching backed by git itself.

Asks git for the ignored files and directories under the scan root once,
so the walker honours ``.gitignore``, ``.git/info/exclude`` and the global
excludes file exactly as git does.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 5.0


def _is_within(path: Path, root: Path) -> bool:
    """Return whether ``path`` is at or under ``root``."""
    try:
        path.relative_to(root)
        return True
    except ValueError:
        return False


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Resolved ignore snapshot for a project subtree.

    ``ignored_dirs`` holds resolved directory paths so a single ancestor hit
    rejects a whole subtree.
    """

    root: Path
    ignored_files: frozenset[Path]
    ignored_dirs: frozenset[Path]

    def is_ignored(self, path: Path) -> bool:
        """Return whether ``path`` is ignored under this matcher root."""
        resolved = path.resolve()
        if not _is_within(resolved, self.root):
            return False
        if resolved in self.ignored_files:
            return True
        current = resolved
        while True:
            if current in self.ignored_dirs:
                return True
            if current == self.root:
                break
            parent = current.parent
            if parent == current:
                break
            current = parent
        return False


def _git(args: list[str], cwd: Path) -> subprocess.CompletedProcess[bytes] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed in %s: %s", args[0], cwd, exc)
        return None


def load_gitignore_matcher(root: Path) -> GitIgnoreMatcher | None:
    """Build a matcher for ``root`` by querying git.

    Returns ``None`` when git is unavailable or ``root`` is not inside a
    work tree; the walker then skips nothing. Only ignored paths within
    ``root`` are tracked, even when the repository root is higher up.
    """
    if shutil.which("git") is None:
        logger.debug("git not found; ignore rules disabled")
        return None

    root = root.resolve()
    top_proc = _git(["rev-parse", "--show-toplevel"], root)
    if top_proc is None:
        return None
    top_level = top_proc.stdout.decode("utf-8", errors="replace").strip()
    if not top_level:
        return None

    repo_root = Path(top_level).resolve()
    if not _is_within(root, repo_root):
        return None

    proc = _git(
        ["ls-files", "-z", "--others", "-i", "--exclude-standard", "--directory"],
        repo_root,
    )
    if proc is None:
        return None

    ignored_files: set[Path] = set()
    ignored_dirs: set[Path] = set()
    for raw in proc.stdout.split(b"\x00"):
        if not raw:
            continue
        rel = raw.decode("utf-8", errors="replace")
        is_dir = rel.endswith("/")
        rel = rel.rstrip("/")
        if not rel:
            continue
        abs_path = (repo_root / rel).resolve()
        if not _is_within(abs_path, root):
            continue
        if is_dir or abs_path.is_dir():
            ignored_dirs.add(abs_path)
        else:
            ignored_files.add(abs_path)

    logger.debug(
        "loaded ignore rules for %s: %d files, %d directories",
        root,
        len(ignored_files),
        len(ignored_dirs),
    )
    return GitIgnoreMatcher(
        root=root,
        ignored_files=frozenset(ignored_files),
        ignored_dirs=frozenset(ignored_dirs),
    )
