"""Git status classification for tree rows.

Runs ``git status --porcelain=v1 -z`` once per scan and maps each record to
a ``FileStatus``. Paths outside a repository simply have no status.
"""

from __future__ import annotations

import enum
import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 5.0

_CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})


class FileStatus(enum.Enum):
    """Status class of one path, valued by its single-character badge."""

    NEW = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    TYPECHANGE = "T"
    CONFLICTED = "C"
    UNTRACKED = "?"

    @property
    def char(self) -> str:
        return self.value


_CODE_TO_STATUS = {
    "A": FileStatus.NEW,
    "C": FileStatus.NEW,
    "M": FileStatus.MODIFIED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
    "T": FileStatus.TYPECHANGE,
}


def classify_porcelain_code(code: str) -> FileStatus | None:
    """Map a two-letter porcelain ``XY`` code to a ``FileStatus``.

    The index column wins over the work-tree column. Ignored (``!!``) and
    unknown codes return ``None``.
    """
    if code == "??":
        return FileStatus.UNTRACKED
    if code in _CONFLICT_CODES:
        return FileStatus.CONFLICTED
    for letter in code:
        status = _CODE_TO_STATUS.get(letter)
        if status is not None:
            return status
    return None


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split ``-z`` porcelain output into ``(code, path)`` pairs."""
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        code = token[:2]
        records.append((code, token[3:]))

        # Renames and copies carry the source path as an extra token.
        if "R" in code or "C" in code:
            index += 1

    return records


@dataclass
class GitStatus:
    """Status snapshot for one repository, keyed by repo-relative path."""

    repo_root: Path
    cache: dict[Path, FileStatus] = field(default_factory=dict)

    def lookup(self, path: Path) -> FileStatus | None:
        """Return the status of ``path``, or ``None`` when clean or outside."""
        rel = self._relative(path)
        if rel is None:
            return None
        return self.cache.get(rel)

    def _relative(self, path: Path) -> Path | None:
        # Symlinks are keyed by their own name, so only the parent is resolved.
        try:
            return path.relative_to(self.repo_root)
        except ValueError:
            pass
        try:
            return (path.parent.resolve() / path.name).relative_to(self.repo_root)
        except (OSError, ValueError):
            return None


def _run_git(cwd: Path, args: list[str]) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed in %s: %s", args[0], cwd, exc)
        return None


def load_status(root: Path) -> GitStatus | None:
    """Collect statuses for the repository containing ``root``.

    Returns ``None`` when git is missing or ``root`` is not in a work tree.
    """
    top_proc = _run_git(root, ["rev-parse", "--show-toplevel"])
    if top_proc is None or top_proc.returncode != 0:
        return None
    top_level = top_proc.stdout.strip()
    if not top_level:
        return None
    repo_root = Path(top_level).resolve()

    status_proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
    )
    if status_proc is None or status_proc.returncode != 0:
        return None

    status = GitStatus(repo_root=repo_root)
    for code, rel_path in iter_porcelain_records(status_proc.stdout):
        file_status = classify_porcelain_code(code)
        if file_status is None or not rel_path:
            continue
        status.cache[Path(rel_path.rstrip("/"))] = file_status
    logger.debug("git status for %s: %d entries", repo_root, len(status.cache))
    return status
