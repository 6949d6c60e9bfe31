"""Depth-first filesystem walker.

Yields one ``WalkRecord`` per discovered path in pre-order: the root first
(depth 0), then every entry immediately followed by its descendants.
Unreadable directories produce an extra record carrying the error.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import LstrError
from .gitignore import GitIgnoreMatcher, load_gitignore_matcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkRecord:
    """One walker result; ``error`` is set for failed directory reads."""

    path: Path
    depth: int
    is_dir: bool
    error: OSError | None = None


def resolve_root(path: Path) -> Path:
    """Validate and canonicalize a scan root.

    Raises ``LstrError`` when ``path`` is missing or not a directory.
    """
    if not path.is_dir():
        raise LstrError(f"'{path}' is not a directory.")
    try:
        return path.resolve(strict=True)
    except OSError as exc:
        raise LstrError(f"Invalid path '{path}': {exc}") from exc


def _list_children(
    directory: Path,
    show_hidden: bool,
    ignore_matcher: GitIgnoreMatcher | None,
) -> list[tuple[Path, bool]]:
    """Return sorted ``(path, is_dir)`` children; directories come first."""
    children: list[tuple[str, Path, bool]] = []
    with os.scandir(directory) as entries:
        for child in entries:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue
            child_path = Path(child.path)
            if ignore_matcher is not None and ignore_matcher.is_ignored(child_path):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as exc:
                logger.debug("cannot stat %s, listing it as a file: %s", child_path, exc)
                is_dir = False
            children.append((name, child_path, is_dir))
    children.sort(key=lambda item: (not item[2], item[0].casefold(), item[0]))
    return [(child_path, is_dir) for _name, child_path, is_dir in children]


def scan(
    root: Path,
    show_hidden: bool = False,
    respect_ignore_rules: bool = False,
    max_depth: int | None = None,
) -> Iterator[WalkRecord]:
    """Walk ``root`` depth-first and yield records in pre-order.

    When ``max_depth`` is set, entries deeper than it are not visited. If the
    root itself cannot be read, the root record carries the error and the
    walk ends there.
    """
    ignore_matcher = load_gitignore_matcher(root) if respect_ignore_rules else None

    try:
        top = _list_children(root, show_hidden, ignore_matcher)
    except OSError as exc:
        yield WalkRecord(root, 0, True, error=exc)
        return
    yield WalkRecord(root, 0, True)
    if max_depth is not None and max_depth < 1:
        return

    stack: list[Iterator[tuple[Path, bool]]] = [iter(top)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        child_path, is_dir = child
        depth = len(stack)
        yield WalkRecord(child_path, depth, is_dir)
        if not is_dir or (max_depth is not None and depth >= max_depth):
            continue
        try:
            grandchildren = _list_children(child_path, show_hidden, ignore_matcher)
        except OSError as exc:
            logger.debug("cannot read %s: %s", child_path, exc)
            yield WalkRecord(child_path, depth + 1, True, error=exc)
            continue
        stack.append(iter(grandchildren))
