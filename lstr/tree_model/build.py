"""Scan collector: turns walker records into the master entry list."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from ..errors import LstrError
from ..formatting import format_mode_string
from ..git_status import FileStatus, GitStatus, load_status
from ..walker import WalkRecord, scan
from .types import Entry

logger = logging.getLogger(__name__)

Walker = Callable[[Path, bool, bool], Iterable[WalkRecord]]


@dataclass(frozen=True)
class ScanOptions:
    """What to walk and which enrichment fields to fill in."""

    show_hidden: bool = False
    respect_ignore_rules: bool = False
    initial_expand_depth: int | None = None
    with_size: bool = False
    with_permissions: bool = False
    with_git_status: bool = False


def safe_lstat(path: Path) -> os.stat_result | None:
    """Return ``lstat`` for ``path`` or ``None`` on failure."""
    try:
        return path.lstat()
    except OSError:
        return None


def make_entry(
    record: WalkRecord,
    options: ScanOptions,
    git_status: GitStatus | None = None,
) -> Entry:
    """Build an ``Entry`` for one walker record, running enrichment lookups once."""
    metadata = safe_lstat(record.path) if (options.with_size or options.with_permissions) else None
    size: int | None = None
    if options.with_size and not record.is_dir and metadata is not None:
        size = int(metadata.st_size)
    permissions: str | None = None
    if options.with_permissions and metadata is not None:
        permissions = format_mode_string(metadata.st_mode)
    status: FileStatus | None = None
    if git_status is not None:
        status = git_status.lookup(record.path)

    expanded = (
        record.is_dir
        and options.initial_expand_depth is not None
        and record.depth < options.initial_expand_depth
    )
    return Entry(
        path=record.path,
        depth=record.depth,
        is_dir=record.is_dir,
        is_expanded=expanded,
        size=size,
        permissions=permissions,
        git_status=status,
    )


def _default_walker(root: Path, show_hidden: bool, respect_ignore_rules: bool) -> Iterable[WalkRecord]:
    return scan(root, show_hidden=show_hidden, respect_ignore_rules=respect_ignore_rules)


def collect_entries(
    root: Path,
    options: ScanOptions | None = None,
    *,
    walker: Walker | None = None,
    git_status: GitStatus | None = None,
) -> list[Entry]:
    """Consume the walker fully and return entries in pre-order.

    The root record is dropped (it is shown as a header). Records carrying
    an error are skipped, except an error on the root itself, which raises
    ``LstrError``. When ``initial_expand_depth`` is set, directories shallower
    than it start expanded. ``git_status`` defaults to loading the status of
    ``root`` when that feature is requested.
    """
    opts = options or ScanOptions()
    walk = walker or _default_walker
    if opts.with_git_status and git_status is None:
        git_status = load_status(root)

    entries: list[Entry] = []
    dropped = 0
    for record in walk(root, opts.show_hidden, opts.respect_ignore_rules):
        if record.path == root:
            if record.error is not None:
                raise LstrError(f"Cannot read '{root}': {record.error}")
            continue
        if record.error is not None:
            dropped += 1
            logger.debug("skipping %s: %s", record.path, record.error)
            continue

        entries.append(make_entry(record, opts, git_status))

    logger.info("scanned %s: %d entries, %d unreadable", root, len(entries), dropped)
    return entries
