"""Tree entry datatype shared by the collector, model and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..git_status import FileStatus


@dataclass(eq=False)
class Entry:
    """One filesystem node from the scan.

    ``is_expanded`` is the only field that changes after construction and is
    meaningful for directories only. Enrichment fields stay ``None`` when the
    feature was not requested or the lookup failed.
    """

    path: Path
    depth: int
    is_dir: bool
    is_expanded: bool = False
    size: int | None = None
    permissions: str | None = None
    git_status: FileStatus | None = None

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)
