"""Tree model: master entry list plus derived visible list.

Visibility is recomputed in one pre-order pass with a stack of ancestor
expand flags; no parent pointers are kept.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from .types import Entry


def compute_visible_entries(entries: Iterable[Entry]) -> tuple[Entry, ...]:
    """Return entries whose every ancestor directory is expanded.

    ``entries`` must be in pre-order with root children at depth 1.
    """
    visible: list[Entry] = []
    ancestor_expanded: list[bool] = []
    for entry in entries:
        while len(ancestor_expanded) >= entry.depth:
            ancestor_expanded.pop()
        if all(ancestor_expanded):
            visible.append(entry)
        if entry.is_dir:
            ancestor_expanded.append(entry.is_expanded)
    return tuple(visible)


class TreeModel:
    """Own the master list and expose the current visible subsequence."""

    def __init__(self, entries: Sequence[Entry]) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._by_path: dict[Path, Entry] = {entry.path: entry for entry in self._entries}
        self._visible: tuple[Entry, ...] = ()
        self.recompute_visible()

    @property
    def entries(self) -> tuple[Entry, ...]:
        """The master list, fixed after construction."""
        return self._entries

    @property
    def visible(self) -> tuple[Entry, ...]:
        return self._visible

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, path: Path) -> Entry | None:
        return self._by_path.get(path)

    def recompute_visible(self) -> None:
        self._visible = compute_visible_entries(self._entries)

    def toggle(self, path: Path) -> bool:
        """Flip the expand flag of directory ``path`` and rebuild visibility.

        Files and unknown paths leave every flag untouched. Returns whether a
        flag changed.
        """
        entry = self._by_path.get(path)
        changed = False
        if entry is not None and entry.is_dir:
            entry.is_expanded = not entry.is_expanded
            changed = True
        self.recompute_visible()
        return changed

    def index_of(self, path: Path) -> int | None:
        """Return the visible-list index of ``path``, if it is visible."""
        for index, entry in enumerate(self._visible):
            if entry.path == path:
                return index
        return None
