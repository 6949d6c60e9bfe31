"""Selection cursor over a tree model's visible list."""

from __future__ import annotations

from .types import Entry
from .visibility import TreeModel


class SelectionCursor:
    """Index into ``model.visible`` that survives visibility rebuilds.

    The index is ``None`` only while the visible list is empty; otherwise it
    always satisfies ``0 <= index < len(model.visible)``.
    """

    def __init__(self, model: TreeModel) -> None:
        self.model = model
        self._index: int | None = 0 if model.visible else None

    @property
    def index(self) -> int | None:
        return self._index

    def selected(self) -> Entry | None:
        if self._index is None:
            return None
        return self.model.visible[self._index]

    def select(self, index: int) -> None:
        """Select ``index``, clamped into the visible range."""
        count = len(self.model.visible)
        if count == 0:
            self._index = None
            return
        self._index = max(0, min(index, count - 1))

    def next(self) -> None:
        count = len(self.model.visible)
        if count == 0:
            self._index = None
            return
        if self._index is None:
            self._index = 0
            return
        self._index = 0 if self._index >= count - 1 else self._index + 1

    def previous(self) -> None:
        count = len(self.model.visible)
        if count == 0:
            self._index = None
            return
        if self._index is None:
            self._index = 0
            return
        self._index = count - 1 if self._index == 0 else self._index - 1

    def reanchor(self, previous: Entry | None, previous_index: int | None) -> None:
        """Restore the selection after the visible list was rebuilt.

        The previously selected path keeps the selection wherever it moved.
        If it is gone, the old index is clamped to the new length; the
        nearest visible ancestor is deliberately not searched for.
        """
        count = len(self.model.visible)
        if count == 0:
            self._index = None
            return
        if previous is not None:
            found = self.model.index_of(previous.path)
            if found is not None:
                self._index = found
                return
        self._index = min(previous_index or 0, count - 1)

    def toggle_selected(self) -> bool:
        """Toggle the selected directory and re-anchor; returns whether it flipped."""
        previous = self.selected()
        if previous is None:
            return False
        previous_index = self._index
        changed = self.model.toggle(previous.path)
        self.reanchor(previous, previous_index)
        return changed
