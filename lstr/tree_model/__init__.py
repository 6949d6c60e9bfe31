"""Tree data model: scan collection, visibility and selection.

``collect_entries`` builds the pre-order master list, ``TreeModel`` derives
the visible list from expand flags, and ``SelectionCursor`` keeps the
user's selection valid across rebuilds.
"""

from __future__ import annotations

from .build import ScanOptions, collect_entries, make_entry
from .rendering import RowOptions, format_entry_row
from .selection import SelectionCursor
from .types import Entry
from .visibility import TreeModel, compute_visible_entries

__all__ = [
    "Entry",
    "ScanOptions",
    "collect_entries",
    "make_entry",
    "TreeModel",
    "compute_visible_entries",
    "SelectionCursor",
    "RowOptions",
    "format_entry_row",
]
