"""Frame composition tests for the explorer renderer."""

from __future__ import annotations

import unittest
from pathlib import Path

from lstr.ansi import display_width, strip_ansi
from lstr.git_status import FileStatus
from lstr.render import (
    CLEAR_SCREEN,
    EMPTY_PLACEHOLDER,
    HOME_AND_CLEAR,
    RenderContext,
    build_frame,
    clamp_scroll_offset,
    list_rows,
)
from lstr.tree_model import Entry, RowOptions, TreeModel, format_entry_row
from lstr.ui_theme import DEFAULT_THEME, PLAIN_THEME
from tree_factories import scenario_entries


def _context(visible, selected, **overrides) -> RenderContext:
    values = dict(
        root=Path("/work/proj"),
        visible=visible,
        selected=selected,
        scroll_offset=0,
        width=40,
        height=6,
        row_options=RowOptions(),
        theme=PLAIN_THEME,
    )
    values.update(overrides)
    return RenderContext(**values)


class BuildFrameTests(unittest.TestCase):
    def test_plain_frame_layout(self) -> None:
        model = TreeModel(scenario_entries())

        frame = build_frame(_context(model.visible, 0))

        self.assertTrue(frame.startswith(HOME_AND_CLEAR))
        lines = frame[len(HOME_AND_CLEAR) :].split("\r\n")
        self.assertEqual(lines[0], "/work/proj")
        self.assertEqual(lines[1], "> ▶ src")
        self.assertEqual(lines[2], "    README.md")
        # Header, four list rows, status row.
        self.assertEqual(len(lines), 6)

    def test_full_redraw_clears_screen_first(self) -> None:
        model = TreeModel(scenario_entries())

        frame = build_frame(_context(model.visible, 0, full_redraw=True))

        self.assertTrue(frame.startswith(CLEAR_SCREEN))

    def test_empty_tree_shows_placeholder(self) -> None:
        frame = build_frame(_context((), None))

        self.assertIn(EMPTY_PLACEHOLDER, frame)
        self.assertNotIn("> ", frame)

    def test_status_message_on_last_row(self) -> None:
        model = TreeModel(scenario_entries())

        frame = build_frame(_context(model.visible, 1, status_message="Editor exited with status 2"))

        self.assertTrue(frame.endswith("Editor exited with status 2"))
        self.assertIn("> " + "  README.md", frame)

    def test_rows_are_clipped_to_width(self) -> None:
        entries = [Entry(Path("a" * 80 + ".txt"), 1, False)]

        frame = build_frame(_context(entries, 0, width=20))

        for line in frame[len(HOME_AND_CLEAR) :].split("\r\n"):
            self.assertLessEqual(display_width(line), 20)

    def test_scrolled_window_keeps_selection_visible(self) -> None:
        entries = [Entry(Path(f"f{i:02d}"), 1, False) for i in range(10)]

        frame = build_frame(_context(entries, 7))

        self.assertIn("> " + "  f07", frame)
        self.assertNotIn("f00", frame)

    def test_colored_selection_spans_whole_row(self) -> None:
        model = TreeModel(scenario_entries())

        frame = build_frame(_context(model.visible, 0, theme=DEFAULT_THEME))
        selected_line = frame.split("\r\n")[1]

        self.assertTrue(selected_line.startswith(DEFAULT_THEME.selected_row))
        self.assertEqual(strip_ansi(selected_line), "> ▶ src")


class ScrollOffsetTests(unittest.TestCase):
    def test_list_rows_reserves_header_and_status(self) -> None:
        self.assertEqual(list_rows(24), 22)
        self.assertEqual(list_rows(1), 1)

    def test_offset_follows_selection(self) -> None:
        self.assertEqual(clamp_scroll_offset(5, 0, 3, 10), 3)
        self.assertEqual(clamp_scroll_offset(0, 5, 3, 10), 0)
        self.assertEqual(clamp_scroll_offset(4, 3, 3, 10), 3)

    def test_offset_never_runs_past_the_end(self) -> None:
        self.assertEqual(clamp_scroll_offset(None, 20, 3, 10), 7)
        self.assertEqual(clamp_scroll_offset(None, 4, 10, 2), 0)


class EntryRowTests(unittest.TestCase):
    def test_size_label_is_right_aligned(self) -> None:
        entry = Entry(Path("a.txt"), 1, False, size=1024)

        row = format_entry_row(entry, RowOptions(show_size=True), 20, PLAIN_THEME)

        self.assertEqual(display_width(row), 20)
        self.assertTrue(row.endswith("1.0 KiB"))

    def test_placeholders_for_missing_enrichment(self) -> None:
        entry = Entry(Path("docs"), 2, True, is_expanded=True)

        row = format_entry_row(entry, RowOptions(show_git_status=True, show_permissions=True), 40, PLAIN_THEME)

        self.assertEqual(row, "  ---------- " + "    " + "▼ docs")

    def test_git_status_and_permissions_columns(self) -> None:
        entry = Entry(Path("main.rs"), 1, False, permissions="-rw-r--r--", git_status=FileStatus.MODIFIED)

        row = format_entry_row(entry, RowOptions(show_git_status=True, show_permissions=True), 40, PLAIN_THEME)

        self.assertEqual(row, "M -rw-r--r--   main.rs")


if __name__ == "__main__":
    unittest.main()
