"""Filesystem walker tests: ordering, filtering, depth and error records."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lstr import walker
from lstr.errors import LstrError
from lstr.walker import WalkRecord, resolve_root, scan


def _make_tree(root: Path) -> None:
    (root / "b_dir" / "nested").mkdir(parents=True)
    (root / "b_dir" / "nested" / "deep.txt").write_text("x", encoding="utf-8")
    (root / "b_dir" / "inner.txt").write_text("x", encoding="utf-8")
    (root / "A_dir").mkdir()
    (root / "a.txt").write_text("x", encoding="utf-8")
    (root / "Z.txt").write_text("x", encoding="utf-8")
    (root / ".hidden").write_text("x", encoding="utf-8")


def _relative(records: list[WalkRecord], root: Path) -> list[tuple[str, int, bool]]:
    return [(record.path.relative_to(root).as_posix(), record.depth, record.is_dir) for record in records]


class ScanOrderTests(unittest.TestCase):
    def test_yields_root_then_preorder_with_directories_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_tree(root)

            records = list(scan(root))

        self.assertEqual(records[0], WalkRecord(root, 0, True))
        self.assertEqual(
            _relative(records[1:], root),
            [
                ("A_dir", 1, True),
                ("b_dir", 1, True),
                ("b_dir/nested", 2, True),
                ("b_dir/nested/deep.txt", 3, False),
                ("b_dir/inner.txt", 2, False),
                ("a.txt", 1, False),
                ("Z.txt", 1, False),
            ],
        )

    def test_show_hidden_includes_dot_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_tree(root)

            hidden_names = {r.path.name for r in scan(root, show_hidden=True)}
            default_names = {r.path.name for r in scan(root)}

        self.assertIn(".hidden", hidden_names)
        self.assertNotIn(".hidden", default_names)

    def test_max_depth_stops_descent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_tree(root)

            records = list(scan(root, max_depth=1))

        self.assertEqual(max(r.depth for r in records), 1)
        self.assertIn("b_dir", {r.path.name for r in records})
        self.assertNotIn("inner.txt", {r.path.name for r in records})

    def test_zero_depth_yields_only_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_tree(root)

            records = list(scan(root, max_depth=0))

        self.assertEqual([r.path for r in records], [root])

    def test_symlinked_directory_is_not_followed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            (root / "real" / "f.txt").write_text("x", encoding="utf-8")
            try:
                os.symlink(root / "real", root / "link")
            except (OSError, NotImplementedError):
                self.skipTest("symlinks unavailable")

            records = list(scan(root))

        link = [r for r in records if r.path.name == "link"]
        self.assertEqual(len(link), 1)
        self.assertFalse(link[0].is_dir)
        self.assertEqual(sum(1 for r in records if r.path.name == "f.txt"), 1)


class ScanErrorTests(unittest.TestCase):
    def test_unreadable_subdirectory_produces_error_record_and_walk_continues(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "locked").mkdir()
            (root / "open").mkdir()
            (root / "open" / "f.txt").write_text("x", encoding="utf-8")
            real_list_children = walker._list_children

            def fake_list_children(directory, show_hidden, ignore_matcher):
                if directory.name == "locked":
                    raise PermissionError(13, "Permission denied", str(directory))
                return real_list_children(directory, show_hidden, ignore_matcher)

            with mock.patch("lstr.walker._list_children", side_effect=fake_list_children):
                records = list(scan(root))

        errors = [r for r in records if r.error is not None]
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].path, root / "locked")
        self.assertEqual(errors[0].depth, 2)
        self.assertIn("f.txt", {r.path.name for r in records})

    def test_failed_type_check_lists_child_as_file_and_logs(self) -> None:
        class _Child:
            def __init__(self, name: str, broken: bool) -> None:
                self.name = name
                self.path = f"/proj/{name}"
                self._broken = broken

            def is_dir(self, follow_symlinks: bool = True) -> bool:
                if self._broken:
                    raise PermissionError(13, "Permission denied", self.path)
                return True

        listing = mock.MagicMock()
        listing.__enter__.return_value = iter([_Child("gone", True), _Child("src", False)])

        with mock.patch("lstr.walker.os.scandir", return_value=listing), self.assertLogs(
            "lstr.walker", level="DEBUG"
        ) as logs:
            children = walker._list_children(Path("/proj"), False, None)

        self.assertEqual(children, [(Path("/proj/src"), True), (Path("/proj/gone"), False)])
        self.assertIn("cannot stat /proj/gone", logs.output[0])

    def test_unreadable_root_yields_single_error_record(self) -> None:
        root = Path("/nonexistent-root-for-lstr-tests")
        records = list(scan(root))

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].path, root)
        self.assertIsNotNone(records[0].error)


class ResolveRootTests(unittest.TestCase):
    def test_missing_path_is_rejected(self) -> None:
        with self.assertRaises(LstrError) as ctx:
            resolve_root(Path("nonexistent/path/for/testing"))

        self.assertIn("is not a directory", str(ctx.exception))

    def test_file_path_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")

            with self.assertRaises(LstrError):
                resolve_root(target)

    def test_directory_is_canonicalized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()

            resolved = resolve_root(root / "sub" / "..")

        self.assertEqual(resolved, root.resolve())


if __name__ == "__main__":
    unittest.main()
