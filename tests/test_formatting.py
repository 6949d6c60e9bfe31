"""Size, permission and icon formatting tests."""

from __future__ import annotations

import stat
import unittest
from pathlib import Path

from lstr.formatting import format_mode_string, format_permissions, format_size
from lstr.icons import DEFAULT_FILE_ICON, DIRECTORY_ICON, get_icon_for_path


class FormatSizeTests(unittest.TestCase):
    def test_binary_prefixes(self) -> None:
        self.assertEqual(format_size(500), "500 B")
        self.assertEqual(format_size(1024), "1.0 KiB")
        self.assertEqual(format_size(1536), "1.5 KiB")
        mib = 1024 * 1024
        self.assertEqual(format_size(mib), "1.0 MiB")
        self.assertEqual(format_size(mib + mib // 2), "1.5 MiB")
        gib = mib * 1024
        self.assertEqual(format_size(gib), "1.0 GiB")
        self.assertEqual(format_size(gib * 1024), "1.0 TiB")

    def test_zero_bytes(self) -> None:
        self.assertEqual(format_size(0), "0 B")


class FormatPermissionsTests(unittest.TestCase):
    def test_rwx_triplets(self) -> None:
        self.assertEqual(format_permissions(0o755), "rwxr-xr-x")
        self.assertEqual(format_permissions(0o640), "rw-r-----")
        self.assertEqual(format_permissions(0), "---------")

    def test_mode_string_includes_type_char(self) -> None:
        self.assertEqual(format_mode_string(stat.S_IFDIR | 0o755), "drwxr-xr-x")
        self.assertEqual(format_mode_string(stat.S_IFREG | 0o644), "-rw-r--r--")


class IconLookupTests(unittest.TestCase):
    def test_directory_icon_wins(self) -> None:
        self.assertEqual(get_icon_for_path(Path("src.py"), is_dir=True), DIRECTORY_ICON)

    def test_exact_name_before_extension(self) -> None:
        by_name = get_icon_for_path(Path("README.md"), is_dir=False)
        by_extension = get_icon_for_path(Path("notes.md"), is_dir=False)

        self.assertNotEqual(by_name, by_extension)

    def test_extension_is_case_insensitive(self) -> None:
        self.assertEqual(
            get_icon_for_path(Path("main.PY"), is_dir=False),
            get_icon_for_path(Path("main.py"), is_dir=False),
        )

    def test_unknown_files_get_default_icon(self) -> None:
        self.assertEqual(get_icon_for_path(Path("data.unknownext"), is_dir=False), DEFAULT_FILE_ICON)
        self.assertEqual(get_icon_for_path(Path("noext"), is_dir=False), DEFAULT_FILE_ICON)


if __name__ == "__main__":
    unittest.main()
