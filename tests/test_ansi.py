"""ANSI width and clipping tests."""

import unittest

from lstr import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escape_sequences_have_no_width(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[1;34msrc\033[0m"), 3)

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)

    def test_strip_ansi_removes_sgr(self) -> None:
        self.assertEqual(ansi_mod.strip_ansi("\033[31mred\033[0m"), "red")


class ClipAnsiLineTests(unittest.TestCase):
    def test_clips_plain_text(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abcdef", 3), "abc")

    def test_keeps_styles_and_trailing_reset(self) -> None:
        clipped = ansi_mod.clip_ansi_line("\033[31mabcdef\033[0m", 2)

        self.assertEqual(clipped, "\033[31mab\033[0m")

    def test_non_positive_width_is_empty(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")

    def test_wide_character_that_does_not_fit_is_dropped(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a日", 2), "a")


if __name__ == "__main__":
    unittest.main()
