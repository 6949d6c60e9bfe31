"""UI theme definitions and color-mode selection.

Themes are ANSI palettes shared by the explorer and the classic view.
``PLAIN_THEME`` is used whenever color output is disabled.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO

COLOR_CHOICES = ("always", "auto", "never")


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    header: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_size: str
    permissions: str
    selected_row: str
    status_message: str
    git_new: str
    git_modified: str
    git_deleted: str
    git_conflicted: str
    git_untracked: str

    @property
    def colored(self) -> bool:
        return bool(self.reset)

    def paint(self, text: str, style: str) -> str:
        """Wrap ``text`` in ``style`` when this theme emits color."""
        if not style or not self.colored:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;34m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="",
    tree_size="\033[90m",
    permissions="\033[90m",
    selected_row="\033[1;48;5;238m",
    status_message="\033[38;5;214m",
    git_new="\033[32m",
    git_modified="\033[33m",
    git_deleted="\033[31m",
    git_conflicted="\033[91m",
    git_untracked="\033[35m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_size="\033[38;5;73m",
    permissions="\033[2;38;5;110m",
    selected_row="\033[1;48;5;24m",
    status_message="\033[38;5;215m",
    git_new="\033[38;5;84m",
    git_modified="\033[38;5;215m",
    git_deleted="\033[38;5;203m",
    git_conflicted="\033[1;38;5;203m",
    git_untracked="\033[38;5;177m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_size="",
    permissions="",
    selected_row="",
    status_message="",
    git_new="",
    git_modified="",
    git_deleted="",
    git_conflicted="",
    git_untracked="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def color_enabled(choice: str, stream: TextIO) -> bool:
    """Resolve a ``--color`` choice against ``stream`` and ``NO_COLOR``."""
    if choice == "always":
        return True
    if choice == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


__all__ = [
    "COLOR_CHOICES",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "color_enabled",
]
