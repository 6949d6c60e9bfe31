"""Nerd Font glyph lookup for tree rows.

Lookup order: directory, exact file name, extension, default glyph.
Colors are raw ANSI SGR sequences; renderers drop them when color is off.
"""

from __future__ import annotations

from pathlib import Path

BLUE = "\033[34m"
CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
MAGENTA = "\033[35m"
WHITE = "\033[37m"
BRIGHT_BLACK = "\033[90m"

DIRECTORY_ICON = ("", BLUE)
DEFAULT_FILE_ICON = ("", WHITE)

_NAME_ICONS: dict[str, tuple[str, str]] = {
    ".gitignore": ("", RED),
    ".gitattributes": ("", RED),
    "Cargo.toml": ("", RED),
    "Cargo.lock": ("", RED),
    "Dockerfile": ("", BLUE),
    "LICENSE": ("", YELLOW),
    "Makefile": ("", BRIGHT_BLACK),
    "README.md": ("", YELLOW),
    "pyproject.toml": ("", YELLOW),
    "package.json": ("", GREEN),
}

_EXTENSION_ICONS: dict[str, tuple[str, str]] = {
    "c": ("", BLUE),
    "cpp": ("", BLUE),
    "css": ("", BLUE),
    "go": ("", CYAN),
    "h": ("", MAGENTA),
    "html": ("", RED),
    "java": ("", RED),
    "jpg": ("", MAGENTA),
    "js": ("", YELLOW),
    "json": ("", YELLOW),
    "lock": ("", BRIGHT_BLACK),
    "md": ("", WHITE),
    "nix": ("", BLUE),
    "png": ("", MAGENTA),
    "py": ("", YELLOW),
    "rb": ("", RED),
    "rs": ("", RED),
    "sh": ("", GREEN),
    "svg": ("", YELLOW),
    "toml": ("", BRIGHT_BLACK),
    "ts": ("", BLUE),
    "txt": ("", WHITE),
    "yaml": ("", MAGENTA),
    "yml": ("", MAGENTA),
    "zip": ("", YELLOW),
}


def get_icon_for_path(path: Path, is_dir: bool) -> tuple[str, str]:
    """Return ``(glyph, ansi_color)`` for ``path``."""
    if is_dir:
        return DIRECTORY_ICON
    by_name = _NAME_ICONS.get(path.name)
    if by_name is not None:
        return by_name
    suffix = path.suffix[1:].lower()
    if suffix:
        by_extension = _EXTENSION_ICONS.get(suffix)
        if by_extension is not None:
            return by_extension
    return DEFAULT_FILE_ICON
