"""Human-readable byte sizes and permission strings."""

from __future__ import annotations

import stat

KIB = 1024.0
MIB = KIB * 1024.0
GIB = MIB * 1024.0
TIB = GIB * 1024.0

PERMISSIONS_PLACEHOLDER = "----------"


def format_size(size_bytes: int) -> str:
    """Format ``size_bytes`` with binary prefixes (``KiB``, ``MiB``, ...)."""
    value = float(size_bytes)
    if value < KIB:
        return f"{int(size_bytes)} B"
    if value < MIB:
        return f"{value / KIB:.1f} KiB"
    if value < GIB:
        return f"{value / MIB:.1f} MiB"
    if value < TIB:
        return f"{value / GIB:.1f} GiB"
    return f"{value / TIB:.1f} TiB"


def format_permissions(mode: int) -> str:
    """Render the nine ``rwx`` permission bits of ``mode``."""
    out: list[str] = []
    for read_bit, write_bit, exec_bit in (
        (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
        (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
        (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
    ):
        out.append("r" if mode & read_bit else "-")
        out.append("w" if mode & write_bit else "-")
        out.append("x" if mode & exec_bit else "-")
    return "".join(out)


def format_mode_string(mode: int) -> str:
    """Return the ten-character ``ls -l`` style mode, e.g. ``drwxr-xr-x``."""
    type_char = "d" if stat.S_ISDIR(mode) else "-"
    return type_char + format_permissions(mode)
