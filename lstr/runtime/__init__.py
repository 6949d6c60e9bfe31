"""Public runtime entry points.

Groups the explorer bootstrap (``run_interactive``) and the lower-level
loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import InteractiveOptions
    from .loop import ExitResult, ExplorerState, RuntimeLoopCallbacks


def run_interactive(*args, **kwargs):
    """Lazily import the bootstrap so ``lstr.runtime`` stays light to import."""
    from .app import run_interactive as _run_interactive

    return _run_interactive(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "InteractiveOptions":
        from . import app as _app

        return _app.InteractiveOptions
    if name in {"ExitResult", "ExplorerState", "RuntimeLoopCallbacks"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_interactive",
    "run_main_loop",
    "InteractiveOptions",
    "ExitResult",
    "ExplorerState",
    "RuntimeLoopCallbacks",
]
