"""User-facing error type for lstr."""

from __future__ import annotations


class LstrError(Exception):
    """Fatal startup error shown to the user.

    Raised for a missing or non-directory root and for terminal setup
    failures. ``lstr.cli.main`` prints the message to stderr and exits
    with status 1; nothing else catches it.
    """
