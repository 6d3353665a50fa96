"""Error kinds raised by the bookmark store.

Low-level failures (``OSError``, decode errors) are re-raised as one of
these with ``raise ... from exc`` so the CLI can print the cause chain.
"""

from __future__ import annotations


class MarkdError(Exception):
    """Base class for every failure markd reports to the user."""


class InvalidPath(MarkdError):
    """A supplied path is missing or is not a directory."""


class NotFound(MarkdError):
    """A bookmark name is not in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not in bookmarks")
        self.name = name


class PersistenceError(MarkdError):
    """The bookmarks file could not be opened, read, parsed or written."""


class ResolutionError(MarkdError):
    """The working directory or a bookmark name could not be determined."""
