"""The bookmark store: name -> directory mapping plus its operations.

All names are lowercased before they are stored or looked up. Every
successful mutation writes the whole mapping back to disk immediately.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Callable

from .errors import NotFound, ResolutionError
from .log import logger
from .persistence import BookmarkFile
from .prompt import confirm_update
from .resolver import current_dir, derive_name

# Reserved name for the single-slot "clip" bookmark; never prompts on overwrite.
QUICK_SLOT = "_clip"

SORT_KEYS = ("name", "path")

# (name, old_path, new_path) -> overwrite?
ConfirmFn = Callable[[str, str, str], bool]


class MarkOutcome(enum.Enum):
    """What :meth:`BookmarkStore.mark` did."""

    CREATED = "bookmarked"
    UPDATED = "bookmark entry updated"
    CANCELLED = "bookmark operation cancelled"


class BookmarkStore:
    """In-memory bookmarks backed by a :class:`BookmarkFile`."""

    def __init__(
        self,
        file: BookmarkFile,
        bookmarks: dict[str, str] | None = None,
        confirm: ConfirmFn | None = None,
    ) -> None:
        self.file = file
        self.bookmarks: dict[str, str] = {}
        for name, path in (bookmarks or {}).items():
            key = name.lower()
            if key in self.bookmarks:
                logger.debug(
                    "%s collides with an earlier name differing only in case, "
                    "dropping %s",
                    name,
                    self.bookmarks[key],
                )
            self.bookmarks[key] = path
        self.confirm = confirm or confirm_update

    @classmethod
    def load(cls, file: BookmarkFile, confirm: ConfirmFn | None = None) -> BookmarkStore:
        """Read the store from *file*, creating the file if needed."""
        return cls(file, file.load(), confirm=confirm)

    def save(self) -> None:
        self.file.save(self.bookmarks)

    def __len__(self) -> int:
        return len(self.bookmarks)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.bookmarks

    # -- mutation -------------------------------------------------------------

    def mark(
        self, path: str, alias: str | None = None, *, quick: bool = False
    ) -> tuple[str, MarkOutcome]:
        """Bookmark the resolved directory *path*.

        The name is *alias* if given, else the directory's basename; with
        *quick* it is always :data:`QUICK_SLOT`. An existing name is only
        overwritten after ``confirm`` agrees, except for the quick slot.
        """
        if quick:
            name = QUICK_SLOT
        elif alias is not None:
            name = alias.strip().lower()
            if not name:
                raise ResolutionError("bookmark alias cannot be empty")
        else:
            name = derive_name(path)

        old = self.bookmarks.get(name)
        if old is None:
            outcome = MarkOutcome.CREATED
        elif name == QUICK_SLOT or self.confirm(name, old, path):
            outcome = MarkOutcome.UPDATED
        else:
            logger.debug("update of %s declined", name)
            return name, MarkOutcome.CANCELLED

        self.bookmarks[name] = path
        self.save()
        logger.debug("%s %s -> %s", outcome.name.lower(), name, path)
        return name, outcome

    def remove(self, name: str) -> str:
        """Delete *name* and return the path it pointed to."""
        key = name.lower()
        if key not in self.bookmarks:
            raise NotFound(name)
        path = self.bookmarks.pop(key)
        self.save()
        return path

    def purge(self) -> list[tuple[str, str]]:
        """Drop every bookmark whose target is no longer a directory.

        Returns the removed ``(name, path)`` pairs in store order. When
        nothing is stale the file is not rewritten.
        """
        removed = self.stale()
        if not removed:
            return []
        for name, _ in removed:
            del self.bookmarks[name]
        self.save()
        logger.debug("purged %d stale bookmark(s)", len(removed))
        return removed

    # -- queries --------------------------------------------------------------

    def stale(self) -> list[tuple[str, str]]:
        """Bookmarks whose path is missing or not a directory."""
        return [
            (name, path)
            for name, path in self.bookmarks.items()
            if not Path(path).is_dir()
        ]

    def get(self, name: str | None = None, *, failsafe: bool = False) -> str:
        """Return the path for *name* (default: the quick slot).

        With *failsafe*, a missing name yields the current working
        directory instead of raising :class:`NotFound`.
        """
        if name is None:
            name = QUICK_SLOT
        key = name.lower()
        try:
            return self.bookmarks[key]
        except KeyError:
            if not failsafe:
                raise NotFound(name) from None
            logger.warning("%s is not in bookmarks, using current directory", key)
            return current_dir()

    def list_bookmarks(
        self,
        contains: str | None = None,
        start: str | None = None,
        end: str | None = None,
        sort_by: str = "name",
    ) -> list[tuple[str, str]]:
        """Return ``(name, path)`` pairs matching every given name filter."""
        if sort_by not in SORT_KEYS:
            raise ValueError(f"sort_by must be one of {SORT_KEYS}, got {sort_by!r}")

        filters: list[Callable[[str], bool]] = []
        if contains:
            filters.append(lambda n, s=contains.lower(): s in n)
        if start:
            filters.append(lambda n, s=start.lower(): n.startswith(s))
        if end:
            filters.append(lambda n, s=end.lower(): n.endswith(s))

        entries = [
            (name, path)
            for name, path in self.bookmarks.items()
            if all(f(name) for f in filters)
        ]
        index = SORT_KEYS.index(sort_by)
        entries.sort(key=lambda entry: (entry[index], entry[1 - index]))
        return entries
