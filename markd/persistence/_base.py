"""Whole-file bookmark persistence."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import PersistenceError
from ..log import logger
from .codecs import Codec, TomlCodec


class BookmarkFile:
    """One bookmarks file read and written in full through a :class:`Codec`.

    There is no locking: two concurrent invocations both read-modify-write
    the whole file and the last writer wins.
    """

    def __init__(self, path: Path, codec: Codec | None = None) -> None:
        self.path = path
        self.codec = codec or TomlCodec()

    # -- core I/O -------------------------------------------------------------

    def load(self, *, create: bool = True) -> dict[str, str]:
        """Read and decode the file, creating an empty one if it is absent."""
        try:
            if not self.path.exists():
                if not create:
                    raise FileNotFoundError(f"no such file: {self.path}")
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                logger.debug("created empty bookmarks file %s", self.path)
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"failed to open {self.path}") from exc

        try:
            bookmarks = self.codec.decode(text)
        except PersistenceError as exc:
            raise PersistenceError(f"failed to parse {self.path}") from exc
        logger.debug("loaded %d bookmark(s) from %s", len(bookmarks), self.path)
        return bookmarks

    def save(self, bookmarks: dict[str, str]) -> None:
        """Overwrite the file with *bookmarks*.

        Written to a sibling ``.tmp`` file first and renamed into place.
        A symlinked bookmarks file is written through to its target so
        the link survives.
        """
        text = self.codec.encode(bookmarks)
        target = self.path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, target)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise PersistenceError(f"failed to write {self.path}") from exc
        logger.debug("saved %d bookmark(s) to %s", len(bookmarks), target)
