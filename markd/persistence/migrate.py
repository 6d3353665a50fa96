"""One-shot conversion from the legacy JSON file to the current TOML file."""

from __future__ import annotations

from pathlib import Path

from ._base import BookmarkFile
from .codecs import JsonCodec, TomlCodec
from ..log import logger


def migrate(legacy_path: Path, current_path: Path) -> dict[str, str]:
    """Copy every bookmark from the legacy file into the current one.

    The current file is overwritten, not merged, and the legacy file is
    left untouched. Names are lowercased on the way in; when two legacy
    names differ only in case, the later one wins. Returns the migrated
    mapping.
    """
    source = BookmarkFile(legacy_path, JsonCodec())
    dest = BookmarkFile(current_path, TomlCodec())

    bookmarks: dict[str, str] = {}
    for name, path in source.load(create=False).items():
        bookmarks[name.lower()] = path

    dest.save(bookmarks)
    logger.debug(
        "migrated %d bookmark(s) from %s to %s", len(bookmarks), source.path, dest.path
    )
    return bookmarks
