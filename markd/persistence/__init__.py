"""Persistence layer: codecs, the bookmarks file, and legacy migration."""

from ._base import BookmarkFile
from .codecs import Codec, JsonCodec, TomlCodec
from .migrate import migrate

__all__ = [
    "BookmarkFile",
    "Codec",
    "JsonCodec",
    "TomlCodec",
    "migrate",
]
