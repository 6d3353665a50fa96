"""Text codecs for the bookmarks file.

Each codec turns the on-disk document into a flat ``{name: path}`` dict
and back. The TOML codec is the current format; the JSON codec reads and
writes the format used by earlier releases (``~/dirs.json``).
"""

from __future__ import annotations

import json

import tomlkit

from ..errors import PersistenceError


class Codec:
    """Serialize/deserialize a ``{name: path}`` mapping."""

    name = "codec"

    def decode(self, text: str) -> dict[str, str]:
        """Parse *text*, returning an empty dict for a blank document."""
        if not text.strip():
            return {}
        try:
            data = self._loads(text)
        except ValueError as exc:
            raise PersistenceError(f"malformed {self.name} document") from exc
        return _validate(data, self.name)

    def encode(self, bookmarks: dict[str, str]) -> str:
        """Render *bookmarks* as text, keys sorted for stable diffs."""
        return self._dumps(dict(sorted(bookmarks.items())))

    # -- override points ------------------------------------------------------

    def _loads(self, text: str) -> object:
        raise NotImplementedError

    def _dumps(self, bookmarks: dict[str, str]) -> str:
        raise NotImplementedError


class TomlCodec(Codec):
    """Current format: one ``name = "path"`` line per bookmark."""

    name = "TOML"

    def _loads(self, text: str) -> object:
        # tomlkit ParseError subclasses ValueError
        return tomlkit.parse(text).unwrap()

    def _dumps(self, bookmarks: dict[str, str]) -> str:
        return tomlkit.dumps(bookmarks)


class JsonCodec(Codec):
    """Legacy format: a pretty-printed JSON object."""

    name = "JSON"

    def _loads(self, text: str) -> object:
        return json.loads(text)

    def _dumps(self, bookmarks: dict[str, str]) -> str:
        return json.dumps(bookmarks, indent=2, ensure_ascii=False) + "\n"


def _validate(data: object, fmt: str) -> dict[str, str]:
    """Reject anything that is not a flat table of string values."""
    if not isinstance(data, dict):
        raise PersistenceError(
            f"expected a {fmt} table of bookmarks, got {type(data).__name__}"
        )
    for name, path in data.items():
        if not isinstance(path, str):
            raise PersistenceError(
                f"bookmark {name!r} has a non-string value ({type(path).__name__})"
            )
    return dict(data)
