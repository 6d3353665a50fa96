"""Turn user-supplied paths into canonical directory paths."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidPath, ResolutionError


def current_dir() -> str:
    """Return the working directory, canonicalized."""
    try:
        return str(Path.cwd().resolve())
    except OSError as exc:
        raise ResolutionError("failed to determine current directory") from exc


def resolve_path(path: str | os.PathLike[str] | None = None) -> str:
    """Return the absolute, symlink-free form of *path*.

    With no *path* the current working directory is used. Raises
    :class:`InvalidPath` when *path* does not exist or is not a directory.
    Never creates anything on disk.
    """
    if path is None:
        return current_dir()

    try:
        resolved = Path(path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise InvalidPath(f"invalid path provided: {path}") from exc
    if not resolved.is_dir():
        raise InvalidPath(f"not a directory: {path}")
    return str(resolved)


def derive_name(path: str) -> str:
    """Return the final segment of *path*, lowercased."""
    name = Path(path).name
    if not name:
        raise ResolutionError(f"couldn't get a directory name from {path}")
    return name.lower()
