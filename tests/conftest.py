"""Shared test fixtures for the markd test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from markd.persistence import BookmarkFile
from markd.store import BookmarkStore


@pytest.fixture(autouse=True)
def isolated_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Keep every test away from the real ~/.config/markd."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("MARKD_CONFIG", str(home / "config.yaml"))
    monkeypatch.setenv("MARKD_BOOKMARKS", str(home / "bookmarks.toml"))
    monkeypatch.delenv("MARKD_DEBUG", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return home


@pytest.fixture
def bookmarks_path(isolated_env: Path) -> Path:
    return isolated_env / "bookmarks.toml"


@pytest.fixture
def make_dir(tmp_path: Path):
    """Create ``tmp_path/dirs/<name>`` and return its canonical path string."""

    def _make(name: str) -> str:
        path = tmp_path / "dirs" / name
        path.mkdir(parents=True, exist_ok=True)
        return str(path.resolve())

    return _make


class Prompt:
    """Scripted confirmation callback that records each call."""

    def __init__(self, answer: bool = False) -> None:
        self.answer = answer
        self.calls: list[tuple[str, str, str]] = []

    def __call__(self, name: str, old: str, new: str) -> bool:
        self.calls.append((name, old, new))
        return self.answer


@pytest.fixture
def prompt() -> Prompt:
    return Prompt()


@pytest.fixture
def store(bookmarks_path: Path, prompt: Prompt) -> BookmarkStore:
    """An empty store backed by a file in the temp home."""
    return BookmarkStore.load(BookmarkFile(bookmarks_path), confirm=prompt)
