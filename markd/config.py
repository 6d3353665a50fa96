"""Runtime configuration for markd.

Resolved once at startup and handed to the store. Values come from, in
order of precedence:

  1. environment variables (``MARKD_BOOKMARKS``, ``NO_COLOR``)
  2. an optional YAML file at ``~/.config/markd/config.yaml``
     (or wherever ``MARKD_CONFIG`` points)
  3. built-in defaults

A missing or invalid config file falls back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .log import logger

CONFIG_DIR = Path.home() / ".config" / "markd"
CONFIG_PATH = CONFIG_DIR / "config.yaml"
BOOKMARKS_PATH = CONFIG_DIR / "bookmarks.toml"
LEGACY_PATH = Path.home() / "dirs.json"


@dataclass
class MarkdConfig:
    """Paths and display settings for one markd invocation."""

    bookmarks_path: Path = BOOKMARKS_PATH
    legacy_path: Path = LEGACY_PATH
    color: bool = True


def _expand(value: object) -> Path:
    return Path(os.path.expandvars(str(value))).expanduser()


def load_config(path: Path | None = None) -> MarkdConfig:
    """Build a :class:`MarkdConfig` from the config file and environment."""
    if path is None:
        env_path = os.environ.get("MARKD_CONFIG")
        path = _expand(env_path) if env_path else CONFIG_PATH
    config = MarkdConfig()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if not isinstance(data, dict):
                raise ValueError(f"expected a mapping, got {type(data).__name__}")
            if data.get("bookmarks_file"):
                config.bookmarks_path = _expand(data["bookmarks_file"])
            if data.get("legacy_file"):
                config.legacy_path = _expand(data["legacy_file"])
            if "color" in data:
                config.color = bool(data["color"])
        except (OSError, yaml.YAMLError, ValueError):
            logger.warning("ignoring unreadable config file %s", path)
            logger.debug("config load failed", exc_info=True)
            config = MarkdConfig()

    if os.environ.get("MARKD_BOOKMARKS"):
        config.bookmarks_path = _expand(os.environ["MARKD_BOOKMARKS"])
    if os.environ.get("NO_COLOR"):
        config.color = False

    logger.debug("bookmarks file: %s", config.bookmarks_path)
    return config
