"""Tests for markd.config -- YAML config file and environment overrides."""

from __future__ import annotations

from pathlib import Path

from markd.config import BOOKMARKS_PATH, LEGACY_PATH, load_config


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        config = load_config(tmp_path / "missing.yaml")
        assert config.bookmarks_path == BOOKMARKS_PATH
        assert config.legacy_path == LEGACY_PATH
        assert config.color is True

    def test_file_values(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        path = tmp_path / "config.yaml"
        path.write_text(
            f"bookmarks_file: {tmp_path}/marks.toml\n"
            f"legacy_file: {tmp_path}/old.json\n"
            "color: false\n"
        )
        config = load_config(path)
        assert config.bookmarks_path == tmp_path / "marks.toml"
        assert config.legacy_path == tmp_path / "old.json"
        assert config.color is False

    def test_tilde_expanded(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        monkeypatch.setenv("HOME", str(tmp_path))
        path = tmp_path / "config.yaml"
        path.write_text("bookmarks_file: ~/marks.toml\n")
        assert load_config(path).bookmarks_path == tmp_path / "marks.toml"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text(f"bookmarks_file: {tmp_path}/from-file.toml\n")
        monkeypatch.setenv("MARKD_BOOKMARKS", str(tmp_path / "from-env.toml"))
        assert load_config(path).bookmarks_path == tmp_path / "from-env.toml"

    def test_no_color_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert load_config(tmp_path / "missing.yaml").color is False

    def test_invalid_yaml_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        path = tmp_path / "config.yaml"
        path.write_text("bookmarks_file: [unclosed\n")
        assert load_config(path).bookmarks_path == BOOKMARKS_PATH

    def test_non_mapping_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        assert load_config(path).bookmarks_path == BOOKMARKS_PATH

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        path = tmp_path / "elsewhere.yaml"
        path.write_text("color: false\n")
        monkeypatch.setenv("MARKD_CONFIG", str(path))
        assert load_config().color is False

    def test_unknown_keys_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MARKD_BOOKMARKS")
        path = tmp_path / "config.yaml"
        path.write_text("theme: dark\n")
        config = load_config(path)
        assert isinstance(config.bookmarks_path, Path)
        assert config.color is True
