"""Tests for session state and config loading."""

from pathlib import Path

import pytest

from accent_sync.config import Config, load_config
from accent_sync.paths import backup_path, config_file, session_file, stylesheet_path
from accent_sync.session import Session, clear_session, load_session, save_session


class TestSession:
    def test_backup_ownership(self, tmp_path):
        session = Session()
        bak = tmp_path / "gtk.css.bak"
        assert not session.owns(bak)
        session.record_backup(bak)
        assert session.owns(bak)
        session.forget(bak)
        assert not session.owns(bak)

    def test_save_and_load(self, xdg):
        session = Session()
        session.record_backup(Path("/home/u/.config/gtk-3.0/gtk.css.bak"))
        save_session(session)
        assert session_file().exists()

        loaded = load_session()
        assert loaded.started_at == session.started_at
        assert loaded.owns(Path("/home/u/.config/gtk-3.0/gtk.css.bak"))

    def test_written_paths_persist(self, xdg):
        session = Session()
        session.mark_written(Path("/home/u/.config/gtk-4.0/gtk.css"))
        save_session(session)
        loaded = load_session()
        assert loaded.has_written(Path("/home/u/.config/gtk-4.0/gtk.css"))
        assert not loaded.has_written(Path("/home/u/.config/gtk-3.0/gtk.css"))

    def test_load_without_session(self, xdg):
        assert load_session() is None

    def test_clear(self, xdg):
        save_session(Session())
        clear_session()
        assert load_session() is None
        clear_session()

    def test_non_mapping_rejected(self, tmp_path):
        state = tmp_path / "session.yaml"
        state.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_session(state)


class TestPaths:
    def test_stylesheet_paths_follow_xdg(self, xdg):
        assert stylesheet_path("gtk3") == xdg / "config" / "gtk-3.0" / "gtk.css"
        assert stylesheet_path("gtk4") == xdg / "config" / "gtk-4.0" / "gtk.css"

    def test_explicit_root(self, tmp_path):
        assert stylesheet_path("gtk4", tmp_path) == tmp_path / "gtk-4.0" / "gtk.css"

    def test_unknown_target(self):
        with pytest.raises(ValueError):
            stylesheet_path("qt5")

    def test_backup_path(self, tmp_path):
        assert backup_path(tmp_path / "gtk.css") == tmp_path / "gtk.css.bak"

    def test_config_file_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ACCENT_SYNC_CONFIG", str(tmp_path / "c.yaml"))
        assert config_file() == tmp_path / "c.yaml"


class TestLoadConfig:
    def test_defaults_when_missing(self, xdg):
        config = load_config()
        assert config == Config()
        assert config.targets() == ["gtk3", "gtk4"]

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("gtk4: false\nlog_level: DEBUG\nkey: accent-colour\n")
        config = load_config(path)
        assert config.targets() == ["gtk3"]
        assert config.log_level == "DEBUG"
        assert config.key == "accent-colour"

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("colour: red\n")
        with pytest.raises(ValueError, match="colour"):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("just a string\n")
        with pytest.raises(ValueError):
            load_config(path)
