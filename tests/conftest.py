"""Shared test fixtures for accent-sync."""

import pytest

from accent_sync.session import Session


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def xdg(tmp_path, monkeypatch):
    """Point XDG config/state roots into tmp_path."""
    config = tmp_path / "config"
    state = tmp_path / "state"
    config.mkdir()
    state.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    monkeypatch.setenv("XDG_STATE_HOME", str(state))
    monkeypatch.delenv("ACCENT_SYNC_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def gtk3_css(xdg):
    path = xdg / "config" / "gtk-3.0" / "gtk.css"
    path.parent.mkdir(parents=True)
    return path


@pytest.fixture
def gtk4_css(xdg):
    path = xdg / "config" / "gtk-4.0" / "gtk.css"
    path.parent.mkdir(parents=True)
    return path
