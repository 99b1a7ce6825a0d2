"""Tests for settings sources."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from accent_sync.errors import SettingsError
from accent_sync.settings import GSettingsSource, MemorySettings, unquote


class TestUnquote:
    @pytest.mark.parametrize("raw,expected", [
        ("'red'\n", "red"),
        ('"#123456"', "#123456"),
        ("''", ""),
        ("slate", "slate"),
    ])
    def test_unquote(self, raw, expected):
        assert unquote(raw) == expected


class TestMemorySettings:
    def test_get(self):
        settings = MemorySettings({"accent-color": "red"})
        assert settings.get("accent-color") == "red"

    def test_missing_key_raises(self):
        with pytest.raises(SettingsError):
            MemorySettings().get("accent-color")

    def test_set_notifies_subscribers(self):
        settings = MemorySettings({"accent-color": "red"})
        seen = []
        settings.connect("accent-color", seen.append)
        settings.connect("other-key", lambda v: seen.append("wrong"))
        settings.set("accent-color", "teal")
        assert seen == ["teal"]

    def test_unchanged_value_not_emitted(self):
        settings = MemorySettings({"accent-color": "red"})
        seen = []
        settings.connect("accent-color", seen.append)
        settings.set("accent-color", "red")
        assert seen == []

    def test_disconnect(self):
        settings = MemorySettings({"accent-color": "red"})
        seen = []
        handle = settings.connect("accent-color", seen.append)
        settings.disconnect(handle)
        settings.set("accent-color", "teal")
        assert seen == []


class TestGSettingsSource:
    @patch("accent_sync.settings.subprocess.run")
    def test_get_unquotes(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="'purple'\n", stderr="",
        )
        source = GSettingsSource("org.gnome.desktop.interface")
        assert source.get("accent-color") == "purple"
        assert mock_run.call_args[0][0] == [
            "gsettings", "get", "org.gnome.desktop.interface", "accent-color",
        ]

    @patch("accent_sync.settings.subprocess.run")
    def test_get_failure_raises(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="No such schema\n",
        )
        with pytest.raises(SettingsError, match="No such schema"):
            GSettingsSource().get("accent-color")

    @patch("accent_sync.settings.subprocess.run", side_effect=FileNotFoundError("gsettings"))
    def test_missing_binary_raises(self, mock_run):
        with pytest.raises(SettingsError):
            GSettingsSource().get("accent-color")

    def test_dispatch_line(self):
        source = GSettingsSource()
        seen = []
        source.connect("accent-color", seen.append)
        source.dispatch_line("accent-color: 'green'\n")
        source.dispatch_line("color-scheme: 'prefer-dark'\n")
        source.dispatch_line("garbage\n")
        assert seen == ["green"]

    @patch("accent_sync.settings.subprocess.Popen")
    def test_run_dispatches_monitor_output(self, mock_popen):
        proc = MagicMock()
        proc.stdout = iter(["accent-color: 'red'\n", "accent-color: '#abcdef'\n"])
        proc.__enter__.return_value = proc
        mock_popen.return_value = proc

        source = GSettingsSource()
        seen = []
        source.connect("accent-color", seen.append)
        source.run()

        assert seen == ["red", "#abcdef"]
        assert mock_popen.call_args[0][0] == [
            "gsettings", "monitor", "org.gnome.desktop.interface", "accent-color",
        ]
