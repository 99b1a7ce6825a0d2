"""Target path resolution.

Resolves canonical paths to the GTK user stylesheets and accent-sync's own
files. Uses environment variables when available, falls back to XDG defaults.

Environment variables:
    XDG_CONFIG_HOME — config root (default: ~/.config)
    XDG_STATE_HOME — state root (default: ~/.local/state)
    ACCENT_SYNC_CONFIG — explicit config file path
"""

from __future__ import annotations

import os
from pathlib import Path

BACKUP_SUFFIX = ".bak"

# Target key → toolkit directory under the config root
GTK_DIRS: dict[str, str] = {
    "gtk3": "gtk-3.0",
    "gtk4": "gtk-4.0",
}


def config_home() -> Path:
    """Return the XDG config root."""
    env = os.environ.get("XDG_CONFIG_HOME")
    if env:
        return Path(env)
    return Path.home() / ".config"


def state_home() -> Path:
    """Return the XDG state root."""
    env = os.environ.get("XDG_STATE_HOME")
    if env:
        return Path(env)
    return Path.home() / ".local" / "state"


def config_file() -> Path:
    """Return the path to accent-sync's config.yaml."""
    env = os.environ.get("ACCENT_SYNC_CONFIG")
    if env:
        return Path(env)
    return config_home() / "accent-sync" / "config.yaml"


def session_file() -> Path:
    """Return the path to the persisted session state."""
    return state_home() / "accent-sync" / "session.yaml"


def stylesheet_path(target: str, root: Path | str | None = None) -> Path:
    """Return the gtk.css path for a target key (gtk3, gtk4)."""
    if target not in GTK_DIRS:
        raise ValueError(f"Unknown target: {target}")
    base = Path(root) if root else config_home()
    return base / GTK_DIRS[target] / "gtk.css"


def backup_path(path: Path) -> Path:
    """Return the backup counterpart of a target file."""
    return path.with_name(path.name + BACKUP_SUFFIX)
