"""Load accent-sync's config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from accent_sync.paths import config_file

DEFAULT_SCHEMA = "org.gnome.desktop.interface"
DEFAULT_KEY = "accent-color"


@dataclass
class Config:
    """Runtime configuration."""

    schema: str = DEFAULT_SCHEMA
    key: str = DEFAULT_KEY
    config_home: str | None = None
    gtk3: bool = True
    gtk4: bool = True
    log_level: str = "INFO"

    def targets(self) -> list[str]:
        """Target keys enabled in this config, in write order."""
        return [t for t in ("gtk3", "gtk4") if getattr(self, t)]


def load_config(path: Path | str | None = None) -> Config:
    """Read config.yaml, returning defaults when the file is absent.

    Args:
        path: Path to config file. Defaults to the XDG location.

    Returns:
        Populated Config.

    Raises:
        ValueError: If the file is not a YAML mapping or has unknown keys.
        yaml.YAMLError: If the YAML is malformed.
    """
    cfg_path = Path(path) if path else config_file()
    if not cfg_path.exists():
        return Config()

    with open(cfg_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"config at {cfg_path} is not a YAML mapping")

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {cfg_path}: {', '.join(unknown)}")

    return Config(**data)
