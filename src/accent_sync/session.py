"""Sync sessions — one enable-to-disable cycle.

A session remembers which backups it created, so removal only ever deletes
backups it owns. Sessions persist to session.yaml so the CLI can enable in
one process and disable in another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import yaml

from accent_sync.paths import session_file


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass
class Session:
    """State carried through update and removal."""

    started_at: str = field(default_factory=_now)
    backups_created: set[Path] = field(default_factory=set)
    written: set[Path] = field(default_factory=set)

    def record_backup(self, path: Path) -> None:
        self.backups_created.add(Path(path))

    def owns(self, path: Path) -> bool:
        return Path(path) in self.backups_created

    def forget(self, path: Path) -> None:
        self.backups_created.discard(Path(path))

    def mark_written(self, path: Path) -> None:
        self.written.add(Path(path))

    def has_written(self, path: Path) -> bool:
        return Path(path) in self.written

    def to_dict(self) -> dict:
        return {
            "started_at": self.started_at,
            "backups_created": sorted(str(p) for p in self.backups_created),
            "written": sorted(str(p) for p in self.written),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Session:
        return cls(
            started_at=data.get("started_at") or _now(),
            backups_created={Path(p) for p in data.get("backups_created", []) or []},
            written={Path(p) for p in data.get("written", []) or []},
        )


def load_session(path: Path | str | None = None) -> Session | None:
    """Load the persisted session, or None when no session is active.

    Raises:
        ValueError: If the state file is not a YAML mapping.
    """
    state_path = Path(path) if path else session_file()
    if not state_path.exists():
        return None
    with open(state_path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"session state at {state_path} is not a YAML mapping")
    return Session.from_dict(data)


def save_session(session: Session, path: Path | str | None = None) -> None:
    """Persist ``session`` to the state file."""
    state_path = Path(path) if path else session_file()
    state_path.parent.mkdir(parents=True, exist_ok=True)
    with open(state_path, "w") as f:
        yaml.safe_dump(session.to_dict(), f, default_flow_style=False)


def clear_session(path: Path | str | None = None) -> None:
    """End the persisted session."""
    state_path = Path(path) if path else session_file()
    state_path.unlink(missing_ok=True)
