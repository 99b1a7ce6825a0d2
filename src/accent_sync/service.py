"""Enable/disable lifecycle binding a settings source to the stylesheets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from accent_sync.config import Config
from accent_sync.session import Session
from accent_sync.settings import SettingsSource
from accent_sync.sync import remove_all, sync_accent

logger = logging.getLogger(__name__)


class AccentSyncService:
    """Keeps the managed blocks in step with a settings source.

    enable() starts a session, subscribes to accent-color changes and
    applies the current value; disable() unsubscribes, strips the blocks
    and ends the session. A session whose removal failed is kept so its
    backups can still be cleaned up later. on_applied, when given, runs
    with the session after every change notification is applied.
    """

    def __init__(
        self,
        settings: SettingsSource,
        config: Config | None = None,
        session: Session | None = None,
        root: Path | str | None = None,
        on_applied: Callable[[Session], None] | None = None,
    ) -> None:
        self.settings = settings
        self.config = config or Config()
        self.session = session
        self.root = root if root is not None else self.config.config_home
        self.on_applied = on_applied
        self._handle: int | None = None

    @property
    def enabled(self) -> bool:
        return self._handle is not None

    def enable(self) -> dict[str, Any] | None:
        if self.session is None:
            self.session = Session()
        if self._handle is None:
            self._handle = self.settings.connect(self.config.key, self._on_changed)
        return self.refresh()

    def refresh(self) -> dict[str, Any] | None:
        """Re-read the setting and apply it."""
        try:
            value = self.settings.get(self.config.key)
        except Exception as e:
            logger.error("Error during settings read (%s): %s", self.config.key, e)
            return None
        return self.apply(value)

    def apply(self, value: str) -> dict[str, Any]:
        if self.session is None:
            self.session = Session()
        return sync_accent(
            value, self.session, root=self.root, targets=self.config.targets(),
        )

    def _on_changed(self, value: str) -> None:
        try:
            self.apply(value)
            if self.on_applied is not None:
                self.on_applied(self.session)
        except Exception as e:
            logger.error("Error during accent change handling: %s", e, exc_info=True)

    def disable(self) -> dict[str, Any]:
        if self._handle is not None:
            self.settings.disconnect(self._handle)
            self._handle = None

        session = self.session or Session()
        result = remove_all(session, root=self.root, targets=self.config.targets())
        if not result["errors"]:
            self.session = None
        return result
