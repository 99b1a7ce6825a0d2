"""Settings sources — where the accent-color value comes from.

A source exposes get(key), connect(key, callback) and disconnect(handle).
Callbacks receive the new string value and run synchronously on whichever
thread delivers the change, so one update finishes before the next starts.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Protocol

from accent_sync.config import DEFAULT_SCHEMA
from accent_sync.errors import SettingsError

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str], None]


class SettingsSource(Protocol):
    def get(self, key: str) -> str: ...

    def connect(self, key: str, callback: ChangeCallback) -> int: ...

    def disconnect(self, handle: int) -> None: ...


def unquote(value: str) -> str:
    """Turn GVariant text output ('red') into a plain string."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return value


class _Subscriptions:
    """Handle bookkeeping shared by the concrete sources."""

    def __init__(self) -> None:
        self._callbacks: dict[int, tuple[str, ChangeCallback]] = {}
        self._next_handle = 1

    def connect(self, key: str, callback: ChangeCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = (key, callback)
        return handle

    def disconnect(self, handle: int) -> None:
        self._callbacks.pop(handle, None)

    def watched_keys(self) -> set[str]:
        return {key for key, _ in self._callbacks.values()}

    def emit(self, key: str, value: str) -> None:
        for watched, callback in list(self._callbacks.values()):
            if watched == key:
                callback(value)


class MemorySettings(_Subscriptions):
    """In-process key/value store; set() notifies subscribers immediately."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        super().__init__()
        self._values = dict(values or {})

    def get(self, key: str) -> str:
        if key not in self._values:
            raise SettingsError(f"No such key: {key}")
        return self._values[key]

    def set(self, key: str, value: str) -> None:
        changed = self._values.get(key) != value
        self._values[key] = value
        if changed:
            self.emit(key, value)


def _run_gsettings(args: list[str], binary: str = "gsettings") -> subprocess.CompletedProcess:
    """Run a gsettings command and return the result."""
    try:
        return subprocess.run(
            [binary] + args,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise SettingsError(f"Cannot run {binary}: {e}") from e


class GSettingsSource(_Subscriptions):
    """GSettings schema read through the ``gsettings`` command.

    run() blocks on ``gsettings monitor`` and dispatches each change line
    to the connected callbacks until stop() is called or the monitor exits.
    """

    def __init__(self, schema: str = DEFAULT_SCHEMA, binary: str = "gsettings") -> None:
        super().__init__()
        self.schema = schema
        self.binary = binary
        self._proc: subprocess.Popen | None = None

    def get(self, key: str) -> str:
        result = _run_gsettings(["get", self.schema, key], self.binary)
        if result.returncode != 0:
            raise SettingsError(
                f"gsettings get {self.schema} {key} failed: {result.stderr.strip()}"
            )
        return unquote(result.stdout)

    def dispatch_line(self, line: str) -> None:
        """Handle one ``key: value`` line from gsettings monitor."""
        key, sep, value = line.partition(":")
        if not sep:
            return
        key = key.strip()
        if key in self.watched_keys():
            self.emit(key, unquote(value))

    def run(self) -> None:
        keys = self.watched_keys()
        cmd = [self.binary, "monitor", self.schema]
        if len(keys) == 1:
            cmd.append(next(iter(keys)))
        try:
            self._proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, text=True)
        except OSError as e:
            raise SettingsError(f"Cannot run {self.binary}: {e}") from e

        logger.debug("Watching %s (%s)", self.schema, ", ".join(sorted(keys)))
        with self._proc as proc:
            for line in proc.stdout:
                self.dispatch_line(line)
        self._proc = None

    def stop(self) -> None:
        if self._proc is not None:
            self._proc.terminate()
