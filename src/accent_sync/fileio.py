"""Filesystem primitives for target stylesheets.

Every helper raises FileOperationError on failure; callers decide whether
a failure aborts the update or is only worth a warning.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from accent_sync.errors import FileOperationError


def ensure_dir(directory: Path) -> None:
    """Create ``directory`` and its parents if missing."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileOperationError(f"Directory creation ({directory}): {e}") from e
    if not directory.is_dir():
        raise FileOperationError(f"Directory creation ({directory}): not a directory")


def read_text(path: Path) -> str:
    """Read a file as UTF-8, replacing undecodable bytes."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileOperationError(f"Reading file ({path}): {e}") from e
    return data.decode("utf-8", errors="replace")


def atomic_write(path: Path, contents: str) -> None:
    """Replace ``path`` with ``contents`` via a temp file and rename."""
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    except OSError as e:
        raise FileOperationError(f"Writing file ({path}): {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(contents.encode("utf-8"))
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileOperationError(f"Writing file ({path}): {e}") from e


def copy_if_absent(src: Path, dst: Path) -> bool:
    """Copy ``src`` to ``dst`` unless ``dst`` already exists.

    Returns:
        True if a copy was made.
    """
    try:
        with open(src, "rb") as fsrc, open(dst, "xb") as fdst:
            shutil.copyfileobj(fsrc, fdst)
    except FileExistsError:
        return False
    except OSError as e:
        raise FileOperationError(f"Backup creation ({dst}): {e}") from e
    shutil.copystat(src, dst)
    return True


def restore_backup(backup: Path, target: Path) -> None:
    """Overwrite ``target`` with the contents of ``backup``."""
    try:
        shutil.copy2(backup, target)
    except OSError as e:
        raise FileOperationError(f"Restoring {target} from {backup}: {e}") from e


def delete_file(path: Path) -> None:
    """Delete ``path``; a file that is already gone is not an error."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        raise FileOperationError(f"Deleting file ({path}): {e}") from e
