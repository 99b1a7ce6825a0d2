"""Stylesheet sync — resolves the accent, updates or strips managed blocks.

The sync process:
1. Resolve the raw accent-color value once
2. For each enabled target (gtk3, gtk4), render its block
3. Inject or replace the block, or strip it when the target has none
4. Collect per-file actions and errors into a summary dict

Preserves all manually-written content outside the markers. The two entry
points, sync_accent() and remove_all(), never raise: they run inside
settings-change callbacks.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from accent_sync import END_MARKER, START_MARKER
from accent_sync.accent import resolve_accent
from accent_sync.block import ManagedBlock, strip_block, upsert_block
from accent_sync.errors import FileOperationError
from accent_sync.fileio import (
    atomic_write,
    copy_if_absent,
    delete_file,
    ensure_dir,
    read_text,
    restore_backup,
)
from accent_sync.paths import backup_path, stylesheet_path
from accent_sync.render import render_block
from accent_sync.session import Session

logger = logging.getLogger(__name__)

DEFAULT_TARGETS = ("gtk3", "gtk4")


def _take_backup(path: Path, session: Session) -> None:
    """Back up ``path`` before its first write this session; failure is not fatal."""
    bak = backup_path(path)
    if bak.exists():
        return
    try:
        if copy_if_absent(path, bak):
            session.record_backup(bak)
            logger.debug("Backed up %s to %s", path, bak)
    except FileOperationError as e:
        logger.warning("Continuing without backup: %s", e)


def _drop_session_backup(bak: Path, session: Session) -> None:
    if not session.owns(bak):
        return
    delete_file(bak)
    session.forget(bak)
    logger.debug("Deleted session backup %s", bak)


def update_managed_block(
    path: Path,
    block: ManagedBlock,
    session: Session,
    dry_run: bool = False,
) -> str:
    """Inject or replace the managed block in a stylesheet.

    Returns:
        "created", "updated" or "unchanged".

    Raises:
        FileOperationError: If the directory cannot be created, or the file
            cannot be read or written.
        CorruptBlockError: If the file holds a truncated block.
    """
    exists = path.exists()
    if not exists and not dry_run:
        ensure_dir(path.parent)

    original = read_text(path) if exists else ""
    updated = upsert_block(original, block.start_marker, block.end_marker, block.render())

    if exists and updated == original:
        return "unchanged"
    action = "updated" if exists else "created"
    if dry_run:
        return action

    if exists and not session.has_written(path):
        _take_backup(path, session)
    atomic_write(path, updated)
    session.mark_written(path)
    logger.info("%s managed block in %s", action.capitalize(), path)
    return action


def remove_managed_block(
    path: Path,
    session: Session,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
    dry_run: bool = False,
) -> str:
    """Strip the managed block from a stylesheet.

    The file is deleted when nothing but the block was in it. A backup is
    deleted afterwards only when this session created it. If reading or
    writing fails, the target is restored from its backup before the error
    propagates.

    Returns:
        "removed", "deleted", "unchanged" or "missing".

    Raises:
        FileOperationError: On read/write failure (after restore).
        CorruptBlockError: If the file holds a truncated block.
    """
    bak = backup_path(path)

    if not path.exists():
        if not dry_run and bak.exists():
            _drop_session_backup(bak, session)
        return "missing"

    try:
        remaining = strip_block(read_text(path), start_marker, end_marker)
        if remaining is None:
            action = "unchanged"
        elif dry_run:
            return "deleted" if remaining == "" else "removed"
        elif remaining == "":
            delete_file(path)
            action = "deleted"
        else:
            atomic_write(path, remaining + "\n")
            action = "removed"
        if action != "unchanged":
            session.mark_written(path)
    except FileOperationError:
        if not dry_run:
            _restore_after_failure(path, bak, session)
        raise

    if not dry_run:
        _drop_session_backup(bak, session)
    if action != "unchanged":
        logger.info("Removed managed block from %s (%s)", path, action)
    return action


def _restore_after_failure(path: Path, bak: Path, session: Session) -> None:
    if not bak.exists():
        return
    try:
        restore_backup(bak, path)
        _drop_session_backup(bak, session)
        logger.info("Restored %s from %s", path, bak)
    except FileOperationError as e:
        logger.error("Error during restore after failed removal: %s", e, exc_info=True)


def _new_result(dry_run: bool) -> dict[str, Any]:
    return {
        "created": [],
        "updated": [],
        "unchanged": [],
        "removed": [],
        "errors": [],
        "dry_run": dry_run,
    }


def _record(result: dict[str, Any], path: Path, action: str) -> None:
    if action in ("created", "updated"):
        result[action].append(str(path))
    elif action in ("removed", "deleted"):
        result["removed"].append(str(path))
    else:
        result["unchanged"].append(str(path))


def sync_accent(
    raw_value: str,
    session: Session,
    root: Path | str | None = None,
    targets: Iterable[str] = DEFAULT_TARGETS,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Sync every target stylesheet to an accent-color value."""
    accent = resolve_accent(raw_value)
    result = _new_result(dry_run)
    result["accent"] = accent

    for target in targets:
        try:
            path = stylesheet_path(target, root)
        except Exception as e:
            logger.error("Error during path resolution for %s: %s", target, e)
            result["errors"].append({"path": target, "error": str(e)})
            continue

        try:
            block = render_block(target, accent)
            if block is None:
                action = remove_managed_block(path, session, dry_run=dry_run)
            else:
                action = update_managed_block(path, block, session, dry_run)
            _record(result, path, action)
        except Exception as e:
            logger.error("Error during %s sync (%s): %s", target, path, e, exc_info=True)
            result["errors"].append({"path": str(path), "error": str(e)})

    return result


def remove_all(
    session: Session,
    root: Path | str | None = None,
    targets: Iterable[str] = DEFAULT_TARGETS,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Strip managed blocks from every target stylesheet."""
    result = _new_result(dry_run)

    for target in targets:
        try:
            path = stylesheet_path(target, root)
        except Exception as e:
            logger.error("Error during path resolution for %s: %s", target, e)
            result["errors"].append({"path": target, "error": str(e)})
            continue

        try:
            action = remove_managed_block(path, session, dry_run=dry_run)
            _record(result, path, action)
        except Exception as e:
            logger.error("Error during block removal (%s): %s", path, e, exc_info=True)
            result["errors"].append({"path": str(path), "error": str(e)})

    return result
