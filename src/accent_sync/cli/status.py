"""Read-only CLI commands: resolve, status."""

import argparse

from accent_sync.config import Config


def cmd_resolve(args: argparse.Namespace, config: Config) -> int:
    from accent_sync.accent import resolve_accent
    from accent_sync.render import render_block

    accent = resolve_accent(args.value)
    print(f"Hex:   {accent.hex_code}")
    print(f"Named: {accent.name if accent.is_named else 'no (custom)'}")
    if accent.error:
        print(f"Error: {accent.error}")

    for target in config.targets():
        block = render_block(target, accent)
        print(f"\n[{target}]")
        print(block.render() if block else "(block removed)")

    return 0 if accent.ok else 1


def cmd_status(args: argparse.Namespace, config: Config) -> int:
    from accent_sync.block import find_block
    from accent_sync.errors import CorruptBlockError, FileOperationError
    from accent_sync.fileio import read_text
    from accent_sync.paths import backup_path, stylesheet_path
    from accent_sync.session import load_session

    session = load_session()
    print("Accent Sync Status")
    print("─" * 40)
    if session:
        print(f"  Session: active since {session.started_at}")
    else:
        print("  Session: none")

    problems = 0
    for target in config.targets():
        path = stylesheet_path(target, config.config_home)
        bak = backup_path(path)
        if not path.exists():
            block_state = "file missing"
        else:
            try:
                match = find_block(read_text(path))
                block_state = "present" if match else "absent"
            except CorruptBlockError as e:
                block_state = f"CORRUPT ({e})"
                problems += 1
            except FileOperationError as e:
                block_state = f"unreadable ({e})"
                problems += 1
        if not bak.exists():
            bak_state = "none"
        elif session and session.owns(bak):
            bak_state = "session"
        else:
            bak_state = "pre-existing"

        print(f"\n  [{target}] {path}")
        print(f"    Block:  {block_state}")
        print(f"    Backup: {bak_state}")

    return 1 if problems else 0
