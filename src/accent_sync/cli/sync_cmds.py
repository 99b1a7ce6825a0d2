"""Sync CLI commands: apply, enable, disable, watch."""

import argparse
import signal
import sys

from accent_sync.config import Config


def _print_result(title: str, result: dict) -> None:
    print(title)
    print("─" * 40)
    accent = result.get("accent")
    if accent is not None:
        label = accent.name if accent.is_named else "custom"
        print(f"  Accent:    {accent.hex_code} ({label})")
    print(f"  Created:   {len(result['created'])}")
    print(f"  Updated:   {len(result['updated'])}")
    print(f"  Removed:   {len(result['removed'])}")
    print(f"  Unchanged: {len(result['unchanged'])}")
    if result["errors"]:
        print(f"  Errors:    {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['path']}: {e['error']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")


def _current_value(config: Config) -> str | None:
    from accent_sync.settings import GSettingsSource

    try:
        return GSettingsSource(config.schema).get(config.key)
    except Exception as e:
        print(f"ERROR: cannot read {config.schema} {config.key}: {e}", file=sys.stderr)
        return None


def cmd_apply(args: argparse.Namespace, config: Config) -> int:
    from accent_sync.session import Session, load_session, save_session
    from accent_sync.sync import sync_accent

    value = args.value if args.value is not None else _current_value(config)
    if value is None:
        return 1

    session = load_session() or Session()
    result = sync_accent(
        value, session,
        root=config.config_home,
        targets=config.targets(),
        dry_run=args.dry_run,
    )
    if not args.dry_run:
        save_session(session)

    _print_result("Accent Sync Results", result)
    return 1 if result["errors"] else 0


def cmd_enable(args: argparse.Namespace, config: Config) -> int:
    args.value = None
    args.dry_run = False
    return cmd_apply(args, config)


def cmd_disable(args: argparse.Namespace, config: Config) -> int:
    from accent_sync.session import Session, clear_session, load_session
    from accent_sync.sync import remove_all

    session = load_session() or Session()
    result = remove_all(
        session,
        root=config.config_home,
        targets=config.targets(),
        dry_run=args.dry_run,
    )
    if not args.dry_run and not result["errors"]:
        clear_session()

    _print_result("Accent Block Removal Results", result)
    return 1 if result["errors"] else 0


def cmd_watch(args: argparse.Namespace, config: Config) -> int:
    from accent_sync.service import AccentSyncService
    from accent_sync.session import clear_session, load_session, save_session
    from accent_sync.settings import GSettingsSource

    source = GSettingsSource(config.schema)
    service = AccentSyncService(
        source, config, session=load_session(), on_applied=save_session,
    )

    result = service.enable()
    if result is None:
        return 1
    _print_result("Accent Sync Results", result)
    save_session(service.session)

    signal.signal(signal.SIGTERM, lambda signum, frame: source.stop())
    try:
        source.run()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"ERROR: watch stopped: {e}", file=sys.stderr)

    if args.keep:
        save_session(service.session)
        return 0

    result = service.disable()
    if result["errors"]:
        save_session(service.session)
    else:
        clear_session()
    _print_result("Accent Block Removal Results", result)
    return 1 if result["errors"] else 0
