"""Command-line interface for accent-sync.

Usage:
    accent-sync resolve <value>
    accent-sync apply [<value>] [--dry-run]
    accent-sync enable
    accent-sync disable [--dry-run]
    accent-sync watch [--keep]
    accent-sync status
"""

import argparse
import logging
import sys

from accent_sync import __version__
from accent_sync.cli.status import cmd_resolve, cmd_status
from accent_sync.cli.sync_cmds import cmd_apply, cmd_disable, cmd_enable, cmd_watch
from accent_sync.config import load_config

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="accent-sync",
        description="Sync the desktop accent color into GTK 3/4 user stylesheets",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default=None,
        help="Path to config.yaml",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    res = sub.add_parser("resolve", help="Show how an accent value resolves")
    res.add_argument("value", help="Accent name, #rrggbb, or empty string")

    app = sub.add_parser("apply", help="Sync stylesheets once")
    app.add_argument(
        "value", nargs="?", default=None,
        help="Accent value (default: current desktop setting)",
    )
    app.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    sub.add_parser("enable", help="Start a session and apply the current accent")

    dis = sub.add_parser("disable", help="Remove managed blocks and end the session")
    dis.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    watch = sub.add_parser("watch", help="Follow accent changes until interrupted")
    watch.add_argument(
        "--keep", action="store_true",
        help="Leave managed blocks in place on exit",
    )

    sub.add_parser("status", help="Show target files, blocks and backups")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"ERROR: cannot load config: {e}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    dispatch = {
        "resolve": cmd_resolve,
        "apply": cmd_apply,
        "enable": cmd_enable,
        "disable": cmd_disable,
        "watch": cmd_watch,
        "status": cmd_status,
    }
    return dispatch[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
