"""SVCS CLI.

Usage: svcs <command> [argument]

Every invocation prints exactly one result message. Errors in the
arguments are reported, never raised.
"""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core import StoreContext
from ..utils.env import enable_debug_mode, get_project_root
from ..utils.log import log_debug
from .commands import CommandKind, dispatch


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svcs",
        description="SVCS - a minimal local version control system",
        add_help=False,
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    parser.add_argument(
        "--help",
        dest="show_help",
        action="store_true",
        help="Show commands",
    )
    parser.add_argument("command", nargs="?", help="Command to run")
    parser.add_argument("arguments", nargs=argparse.REMAINDER, help="Command argument")
    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed, unknown = parser.parse_known_args(args)

    if parsed.debug:
        enable_debug_mode()

    root = get_project_root()
    log_debug(f"Working root: {root}")

    try:
        context = StoreContext.open(root)
        command = CommandKind.HELP.value if parsed.show_help else parsed.command
        if unknown:
            # Unrecognized options are reported like any other unknown command.
            command = unknown[0]
        result = dispatch(context, command, parsed.arguments)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.message)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
