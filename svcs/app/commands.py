"""Command table for SVCS.

Each command kind maps to a handler taking the store context and the
positional arguments and returning a CommandResult. Handlers never print.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..config import ConfigStore
from ..core import CheckoutEngine, CommandResult, CommitStore, IndexStore, LogStore, Status, StoreContext
from ..utils.log import log_debug


Handler = Callable[[StoreContext, list[str]], CommandResult]


class CommandKind(str, Enum):
    """Commands understood by SVCS, keyed by their command-line name."""
    HELP = "--help"
    CONFIG = "config"
    ADD = "add"
    LOG = "log"
    COMMIT = "commit"
    CHECKOUT = "checkout"

    @classmethod
    def parse(cls, value: str) -> CommandKind | None:
        for kind in cls:
            if kind.value == value:
                return kind
        return None


@dataclass(frozen=True, slots=True)
class Command:
    description: str
    handler: Handler


def _help(context: StoreContext, args: list[str]) -> CommandResult:
    lines = ["These are SVCS commands:"]
    for kind, command in COMMANDS.items():
        if kind is CommandKind.HELP:
            continue
        lines.append(kind.value.ljust(11) + command.description)
    return CommandResult(Status.OK, "\n".join(lines))


def _config(context: StoreContext, args: list[str]) -> CommandResult:
    return ConfigStore(context).configure(args)


def _add(context: StoreContext, args: list[str]) -> CommandResult:
    return IndexStore(context).track(args)


def _log(context: StoreContext, args: list[str]) -> CommandResult:
    return LogStore(context).show(args)


def _commit(context: StoreContext, args: list[str]) -> CommandResult:
    author = ConfigStore(context).author()
    return CommitStore(context).commit(args, author=author)


def _checkout(context: StoreContext, args: list[str]) -> CommandResult:
    return CheckoutEngine(context).checkout(args)


COMMANDS: dict[CommandKind, Command] = {
    CommandKind.HELP: Command("Show commands", _help),
    CommandKind.CONFIG: Command("Get and set a username.", _config),
    CommandKind.ADD: Command("Add a file to the index.", _add),
    CommandKind.LOG: Command("Show commit logs.", _log),
    CommandKind.COMMIT: Command("Save changes.", _commit),
    CommandKind.CHECKOUT: Command("Restore a file.", _checkout),
}


def dispatch(context: StoreContext, command: str | None, args: list[str] | None = None) -> CommandResult:
    """Run ``command`` against the store.
    
    Args:
        context: Store layout for this invocation
        command: Command-line name; None shows help
        args: Positional arguments after the command
        
    Returns:
        CommandResult of the handler, or UNKNOWN_COMMAND
    """
    kind = CommandKind.HELP if command is None else CommandKind.parse(command)
    if kind is None:
        return CommandResult(Status.UNKNOWN_COMMAND, f"'{command}' is not a SVCS command.")

    log_debug(f"Dispatching {kind.value} with {len(args or [])} argument(s)")
    return COMMANDS[kind].handler(context, list(args or []))
