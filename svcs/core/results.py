"""Result types shared by every SVCS operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


TOO_MANY_ARGUMENTS = "Too many arguments for the inputted command."


class Status(str, Enum):
    """Outcome kind of a command."""
    OK = "ok"
    TRACKED = "tracked"
    CREATED = "created"
    RESTORED = "restored"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    MESSAGE_MISSING = "message_missing"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENTS = "invalid_arguments"
    UNKNOWN_COMMAND = "unknown_command"

    @property
    def is_error(self) -> bool:
        return self in _ERRORS


_ERRORS = frozenset({
    Status.MESSAGE_MISSING,
    Status.NOT_FOUND,
    Status.INVALID_ARGUMENTS,
    Status.UNKNOWN_COMMAND,
})


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a command: what happened plus the line shown to the user."""
    status: Status
    message: str
    identifier: str | None = None

    @property
    def success(self) -> bool:
        return not self.status.is_error


def invalid_arguments() -> CommandResult:
    return CommandResult(Status.INVALID_ARGUMENTS, TOO_MANY_ARGUMENTS)
