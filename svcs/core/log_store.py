"""Commit log.

``vcs/log.txt`` is a plain text ledger, newest entry first. Each entry is a
four line block::

    commit <identifier>
    Author: <name>
    <message>
    <blank>
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.fs import read_text, write_text
from ..utils.log import log_debug
from .context import StoreContext
from .results import CommandResult, Status, invalid_arguments


NO_COMMITS = "No commits yet."


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Metadata recorded for one commit."""
    identifier: str
    author: str
    message: str

    def render(self) -> str:
        return f"commit {self.identifier}\nAuthor: {self.author}\n{self.message}\n\n"


class LogStore:
    """Owns the ordering of the commit log."""

    def __init__(self, context: StoreContext):
        self.context = context

    def text(self) -> str:
        return read_text(self.context.log_file)

    def latest_is(self, identifier: str) -> bool:
        """Check whether the most recent entry records ``identifier``.

        Only the newest entry is consulted; older entries are never parsed.
        """
        return self.text().startswith(f"commit {identifier}")

    def prepend(self, entry: LogEntry) -> None:
        """Put ``entry`` in front of the existing log, trimming trailing whitespace."""
        content = (entry.render() + self.text()).rstrip()
        write_text(self.context.log_file, content)
        log_debug(f"Logged commit {entry.identifier}")

    def show(self, args: list[str]) -> CommandResult:
        if args:
            return invalid_arguments()
        return CommandResult(Status.OK, self.text() or NO_COMMITS)
