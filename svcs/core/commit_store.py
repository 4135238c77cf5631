"""Commit storage for SVCS.

Handles snapshotting the tracked files into content-addressed commit
directories and recording each commit in the log.
"""

from __future__ import annotations

from ..utils.log import log_debug
from .context import StoreContext
from .hasher import TrackedFile, compute_identifier
from .index_store import IndexStore
from .log_store import LogEntry, LogStore
from .results import CommandResult, Status, invalid_arguments


MESSAGE_MISSING = "Message was not passed."
NOTHING_TO_COMMIT = "Nothing to commit."
COMMITTED = "Changes are committed."


class CommitStore:
    """Manages commit creation.

    A commit directory is created once per identifier and never modified
    afterwards. Duplicate detection only looks at the newest log entry.
    """

    def __init__(
        self,
        context: StoreContext,
        index: IndexStore | None = None,
        log: LogStore | None = None,
    ):
        """Initialize commit store.
        
        Args:
            context: Resolved store layout
            index: Index to snapshot (defaults to the context's index)
            log: Log to record commits in (defaults to the context's log)
        """
        self.context = context
        self.index = index or IndexStore(context)
        self.log = log or LogStore(context)

    def commit(self, args: list[str], author: str = "") -> CommandResult:
        """Snapshot the tracked files.
        
        Args:
            args: A single commit message
            author: Name stamped on the log entry
            
        Returns:
            CommandResult; CREATED carries the new identifier
        """
        if not args:
            return CommandResult(Status.MESSAGE_MISSING, MESSAGE_MISSING)
        if len(args) > 1:
            return invalid_arguments()

        tracked = self.index.tracked_files()
        identifier = compute_identifier(tracked)
        log_debug(f"Computed identifier {identifier} over {len(tracked)} files")

        if not tracked or self.log.latest_is(identifier):
            log_debug("Nothing changed since the latest commit")
            return CommandResult(Status.NOTHING_TO_COMMIT, NOTHING_TO_COMMIT, identifier)

        self._store_snapshot(identifier, tracked)
        self.log.prepend(LogEntry(identifier=identifier, author=author, message=args[0]))
        return CommandResult(Status.CREATED, COMMITTED, identifier)

    def _store_snapshot(self, identifier: str, tracked: list[TrackedFile]) -> None:
        commit_dir = self.context.commit_dir(identifier)
        if commit_dir.exists():
            log_debug(f"Commit directory {identifier} already exists; not copying files")
            return

        commit_dir.mkdir(parents=True)
        for tracked_file in tracked:
            target = commit_dir / tracked_file.name
            target.parent.mkdir(parents=True, exist_ok=True)
            # Write the bytes that were hashed so the snapshot matches its identifier.
            target.write_bytes(tracked_file.content)
        log_debug(f"Stored {len(tracked)} files in commit {identifier}")
