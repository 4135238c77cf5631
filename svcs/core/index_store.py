"""Index of tracked files.

The index is ``vcs/index.txt``: one working-root-relative name per line, in
the order files were first added. Names whose file has disappeared are
skipped on read and dropped the next time the index is rewritten.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..utils.fs import read_lines, write_text
from ..utils.log import log_debug
from .context import StoreContext
from .hasher import TrackedFile
from .results import CommandResult, Status, invalid_arguments


NOTHING_TRACKED = "Add a file to the index."


class IndexStore:
    """Reads and rewrites the tracked file list."""

    def __init__(self, context: StoreContext):
        self.context = context

    def tracked_names(self) -> list[str]:
        """Tracked names whose file currently exists, in index order."""
        names: list[str] = []
        for name in read_lines(self.context.index_file):
            path = self.context.root / name
            if path.is_file() and not self.context.in_store(path):
                names.append(name)
            else:
                log_debug(f"Skipping untrackable index entry: {name}")
        return names

    def tracked_files(self) -> list[TrackedFile]:
        """Tracked files with their current content, in index order."""
        return [
            TrackedFile(name=name, content=(self.context.root / name).read_bytes())
            for name in self.tracked_names()
        ]

    def track(self, args: list[str]) -> CommandResult:
        """List tracked files, or add one to the index.
        
        Args:
            args: Empty to list, or a single path to track
            
        Returns:
            CommandResult; the index is only rewritten on a successful add
        """
        if len(args) > 1:
            return invalid_arguments()

        names = self.tracked_names()

        if not args:
            if not names:
                return CommandResult(Status.OK, NOTHING_TRACKED)
            return CommandResult(Status.OK, "\n".join(["Tracked files:", *names]))

        raw = args[0]
        name = self._normalize(raw)
        if name is None:
            return CommandResult(Status.NOT_FOUND, f"Can't find '{raw}'.")

        if name not in names:
            names.append(name)
        self._write(names)
        return CommandResult(Status.TRACKED, f"The file '{raw}' is tracked.")

    def _normalize(self, raw: str) -> str | None:
        """Map a user path to its index name, or None if it is not a regular file in the root."""
        if not raw:
            return None
        candidate = Path(raw)
        if not candidate.is_absolute():
            candidate = self.context.root / candidate
        if not candidate.is_file():
            return None
        if self.context.in_store(candidate):
            log_debug(f"Refusing to track a file of the store itself: {raw}")
            return None
        # Lexical, so a symlink is tracked under its own name rather than its target's.
        try:
            relative = Path(os.path.abspath(candidate)).relative_to(os.path.abspath(self.context.root))
        except ValueError:
            log_debug(f"Refusing to track path outside the working root: {raw}")
            return None
        return relative.as_posix()

    def _write(self, names: list[str]) -> None:
        write_text(self.context.index_file, "\n".join(names))
        log_debug(f"Index rewritten with {len(names)} entries")
