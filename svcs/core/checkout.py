"""Checkout: restore a commit's files into the working directory."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..utils.log import log_debug
from .context import StoreContext
from .results import CommandResult, Status, invalid_arguments


MESSAGE_MISSING = "Commit id was not passed."
NOT_FOUND = "Commit does not exist."


class CheckoutEngine:
    """Copies stored snapshots back over the working files."""

    def __init__(self, context: StoreContext):
        self.context = context

    def checkout(self, args: list[str]) -> CommandResult:
        """Restore a commit.
        
        Args:
            args: A single commit identifier, looked up literally
            
        Returns:
            CommandResult; the working directory is untouched unless RESTORED
        """
        if not args:
            return CommandResult(Status.MESSAGE_MISSING, MESSAGE_MISSING)
        if len(args) > 1:
            return invalid_arguments()

        identifier = args[0]
        commit_dir = self._locate(identifier)
        if commit_dir is None:
            return CommandResult(Status.NOT_FOUND, NOT_FOUND)

        file_count = 0
        for root, _, files in os.walk(commit_dir):
            for file in files:
                src = Path(root) / file
                dst = self.context.root / src.relative_to(commit_dir)
                if self.context.in_store(dst):
                    log_debug(f"Not restoring over store file: {dst}")
                    continue
                dst.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dst)
                file_count += 1

        log_debug(f"Restored {file_count} files from commit {identifier}")
        return CommandResult(Status.RESTORED, f"Switched to commit {identifier}.", identifier)

    def _locate(self, identifier: str) -> Path | None:
        # Identifiers are plain directory names; anything path-like cannot name a commit.
        if identifier in ("", ".", "..") or Path(identifier).name != identifier:
            return None
        commit_dir = self.context.commit_dir(identifier)
        if not commit_dir.is_dir():
            return None
        return commit_dir
