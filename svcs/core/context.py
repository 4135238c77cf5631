"""On-disk layout of an SVCS store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..utils.fs import ensure_dir, ensure_file


VCS_DIR_NAME = "vcs"
COMMITS_DIR_NAME = "commits"
CONFIG_FILE_NAME = "config.txt"
INDEX_FILE_NAME = "index.txt"
LOG_FILE_NAME = "log.txt"


@dataclass(frozen=True, slots=True)
class StoreContext:
    """Resolved paths for one invocation.

    Built once and passed explicitly into every store and handler.
    """
    root: Path
    vcs_dir: Path
    commits_dir: Path
    config_file: Path
    index_file: Path
    log_file: Path

    @classmethod
    def for_root(cls, root: Path | str) -> StoreContext:
        """Compute the layout under ``root`` without touching the disk."""
        root_path = Path(root)
        vcs_dir = root_path / VCS_DIR_NAME
        return cls(
            root=root_path,
            vcs_dir=vcs_dir,
            commits_dir=vcs_dir / COMMITS_DIR_NAME,
            config_file=vcs_dir / CONFIG_FILE_NAME,
            index_file=vcs_dir / INDEX_FILE_NAME,
            log_file=vcs_dir / LOG_FILE_NAME,
        )

    @classmethod
    def open(cls, root: Path | str) -> StoreContext:
        """Compute the layout under ``root`` and create whatever is missing.
        
        Args:
            root: Working directory that tracked paths resolve against
            
        Returns:
            StoreContext whose directories and files all exist
        """
        context = cls.for_root(root)
        ensure_dir(context.commits_dir)
        for path in (context.config_file, context.index_file, context.log_file):
            ensure_file(path)
        return context

    def commit_dir(self, identifier: str) -> Path:
        return self.commits_dir / identifier

    def in_store(self, path: Path | str) -> bool:
        """Check whether ``path`` is the ``vcs/`` directory or anything under it.

        Both the path as written and its symlink-resolved target are checked.
        """
        pairs = (
            (Path(os.path.abspath(path)), Path(os.path.abspath(self.vcs_dir))),
            (Path(path).resolve(), self.vcs_dir.resolve()),
        )
        for candidate, vcs_dir in pairs:
            if candidate == vcs_dir or vcs_dir in candidate.parents:
                return True
        return False
