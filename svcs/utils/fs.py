"""File system utilities for SVCS.

Plain text reads/writes and directory creation for the store layout. Writes
are not atomic: the store has no locking, and concurrent invocations against
the same ``vcs/`` directory can lose updates.
"""

from __future__ import annotations

from pathlib import Path


def ensure_dir(dir_path: Path | str) -> Path:
    """Ensure directory exists, creating it if necessary.
    
    Args:
        dir_path: Directory path to create
        
    Returns:
        Path object for the directory
    """
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_file(file_path: Path | str) -> Path:
    """Create an empty file if it does not exist yet."""
    path = Path(file_path)
    path.touch(exist_ok=True)
    return path


def read_text(file_path: Path | str) -> str:
    """Read a UTF-8 text file, treating a missing file as empty."""
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def write_text(file_path: Path | str, content: str) -> None:
    """Replace a text file's content in place."""
    Path(file_path).write_text(content, encoding="utf-8")


def read_lines(file_path: Path | str) -> list[str]:
    """Read non-empty lines of a text file, in order."""
    return [line for line in read_text(file_path).splitlines() if line]
