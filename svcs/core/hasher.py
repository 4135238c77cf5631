"""Content hashing for commit identifiers.

A commit identifier is the SHA-256 of every tracked file's name followed by
its content, concatenated in index order. Same names, same bytes, same order
give the same identifier; that is what deduplicates commits.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class TrackedFile:
    """A tracked file as read from the working directory."""
    name: str
    content: bytes


def compute_identifier(files: Iterable[TrackedFile]) -> str:
    """Derive the commit identifier for an ordered set of files.
    
    Args:
        files: Tracked files in index order
        
    Returns:
        64-character lowercase hex digest
    """
    digest = hashlib.sha256()
    for tracked in files:
        digest.update(tracked.name.encode("utf-8"))
        digest.update(tracked.content)
    return digest.hexdigest()
