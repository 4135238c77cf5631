"""Core modules for SVCS."""

from .checkout import CheckoutEngine
from .commit_store import CommitStore
from .context import StoreContext
from .hasher import TrackedFile, compute_identifier
from .index_store import IndexStore
from .log_store import LogEntry, LogStore
from .results import CommandResult, Status

__all__ = [
    "CheckoutEngine",
    "CommitStore",
    "StoreContext",
    "TrackedFile",
    "compute_identifier",
    "IndexStore",
    "LogEntry",
    "LogStore",
    "CommandResult",
    "Status",
]
