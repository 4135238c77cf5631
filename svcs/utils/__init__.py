"""Utility modules for SVCS."""

from .fs import ensure_dir, ensure_file, read_lines, read_text, write_text
from .env import enable_debug_mode, get_project_root, is_debug_mode
from .log import log_debug

__all__ = [
    "ensure_dir",
    "ensure_file",
    "read_lines",
    "read_text",
    "write_text",
    "enable_debug_mode",
    "get_project_root",
    "is_debug_mode",
    "log_debug",
]
