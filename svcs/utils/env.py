"""Environment utilities for SVCS."""

from __future__ import annotations

import os
from pathlib import Path


DEBUG_ENV = "SVCS_DEBUG"
PROJECT_ROOT_ENV = "SVCS_PROJECT_ROOT"


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.
    
    Returns:
        True if SVCS_DEBUG is set to a truthy value
    """
    val = os.environ.get(DEBUG_ENV, "").lower()
    return val in ("1", "true", "yes", "on")


def enable_debug_mode() -> None:
    """Turn on debug output for the rest of this process."""
    os.environ[DEBUG_ENV] = "1"


def get_project_root() -> Path:
    """Get the working root that tracked paths resolve against.
    
    Returns:
        SVCS_PROJECT_ROOT when set, otherwise the current directory
    """
    val = os.environ.get(PROJECT_ROOT_ENV)
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    return Path.cwd()
