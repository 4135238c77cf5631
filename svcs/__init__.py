"""SVCS - a minimal local version control system.

Tracks a chosen set of files, snapshots them under a content-derived
identifier, and restores any earlier snapshot.
"""

__version__ = "1.0.0"
