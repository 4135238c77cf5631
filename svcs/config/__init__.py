"""Configuration management for SVCS."""

from .store import ConfigStore

__all__ = [
    "ConfigStore",
]
