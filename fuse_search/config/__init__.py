"""Configuration management for fuse_search."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
