"""Configuration module for ephemeral containers."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
