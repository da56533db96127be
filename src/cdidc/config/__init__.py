"""Configuration module."""

from cdidc.config.settings import Settings, default_browser_command, get_settings

__all__ = ["Settings", "default_browser_command", "get_settings"]
