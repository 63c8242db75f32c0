"""Configuration for the capstone companion."""

from capstone.config.settings import PROJECT_ROOT, Settings, settings

__all__ = ["PROJECT_ROOT", "Settings", "settings"]
