"""Core: config and logging bootstrap.

Single place for settings.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
