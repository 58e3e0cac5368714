"""Status settings loading."""

from .app import StatusSettings, get_settings


__all__ = ["StatusSettings", "get_settings"]
