"""Core infrastructure module.

Settings and logging shared by the client and the resource services.
"""

from .config import Settings, get_settings, get_global_settings
from .logging import setup_logging, get_logger

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Logging
    "setup_logging",
    "get_logger",
]
