"""
Petals Around the Rose Configuration.

Environment variables, settings, and logging configuration.
"""

from petals.config.logging import configure_logging
from petals.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
