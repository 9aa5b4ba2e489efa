"""
Configuration management for the JAN code encoder.
"""

from jancode.config.logging_setup import configure_logging
from jancode.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
