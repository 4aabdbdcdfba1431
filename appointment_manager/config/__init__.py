"""
Configuration Module

Application configuration settings.
"""

from appointment_manager.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
