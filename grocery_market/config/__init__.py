"""
Configuration Module

Application configuration settings.
"""

from grocery_market.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
