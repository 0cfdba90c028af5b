"""
Configuration Module

Client configuration settings and utilities.
"""

from wsdlsoap.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
