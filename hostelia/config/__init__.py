"""
Configuration package for the Hostelia dashboard service.

Holds environment settings and the logging setup.
"""

from hostelia.config.logging import setup_logging
from hostelia.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings', 'setup_logging']
