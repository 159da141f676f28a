"""
Shared utilities: settings and logging.
"""

from modelkit.utils.config import Settings, get_settings, settings
from modelkit.utils.logger import setup_logger, log_error

__all__ = [
    'Settings',
    'get_settings',
    'settings',
    'setup_logger',
    'log_error',
]
