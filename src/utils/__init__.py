"""
Utils package - Utility modules for the Polygon Edge Calculator
"""

from .general_utils import (
    APPLICATION_NAME,
    APPLICATION_VERSION,
    ORGANIZATION_NAME,
    get_version_info,
    get_application_title,
    get_about_text
)
from .settings_manager import SettingsManager, get_settings_manager

__all__ = [
    'APPLICATION_NAME',
    'APPLICATION_VERSION',
    'ORGANIZATION_NAME',
    'get_version_info',
    'get_application_title',
    'get_about_text',
    'SettingsManager',
    'get_settings_manager'
]
