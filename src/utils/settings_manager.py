"""
Settings Manager - Handles application settings persistence using QSettings
"""

from PySide6.QtCore import QSettings, QByteArray


class SettingsManager:
    """Manages application settings using QSettings"""

    ORGANIZATION = "Polygon Tools"
    APPLICATION = "Polygon Edge Calculator"

    # Settings keys
    KEY_ALLOW_LENIENT_SYNTAX = "parser/allow_lenient_syntax"
    KEY_WINDOW_GEOMETRY = "window/geometry"

    def __init__(self, settings=None):
        """
        Initialize the settings manager

        Args:
            settings: Optional QSettings instance (defaults to the application store)
        """
        if settings is None:
            settings = QSettings(SettingsManager.ORGANIZATION, SettingsManager.APPLICATION)
        self.settings = settings

    def allow_lenient_syntax(self):
        """
        Whether unquoted object keys are accepted when strict JSON fails

        Returns:
            bool: True unless the user switched the relaxed syntax off
        """
        return self.settings.value(self.KEY_ALLOW_LENIENT_SYNTAX, True, type=bool)

    def set_allow_lenient_syntax(self, enabled):
        self.settings.setValue(self.KEY_ALLOW_LENIENT_SYNTAX, bool(enabled))
        self.settings.sync()

    def get_window_geometry(self):
        """
        Get the saved window geometry

        Returns:
            QByteArray or None: Geometry blob from QWidget.saveGeometry()
        """
        geometry = self.settings.value(self.KEY_WINDOW_GEOMETRY, None)
        if isinstance(geometry, QByteArray) and not geometry.isEmpty():
            return geometry
        return None

    def set_window_geometry(self, geometry):
        self.settings.setValue(self.KEY_WINDOW_GEOMETRY, geometry)
        self.settings.sync()

    def clear(self):
        """Remove all stored settings and revert to defaults"""
        self.settings.clear()
        self.settings.sync()


# Global instance
_settings_manager = None


def get_settings_manager():
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
