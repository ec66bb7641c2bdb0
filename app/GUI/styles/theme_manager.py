"""
theme_manager.py - Singleton theme manager.

Provides global access to the current theme and enables runtime theme
switching with observer notification.
"""

import logging
from typing import Callable, List, Optional

from .dark_theme import DarkTheme
from .light_theme import LightTheme
from .theme import ThemeProtocol

logger = logging.getLogger(__name__)

THEME_KEYS = ("light", "dark")


class ThemeManager:
    """
    Singleton manager for application themes.

    Usage:
        from GUI.styles import theme_manager

        theme = theme_manager.current_theme
        color = theme.color('component')

        theme_manager.set_theme(DarkTheme())
        theme_manager.on_theme_changed(my_callback)
    """

    _instance: Optional["ThemeManager"] = None
    _theme: ThemeProtocol
    _listeners: List[Callable[[ThemeProtocol], None]]

    def __new__(cls) -> "ThemeManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._theme = LightTheme()
            cls._instance._listeners = []
        return cls._instance

    @property
    def current_theme(self) -> ThemeProtocol:
        """Get the current theme."""
        return self._theme

    def set_theme(self, theme: ThemeProtocol) -> None:
        """Set a new theme and notify all listeners."""
        self._theme = theme
        self._notify_listeners()

    def on_theme_changed(self, callback: Callable[[ThemeProtocol], None]) -> None:
        """Register a callback to be notified when the theme changes."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[ThemeProtocol], None]) -> None:
        """Remove a previously registered callback."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self) -> None:
        """Notify all registered listeners of theme change."""
        for callback in self._listeners:
            try:
                callback(self._theme)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying theme listener: %s", e)

    def set_theme_by_key(self, key: str) -> None:
        """Set theme by key string ("light" or "dark")."""
        if key not in THEME_KEYS:
            logger.warning("Unknown theme %r, falling back to light", key)
        if key == "dark":
            self.set_theme(DarkTheme())
        else:
            self.set_theme(LightTheme())

    def get_theme_key(self) -> str:
        """Return the key for the current theme."""
        return "dark" if self._theme.is_dark else "light"


# Global singleton instance
theme_manager = ThemeManager()
