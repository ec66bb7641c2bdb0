"""
Styles module - Centralized styling for the schematic view.

Usage:
    from GUI.styles import ZOOM_MIN, theme_manager

    theme = theme_manager.current_theme
    color = theme.color('component')
    pen = theme.pen('selected')
    font = theme.font('label')

    from GUI.styles import DarkTheme
    theme_manager.set_theme(DarkTheme())
"""

from .constants import (CURSOR_MARKER_SIZE, GRID_DOT_DIVISIONS,
                        LABEL_FONT_FAMILY, LABEL_FONT_SIZE, LABEL_PADDING,
                        ORIGIN_MARKER_SIZE, ZOOM_MIN, ZOOM_STEP)
from .dark_theme import DarkTheme
from .light_theme import LightTheme
from .theme import BaseTheme, ThemeProtocol
from .theme_manager import THEME_KEYS, ThemeManager, theme_manager

__all__ = [
    # Constants
    "GRID_DOT_DIVISIONS",
    "ZOOM_MIN",
    "ZOOM_STEP",
    "ORIGIN_MARKER_SIZE",
    "CURSOR_MARKER_SIZE",
    "LABEL_FONT_FAMILY",
    "LABEL_FONT_SIZE",
    "LABEL_PADDING",
    # Theme system
    "ThemeProtocol",
    "BaseTheme",
    "ThemeManager",
    "theme_manager",
    "THEME_KEYS",
    "LightTheme",
    "DarkTheme",
]
