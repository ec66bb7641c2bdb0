"""
light_theme.py - Default light theme implementation.
"""

from .theme import BaseTheme


class LightTheme(BaseTheme):
    """Light theme - the default application theme."""

    def __init__(self):
        super().__init__()
        self._colors = {
            'component': '#000000',    # Black
            'selected': '#D32F2F',     # Red
            'background': '#FFFFFF',   # White
            'grid': '#9E9E9E',         # Gray
        }
        self._pen_widths = {
            'component': 1.0,
            'selected': 1.5,
        }

    @property
    def name(self) -> str:
        return "Light Theme"
