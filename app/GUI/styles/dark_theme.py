"""
dark_theme.py - Dark theme implementation.

White components on black, the colour scheme of the classic schematic view.
"""

from .theme import BaseTheme


class DarkTheme(BaseTheme):
    """Dark theme with high-contrast colors on a dark background."""

    def __init__(self):
        super().__init__()
        self._colors = {
            "component": "#FFFFFF",  # White
            "selected": "#FF5252",  # Light red
            "background": "#000000",  # Black
            "grid": "#616161",  # Dark gray
        }
        self._pen_widths = {
            "component": 1.0,
            "selected": 1.5,
        }

    @property
    def name(self) -> str:
        return "Dark Theme"

    @property
    def is_dark(self) -> bool:
        return True
