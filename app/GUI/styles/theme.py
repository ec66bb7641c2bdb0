"""
theme.py - Theme protocol and base class.

Defines the contract that all themes must fulfill.
"""

from typing import Dict, Protocol

from PyQt6.QtGui import QBrush, QColor, QFont, QPen

from .constants import LABEL_FONT_FAMILY, LABEL_FONT_SIZE


class ThemeProtocol(Protocol):
    """Protocol defining the theme interface."""

    @property
    def name(self) -> str:
        """Theme name for display."""
        ...

    def color(self, key: str) -> QColor:
        """Get a QColor by semantic key."""
        ...

    def color_hex(self, key: str) -> str:
        """Get a hex color string by semantic key."""
        ...

    def pen(self, key: str) -> QPen:
        """Get a pre-configured QPen by semantic key."""
        ...

    def brush(self, key: str) -> QBrush:
        """Get a pre-configured QBrush by semantic key."""
        ...

    def font(self, key: str) -> QFont:
        """Get a pre-configured QFont by semantic key."""
        ...


class BaseTheme:
    """Base class for themes with shared functionality.

    Colour keys used by the schematic view:
        component  - stroke of placed instances and previews
        selected   - stroke of the selected instance
        background - canvas fill and the inside of symbol bodies
        grid       - grid dots and the origin caption
    """

    def __init__(self):
        self._colors: Dict[str, str] = {}  # key -> hex string
        self._pen_widths: Dict[str, float] = {}  # key -> stroke width
        self._fonts: Dict[str, Dict] = {
            "label": {"family": LABEL_FONT_FAMILY, "pixel_size": LABEL_FONT_SIZE},
        }

    @property
    def name(self) -> str:
        return "Base Theme"

    @property
    def is_dark(self) -> bool:
        return False

    def color(self, key: str) -> QColor:
        """Get QColor by key. Falls back to magenta if not found (debug)."""
        return QColor(self.color_hex(key))

    def color_hex(self, key: str) -> str:
        """Get hex color string by key."""
        return self._colors.get(key, "#FF00FF")

    def pen(self, key: str) -> QPen:
        """Get a pen in the colour of key."""
        pen = QPen(self.color(key), self._pen_widths.get(key, 1.0))
        pen.setCosmetic(True)
        return pen

    def brush(self, key: str) -> QBrush:
        """Get a solid brush in the colour of key."""
        return QBrush(self.color(key))

    def font(self, key: str) -> QFont:
        """Get QFont by key."""
        config = self._fonts.get(key, {})
        font = QFont()
        if "family" in config:
            font.setFamily(config["family"])
        if "pixel_size" in config:
            font.setPixelSize(config["pixel_size"])
        return font
