"""
constants.py - Centralized constants for schematic drawing.

Grid sizes are in device pixels per grid unit. The grid size doubles as
the zoom level of the schematic view.
"""

from models.geometry import LABEL_FONT_SIZE, LABEL_PADDING

# Grid settings
GRID_DOT_DIVISIONS = 2         # Grid dots drawn every half grid unit

# Zoom settings
ZOOM_MIN = 10                  # Smallest grid size the view zooms out to
ZOOM_STEP = 1                  # Grid size change per wheel notch

# Markers
ORIGIN_MARKER_SIZE = 5
CURSOR_MARKER_SIZE = 5

# Labels
LABEL_FONT_FAMILY = "Dialog"

__all__ = [
    "GRID_DOT_DIVISIONS",
    "ZOOM_MIN",
    "ZOOM_STEP",
    "ORIGIN_MARKER_SIZE",
    "CURSOR_MARKER_SIZE",
    "LABEL_FONT_FAMILY",
    "LABEL_FONT_SIZE",
    "LABEL_PADDING",
]
