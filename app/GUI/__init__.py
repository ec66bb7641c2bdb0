"""
Qt view layer: primitive renderers, styles and the export options dialog.
"""

from .circuitikz_options_dialog import CircuiTikZOptionsDialog
from .renderers import render_document, render_preview

__all__ = [
    'CircuiTikZOptionsDialog',
    'render_document',
    'render_preview',
]
