"""
Controllers for the CircuiTikZ tool.

Controllers sit between views and the Qt-free models. They own the
document operations and notify views through observer callbacks.
"""

from .circuit_controller import CircuitController
from .file_controller import FileController

__all__ = ["CircuitController", "FileController"]
