"""
Pure Python data models for the CircuiTikZ tool.

This package contains Qt-free data classes for the component catalog,
placed instances and the circuit document.
"""

from .circuit import CircuitModel
from .component import ComponentInstance, create_instance, format_number
from .edit_result import Cancelled, Deleted, EditResult, Placed
from .exceptions import CircuitikzToolError, InvalidKind, InvalidState, MarkupError
from .identifiers import IdentifierAllocator
from .kinds import (
    KIND_SPECS,
    ComponentKind,
    EditCommand,
    IdentifierFamily,
    KindClass,
    KindSpec,
)

__all__ = [
    "CircuitModel",
    "ComponentInstance",
    "create_instance",
    "format_number",
    "Placed",
    "Deleted",
    "Cancelled",
    "EditResult",
    "CircuitikzToolError",
    "InvalidKind",
    "InvalidState",
    "MarkupError",
    "IdentifierAllocator",
    "KIND_SPECS",
    "ComponentKind",
    "EditCommand",
    "IdentifierFamily",
    "KindClass",
    "KindSpec",
]
