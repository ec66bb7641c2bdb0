"""
Result of an instance editing session.

An editing dialog hands back exactly one of these instead of encoding
delete/cancel as fake component kinds.
"""

from dataclasses import dataclass
from typing import Union

from .component import ComponentInstance


@dataclass(frozen=True)
class Placed:
    """The edit produced a (new or modified) instance."""

    instance: ComponentInstance


@dataclass(frozen=True)
class Deleted:
    """The user asked for the edited instance to be removed."""


@dataclass(frozen=True)
class Cancelled:
    """The edit was abandoned; the document stays unchanged."""


EditResult = Union[Placed, Deleted, Cancelled]
