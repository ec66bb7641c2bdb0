"""
Per-family identifier allocation.

Each identifier family (transistors, op-amps, transformers, buffers,
blocks, mixers) has its own counter starting at 1. An allocator belongs
to a single circuit document; deleting an instance never gives its
identifier back.
"""

import logging

from .kinds import IdentifierFamily

logger = logging.getLogger(__name__)

FIRST_IDENTIFIER = 1


class IdentifierAllocator:
    """Hands out monotonically increasing identifiers per family."""

    def __init__(self):
        self._counters = {family: FIRST_IDENTIFIER for family in IdentifierFamily}

    def next(self, family: IdentifierFamily) -> int:
        """Return the current value for a family, then advance it."""
        value = self._counters[family]
        self._counters[family] = value + 1
        logger.debug("Allocated %s identifier %d", family.value, value)
        return value

    def peek(self, family: IdentifierFamily) -> int:
        """Return the value the next call to next() will produce."""
        return self._counters[family]

    def reset_all(self) -> None:
        """Reset every family counter back to 1."""
        for family in self._counters:
            self._counters[family] = FIRST_IDENTIFIER
