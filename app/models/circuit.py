"""
CircuitModel - the circuit document.

An ordered list of component instances together with the identifier
allocator that numbered them. List order is insertion order, drawing
order and the index space used for selection.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .component import ComponentInstance
from .identifiers import IdentifierAllocator
from .kinds import is_fet

logger = logging.getLogger(__name__)


@dataclass
class CircuitModel:
    """Ordered collection of placed instances plus their allocator."""

    components: list[ComponentInstance] = field(default_factory=list)
    allocator: IdentifierAllocator = field(default_factory=IdentifierAllocator)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[ComponentInstance]:
        return iter(self.components)

    def __getitem__(self, index: int) -> ComponentInstance:
        return self.components[index]

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.components)

    def append(self, instance: ComponentInstance) -> None:
        self.components.append(instance)

    def remove_at(self, index: int) -> Optional[ComponentInstance]:
        """
        Remove and return the instance at index.

        Out-of-range indices (including negative ones) are ignored and
        return None. The allocator is not rolled back.
        """
        if not self._in_range(index):
            logger.debug("remove_at(%d) ignored, document has %d instances",
                         index, len(self.components))
            return None
        return self.components.pop(index)

    def replace_at(self, index: int, instance: ComponentInstance) -> bool:
        """Replace the instance at index. Returns False if out of range."""
        if not self._in_range(index):
            return False
        self.components[index] = instance
        return True

    def clear(self) -> None:
        """Remove every instance and reset the identifier counters."""
        self.components.clear()
        self.allocator.reset_all()

    def summaries(self) -> list[str]:
        return [instance.summary() for instance in self.components]

    def contains_fet(self) -> bool:
        return any(is_fet(instance.kind) for instance in self.components)

    def closest_index(self, point) -> Optional[int]:
        """
        Return the index of the instance nearest to a grid point.

        Distance is measured to a point instance's position or to a
        segment's midpoint. Ties keep the earliest instance. Returns
        None for an empty document.
        """
        px, py = point
        best_index = None
        best_distance = math.inf
        for index, instance in enumerate(self.components):
            x, y = instance.anchor_point
            distance = math.hypot(x - px, y - py)
            if distance < best_distance:
                best_index = index
                best_distance = distance
        return best_index
