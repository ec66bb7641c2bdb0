"""
CircuitController - Collaborator-facing operations on a circuit document.

This module contains no Qt dependencies. It manages the CircuitModel
and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from exporters.circuitikz_exporter import generate
from exporters.markup_codec import dump_document, load_document
from models.circuit import CircuitModel
from models.component import ComponentInstance
from models.edit_result import Cancelled, Deleted, EditResult, Placed

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for placing, editing and exporting components.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        component_added (ComponentInstance) - An instance was appended
        component_removed (int) - The instance at this index was removed
        component_replaced (tuple[int, ComponentInstance]) - An edit replaced an instance
        component_edited (tuple[int, ComponentInstance]) - Label or template changed
        selection_changed (int | None) - The selected index changed
        circuit_cleared (None) - The entire circuit was cleared
        model_loaded (int) - Markup loaded; data is the skipped record count
    """

    def __init__(self, model: Optional[CircuitModel] = None):
        self.model = model if model is not None else CircuitModel()
        self._observers: list[Callable[[str, Any], None]] = []
        self.selected_index: Optional[int] = None

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Placement ---

    def place_point(self, position, kind) -> ComponentInstance:
        """Create a point instance and append it to the document."""
        instance = ComponentInstance.create_point(position, kind, self.model.allocator)
        self.append(instance)
        return instance

    def place_segment(self, start, end, kind) -> ComponentInstance:
        """Create a segment instance and append it to the document."""
        instance = ComponentInstance.create_segment(start, end, kind, self.model.allocator)
        self.append(instance)
        return instance

    def append(self, instance: ComponentInstance) -> None:
        self.model.append(instance)
        self._notify("component_added", instance)

    def remove_at(self, index: int) -> Optional[ComponentInstance]:
        """
        Remove the instance at index. Out-of-range indices are ignored.

        The selection is cleared if it pointed at the removed instance
        and shifted down if it pointed past it.
        """
        removed = self.model.remove_at(index)
        if removed is None:
            return None
        if self.selected_index is not None:
            if self.selected_index == index:
                self.select(None)
            elif self.selected_index > index:
                self.select(self.selected_index - 1)
        self._notify("component_removed", index)
        return removed

    def clear(self) -> None:
        """Remove every instance and reset identifier counters."""
        self.model.clear()
        self.selected_index = None
        self._notify("circuit_cleared", None)

    def summaries(self) -> list[str]:
        return self.model.summaries()

    # --- Selection ---

    def select(self, index: Optional[int]) -> None:
        """Select an instance by index, or clear the selection with None."""
        if index is not None and not 0 <= index < len(self.model):
            logger.debug("Ignoring selection of out-of-range index %d", index)
            return
        if index != self.selected_index:
            self.selected_index = index
            self._notify("selection_changed", index)

    def closest_index(self, point) -> Optional[int]:
        return self.model.closest_index(point)

    def select_closest(self, point) -> Optional[int]:
        """Select the instance nearest to a grid point and return its index."""
        index = self.model.closest_index(point)
        self.select(index)
        return index

    # --- Label / template editing ---

    def _instance_at(self, index: Optional[int]) -> Optional[ComponentInstance]:
        if index is None or not 0 <= index < len(self.model):
            return None
        return self.model[index]

    def get_label(self, index: Optional[int] = None) -> Optional[str]:
        """Label of the instance at index (default: the selection)."""
        instance = self._instance_at(self.selected_index if index is None else index)
        return instance.label if instance is not None else None

    def get_code_template(self, index: Optional[int] = None) -> Optional[str]:
        instance = self._instance_at(self.selected_index if index is None else index)
        return instance.code_template if instance is not None else None

    def set_label(self, text: str, index: Optional[int] = None) -> bool:
        """Set the label of the instance at index (default: the selection)."""
        index = self.selected_index if index is None else index
        instance = self._instance_at(index)
        if instance is None:
            return False
        instance.set_label(text)
        self._notify("component_edited", (index, instance))
        return True

    def set_code_template(self, text: str, index: Optional[int] = None) -> bool:
        index = self.selected_index if index is None else index
        instance = self._instance_at(index)
        if instance is None:
            return False
        instance.set_code_template(text)
        self._notify("component_edited", (index, instance))
        return True

    def apply_edit_result(self, index: int, result: EditResult) -> None:
        """
        Apply the outcome of an editing dialog to the instance at index.

        Placed replaces the instance, Deleted removes it and Cancelled
        leaves the document untouched.
        """
        if isinstance(result, Placed):
            if self.model.replace_at(index, result.instance):
                self._notify("component_replaced", (index, result.instance))
        elif isinstance(result, Deleted):
            self.remove_at(index)
        elif isinstance(result, Cancelled):
            logger.debug("Edit of index %d cancelled", index)
        else:
            raise TypeError(f"Unknown edit result: {result!r}")

    # --- Codecs ---

    def to_markup(self) -> str:
        return dump_document(self.model)

    def load_markup(self, text: str) -> int:
        """Replace the document with markup text. Returns skipped records."""
        skipped = load_document(text, self.model)
        self.selected_index = None
        self._notify("model_loaded", skipped)
        return skipped

    def generate_latex(self, wrap_in_figure=True, american_style=True,
                       placement_hint=True) -> str:
        return generate(self.model, wrap_in_figure=wrap_in_figure,
                        american_style=american_style, placement_hint=placement_hint)
