"""
FileController - Handles circuit file I/O and recent-file tracking.

File dialog interaction is the responsibility of the view layer.
Recent files tracking uses QSettings for cross-session persistence.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from exporters.circuitikz_exporter import generate, write_latex
from exporters.markup_codec import dump_document, load_document
from models.circuit import CircuitModel
from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)

MAX_RECENT_FILES = 10


class FileController:
    """
    Manages circuit file I/O.

    Saves and loads circuit documents as markup records and exports
    CircuiTikZ code. Tracks the current file path for quick-save.
    """

    def __init__(self, model: Optional[CircuitModel] = None, circuit_ctrl=None):
        if model is None and circuit_ctrl is not None:
            model = circuit_ctrl.model
        self.model = model if model is not None else CircuitModel()
        self.circuit_ctrl = circuit_ctrl
        self.current_file: Optional[Path] = None

    def new_circuit(self) -> None:
        """Clear the circuit and reset file state."""
        if self.circuit_ctrl:
            self.circuit_ctrl.clear()
        else:
            self.model.clear()
        self.current_file = None

    def save_circuit(self, filepath) -> None:
        """
        Save the circuit as markup records.

        Raises:
            OSError: If the file cannot be written.
        """
        filepath = Path(filepath)
        with open(filepath, "w") as f:
            f.write(dump_document(self.model))
        self.current_file = filepath
        self.add_recent_file(filepath)
        logger.info("Saved %d components to %s", len(self.model), filepath)

    def load_circuit(self, filepath) -> int:
        """
        Load a circuit from a markup file.

        Updates the model in place (preserving the reference so views
        stay connected). Unparsable records are skipped.

        Returns:
            The number of skipped records.

        Raises:
            OSError: If the file cannot be read.
        """
        filepath = Path(filepath)
        with open(filepath, "r") as f:
            text = f.read()

        if self.circuit_ctrl:
            skipped = self.circuit_ctrl.load_markup(text)
        else:
            skipped = load_document(text, self.model)

        self.current_file = filepath
        self.add_recent_file(filepath)
        logger.info("Loaded %d components from %s", len(self.model), filepath)
        return skipped

    def export_latex(self, filepath, wrap_in_figure=True, american_style=True,
                     placement_hint=True) -> str:
        """
        Write CircuiTikZ code for the circuit to filepath.

        Returns:
            The generated code.

        Raises:
            OSError: If the file cannot be written.
        """
        content = generate(self.model, wrap_in_figure=wrap_in_figure,
                           american_style=american_style, placement_hint=placement_hint)
        write_latex(content, filepath)
        logger.info("Exported CircuiTikZ code to %s", filepath)
        return content

    def has_file(self) -> bool:
        """Check if there's a current file path set."""
        return self.current_file is not None

    def get_window_title(self, base: str = "CircuiTikZ Tool") -> str:
        """Build window title including current filename."""
        if self.current_file:
            return f"{base} - {self.current_file.name}"
        return base

    def get_recent_files(self) -> List[str]:
        """
        Get list of recently opened files from QSettings.

        Returns:
            List of file paths (most recent first), with non-existent files removed.
        """
        settings = QSettings("CircuitikzTool", "CircuiTikZ Tool")
        recent = settings.value("file/recent_files", [])

        # QSettings may return a bare string for a single entry
        if isinstance(recent, str):
            recent = [recent]
        if not isinstance(recent, list):
            recent = []

        existing = [f for f in recent if os.path.exists(f)]
        if len(existing) != len(recent):
            settings.setValue("file/recent_files", existing)

        return existing

    def add_recent_file(self, filepath: Path) -> None:
        """Move filepath to the front of the recent files list."""
        filepath_str = str(Path(filepath).absolute())
        recent = self.get_recent_files()

        if filepath_str in recent:
            recent.remove(filepath_str)
        recent.insert(0, filepath_str)
        recent = recent[:MAX_RECENT_FILES]

        settings = QSettings("CircuitikzTool", "CircuiTikZ Tool")
        settings.setValue("file/recent_files", recent)

    def clear_recent_files(self) -> None:
        """Clear the recent files list."""
        settings = QSettings("CircuitikzTool", "CircuiTikZ Tool")
        settings.setValue("file/recent_files", [])
