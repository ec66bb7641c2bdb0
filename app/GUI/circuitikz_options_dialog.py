"""Dialog for configuring CircuiTikZ export options."""

from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import (QCheckBox, QDialog, QDialogButtonBox, QGroupBox,
                             QVBoxLayout)

SETTINGS_PREFIX = "circuitikz/"

# Option name -> default; names match the keyword arguments of generate()
DEFAULT_OPTIONS = {
    "wrap_in_figure": True,
    "american_style": True,
    "placement_hint": True,
}


def _default_settings():
    return QSettings("CircuitikzTool", "CircuiTikZ Tool")


def _as_bool(value, default):
    if value is None:
        return default
    return value == "true" or value is True


def load_export_options(settings=None):
    """Return the persisted export options, falling back to the defaults."""
    settings = settings or _default_settings()
    return {
        name: _as_bool(settings.value(f"{SETTINGS_PREFIX}{name}"), default)
        for name, default in DEFAULT_OPTIONS.items()
    }


def save_export_options(options, settings=None):
    """Persist export options under the circuitikz/ prefix."""
    settings = settings or _default_settings()
    for name in DEFAULT_OPTIONS:
        settings.setValue(f"{SETTINGS_PREFIX}{name}", bool(options[name]))


class CircuiTikZOptionsDialog(QDialog):
    """Options dialog for CircuiTikZ LaTeX export."""

    def __init__(self, parent=None, settings=None):
        super().__init__(parent)
        self._settings = settings or _default_settings()
        self.setWindowTitle("CircuiTikZ Export Options")
        self.setMinimumWidth(350)
        self._build_ui()
        self._restore_settings()

    def _build_ui(self):
        layout = QVBoxLayout(self)

        # --- Output group ---
        output_group = QGroupBox("Output Format")
        output_layout = QVBoxLayout()

        self.wrap_in_figure_cb = QCheckBox("Wrap in figure environment")
        self.wrap_in_figure_cb.setChecked(True)
        self.wrap_in_figure_cb.setToolTip(
            "Checked: wraps the circuit in a centred figure with a caption.\n"
            "Unchecked: generates only the circuitikz environment block."
        )
        output_layout.addWidget(self.wrap_in_figure_cb)

        self.placement_hint_cb = QCheckBox("Use [H] placement")
        self.placement_hint_cb.setChecked(True)
        output_layout.addWidget(self.placement_hint_cb)

        output_group.setLayout(output_layout)
        layout.addWidget(output_group)

        # --- Style group ---
        style_group = QGroupBox("Component Style")
        style_layout = QVBoxLayout()

        self.american_style_cb = QCheckBox("American style components")
        self.american_style_cb.setChecked(True)
        self.american_style_cb.setToolTip(
            "American: zigzag resistors, coil inductors\nEuropean: rectangle resistors"
        )
        style_layout.addWidget(self.american_style_cb)

        style_group.setLayout(style_layout)
        layout.addWidget(style_group)

        # --- Buttons ---
        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _on_accept(self):
        self._save_settings()
        self.accept()

    def get_options(self):
        """Return the selected options as a dict suitable for generate()."""
        return {
            "wrap_in_figure": self.wrap_in_figure_cb.isChecked(),
            "american_style": self.american_style_cb.isChecked(),
            "placement_hint": self.placement_hint_cb.isChecked(),
        }

    def _save_settings(self):
        save_export_options(self.get_options(), self._settings)

    def _restore_settings(self):
        options = load_export_options(self._settings)
        self.wrap_in_figure_cb.setChecked(options["wrap_in_figure"])
        self.american_style_cb.setChecked(options["american_style"])
        self.placement_hint_cb.setChecked(options["placement_hint"])
