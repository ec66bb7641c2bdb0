"""Tests for the CircuiTikZ export options dialog and its persisted settings."""

import pytest
from GUI.circuitikz_options_dialog import (
    DEFAULT_OPTIONS,
    SETTINGS_PREFIX,
    CircuiTikZOptionsDialog,
    load_export_options,
    save_export_options,
)
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QCheckBox


@pytest.fixture
def settings(tmp_path):
    """An ini-backed QSettings private to one test."""
    return QSettings(str(tmp_path / "options.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def dialog(qtbot, settings):
    dlg = CircuiTikZOptionsDialog(settings=settings)
    qtbot.addWidget(dlg)
    return dlg


class TestSettingsHelpers:
    def test_defaults_when_unset(self, settings):
        assert load_export_options(settings) == DEFAULT_OPTIONS
        assert all(DEFAULT_OPTIONS.values())

    def test_save_then_load(self, settings):
        options = {"wrap_in_figure": False, "american_style": True, "placement_hint": False}
        save_export_options(options, settings)
        settings.sync()
        assert load_export_options(settings) == options

    def test_keys_use_prefix(self, settings):
        save_export_options(DEFAULT_OPTIONS, settings)
        assert sorted(settings.allKeys()) == sorted(
            f"{SETTINGS_PREFIX}{name}" for name in DEFAULT_OPTIONS
        )

    def test_reads_ini_strings(self, tmp_path):
        path = tmp_path / "written.ini"
        path.write_text("[circuitikz]\nwrap_in_figure=false\namerican_style=true\n")
        options = load_export_options(QSettings(str(path), QSettings.Format.IniFormat))
        assert options == {"wrap_in_figure": False, "american_style": True,
                           "placement_hint": True}


class TestDialog:
    def test_has_three_checkboxes(self, dialog):
        assert len(dialog.findChildren(QCheckBox)) == 3

    def test_defaults_checked(self, dialog):
        assert dialog.get_options() == DEFAULT_OPTIONS

    def test_get_options_reflects_checkboxes(self, dialog):
        dialog.american_style_cb.setChecked(False)
        dialog.placement_hint_cb.setChecked(False)
        assert dialog.get_options() == {
            "wrap_in_figure": True,
            "american_style": False,
            "placement_hint": False,
        }

    def test_accept_persists(self, dialog, settings, qtbot):
        dialog.wrap_in_figure_cb.setChecked(False)
        dialog._on_accept()
        assert load_export_options(settings)["wrap_in_figure"] is False

        reopened = CircuiTikZOptionsDialog(settings=settings)
        qtbot.addWidget(reopened)
        assert not reopened.wrap_in_figure_cb.isChecked()
        assert reopened.american_style_cb.isChecked()

    def test_reject_does_not_persist(self, dialog, settings):
        dialog.american_style_cb.setChecked(False)
        dialog.reject()
        assert load_export_options(settings)["american_style"] is True
