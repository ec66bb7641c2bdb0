"""
Shared test fixtures for the CircuiTikZ tool test suite.

Model fixtures are pure Python (no Qt dependencies). Qt-based tests run
on the offscreen platform and write QSettings to a temporary directory.
"""

import os
import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, exporters, GUI, controllers)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from models.circuit import CircuitModel
from models.component import ComponentInstance
from models.identifiers import IdentifierAllocator
from models.kinds import ComponentKind
from PyQt6.QtCore import QSettings


@pytest.fixture(autouse=True, scope="session")
def _isolated_settings(tmp_path_factory):
    """Keep QSettings writes out of the real user configuration."""
    settings_dir = tmp_path_factory.mktemp("settings")
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    for fmt in (QSettings.Format.NativeFormat, QSettings.Format.IniFormat):
        QSettings.setPath(fmt, QSettings.Scope.UserScope, str(settings_dir))


@pytest.fixture
def allocator():
    return IdentifierAllocator()


@pytest.fixture
def amplifier_circuit():
    """
    Common-emitter style sketch:

    R1 wire from (0,0) to (2,0), NPN Q1 at (3,2), GND at (3,4),
    op-amp opamp1 at (6,2), NPN Q2 at (8,2)
    """
    model = CircuitModel()
    alloc = model.allocator
    model.append(ComponentInstance.create_segment((0, 0), (2, 0), ComponentKind.RESISTOR, alloc))
    model.append(ComponentInstance.create_point((3, 2), ComponentKind.NPN, alloc))
    model.append(ComponentInstance.create_point((3, 4), ComponentKind.GROUND, alloc))
    model.append(ComponentInstance.create_point((6, 2), ComponentKind.OPAMP_3T, alloc))
    model.append(ComponentInstance.create_point((8, 2), ComponentKind.NPN, alloc))
    return model
