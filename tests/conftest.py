"""
Pytest configuration and shared fixtures.
"""
import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from yplustool.model.calculator import DEFAULT_INPUTS


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by all Qt tests"""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def default_texts():
    """Default placeholder texts of the form"""
    return dict(DEFAULT_INPUTS)


@pytest.fixture
def store(qapp):
    from yplustool.app.state import CalculatorStore
    return CalculatorStore()
