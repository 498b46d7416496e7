"""
Pytest configuration for the lazy views tests.

This file ensures that the project root is in the Python path
so that test files can import views, predicates, functions, models and utils.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

from models import reset_default_options


@pytest.fixture
def names():
    """Fresh backing list for every test"""
    return ["John", "Jane", "Adam", "Tom"]


@pytest.fixture(autouse=True)
def default_options():
    """Restore module default options around each test"""
    reset_default_options()
    yield
    reset_default_options()
