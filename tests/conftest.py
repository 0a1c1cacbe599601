# tests/conftest.py

import pytest

from calendarsystems._bootstrap import build_registry


@pytest.fixture
def registry():
    """A fresh registry with every built-in calendar, isolated from the process default."""
    return build_registry()
