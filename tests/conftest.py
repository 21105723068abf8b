"""
Pytest configuration and fixtures for sandwich kitchen tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sandwich.core.interpreters import crazy_interpreter, real_interpreter
from sandwich.domain.models import Bread, Component, SandwichBody


@pytest.fixture(autouse=True)
def clean_sandwich_env(monkeypatch):
    """Keep developer overrides out of the tests."""
    for key in ("SANDWICH_CONFIG", "SANDWICH_INTERPRETER", "SANDWICH_RECIPE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def toast_tomato():
    """A one-component body on toast."""
    return SandwichBody(bottom=Bread.TOAST, components=(Component.TOMATO,))


@pytest.fixture
def real_tech():
    return real_interpreter()


@pytest.fixture
def crazy_tech():
    return crazy_interpreter()


@pytest.fixture
def call_log():
    """Records operation calls as (op_name, argument) tuples."""
    return []
