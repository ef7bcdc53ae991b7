# tests/conftest.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Proptab tests.

The configuration handles:
- Python path setup for module imports
- Fresh parsers and registries per test
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages import before any test runs.

    Yields:
        None: Control to test execution
    """
    try:
        import connectives
        import semantics
        import syntax
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def registry():
    """Fresh registry with the default connectives."""
    from connectives import ConnectiveRegistry

    return ConnectiveRegistry()


@pytest.fixture
def parser():
    """Fresh parser with the default connectives."""
    from syntax import FormulaParser

    return FormulaParser()


@pytest.fixture
def tautology_formula():
    """Weakening axiom, true in every row."""
    return "P→(Q→P)"


@pytest.fixture
def contradiction_formula():
    return "P∧¬P"
