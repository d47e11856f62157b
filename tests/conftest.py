"""
Module: conftest.py

Date: 2026-10-18

Global pytest configuration and fixtures for the dateprefix test suite.
"""

import os
import sys
from datetime import date

# Add project root to sys.path so the package imports without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from mocks import FakeAttributes, FakeFilesystem

FIXED_TODAY = date(2026, 10, 18)


def pytest_configure(config):
    """Register markers when running without the pyproject.toml settings."""
    config.addinivalue_line("markers", "unit: fast tests without filesystem side effects")
    config.addinivalue_line("markers", "integration: tests touching tmp dirs or threads")


@pytest.fixture
def fixed_today():
    """Clock returning a fixed date."""
    return lambda: FIXED_TODAY


@pytest.fixture
def fake_attributes():
    return FakeAttributes()


@pytest.fixture
def fake_filesystem():
    return FakeFilesystem()
