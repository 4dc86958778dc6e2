"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from structcopy import CollectingSink, Copier, CopierSettings, set_default_copier


@pytest.fixture
def sink():
    """Fresh diagnostic collector."""
    return CollectingSink()


@pytest.fixture
def copier(sink):
    """Copier with default settings that collects diagnostics."""
    return Copier(settings=CopierSettings(), sink=sink)


@pytest.fixture
def default_copier(sink):
    """Install a collecting copier as the process-wide default for one test."""
    copier = Copier(settings=CopierSettings(), sink=sink)
    set_default_copier(copier)
    yield copier
    set_default_copier(None)
