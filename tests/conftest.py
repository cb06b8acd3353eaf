"""
This module is the 'top level' configuration for all the unit tests.

'Real world' fixtures are put here.
If a test suite needs specific mocked versions of dependencies,
these should be put in the ``conftest.py'' relative to it.
"""

import logging
import os
from pathlib import Path

import hypothesis
import pytest

from nominae.config import config
from nominae.decorators import TRACE

logging.getLogger().setLevel(TRACE)
hypothesis.settings.register_profile(
    "nightly",
    max_examples=10_000,
    deadline=None,
    print_blob=True
)

DATA_DIR = Path(__file__).parent / "data"


def pytest_configure(config):
    config.addinivalue_line(
        "addopts", "--strict-markers"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def reset_config(monkeypatch):
    """Make sure config values loaded by one test don't leak into the next"""
    root = logging.getLogger()
    level = root.level
    monkeypatch.delenv("CONFIGURATION_FILE", raising=False)
    yield
    os.environ.pop("CONFIGURATION_FILE", None)
    config.refresh()
    root.setLevel(level)
