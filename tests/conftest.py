"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from packsmith import Datapack
from packsmith.config import PacksmithSettings


@pytest.fixture
def settings():
    """Explicit default settings, independent of the environment."""
    return PacksmithSettings(default_namespace="minecraft", default_directory="")


@pytest.fixture
def datapack(settings):
    """Fresh Datapack instance."""
    return Datapack(settings=settings)
