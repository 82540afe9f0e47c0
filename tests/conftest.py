"""Shared test fixtures for the seqdiff test suite."""

from __future__ import annotations

import pytest

from seqdiff.config import DiffConfig
from seqdiff.engine.differ import SequenceDiffer


@pytest.fixture
def config() -> DiffConfig:
    """Default differ configuration."""
    return DiffConfig()


@pytest.fixture
def differ(config: DiffConfig) -> SequenceDiffer:
    """Differ using the default test config."""
    return SequenceDiffer(config)
