"""Pytest configuration for repository test runs."""

from __future__ import annotations

import pytest

from core.config import PetroflowConfig


@pytest.fixture
def config() -> PetroflowConfig:
    """Default configuration independent of the caller's environment."""
    return PetroflowConfig()
