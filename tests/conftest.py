"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from bignumber.config import DEFAULT_CONFIG, Config, reset_config


@pytest.fixture(autouse=True)
def default_config() -> Iterator[Config]:
    """Run every test against the default configuration."""
    reset_config()
    yield DEFAULT_CONFIG
    reset_config()
