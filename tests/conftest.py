"""Pytest configuration and shared fixtures."""

import pytest

from arena.config import get_settings
from arena.game.characters import create_mage, create_warrior
from arena.testing import fixed_rand_func


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Clear settings cache before each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def warrior():
    """A fresh level 1 Warrior named Hero."""
    return create_warrior("Hero")


@pytest.fixture
def mage():
    """A fresh level 1 Mage named Enemy."""
    return create_mage("Enemy")


@pytest.fixture
def zero_rand():
    """Random source that always draws 0."""
    return fixed_rand_func(0)

