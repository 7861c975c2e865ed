"""Core test fixtures for world generation tests."""

import pytest

from worldgen.config import get_settings
from worldgen.dice import DiceRoller


@pytest.fixture
def roller() -> DiceRoller:
    """A roller with a fixed seed."""
    return DiceRoller(seed=12345)


@pytest.fixture(params=range(0, 500, 25))
def seeded_roller(request) -> DiceRoller:
    """Rollers over a spread of seeds, for properties that hold for any stream."""
    return DiceRoller(seed=request.param)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the developer's environment and cached settings."""
    for name in ("WORLDGEN_SEED", "WORLDGEN_HABITABLE_ZONE", "WORLDGEN_HZ_VARIANCE",
                 "WORLDGEN_LOG_LEVEL", "WORLDGEN_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
