"""Shared fixtures for the crab game tests."""

import random

import pytest

from crab.config.settings import GameSettings
from crab.core.events import EventBus
from crab.game.engine import CrabGame
from crab.game.sprite import Sprite
from crab.game.world import GameState
from crab.graphics.assets import default_assets


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings()


@pytest.fixture
def assets(settings):
    return default_assets(settings)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def game(settings, assets, rng, event_bus) -> CrabGame:
    return CrabGame(settings=settings, assets=assets, rng=rng, event_bus=event_bus)


@pytest.fixture
def bare_state() -> GameState:
    """A round with the crab and fish parked far away from each other."""
    return GameState(crab=Sprite(x=0, y=360), fish=Sprite(x=900, y=500))

