"""Tests for configuration."""

import pytest
from pydantic import ValidationError

from crab.config.settings import GameSettings, Settings


def test_reference_constants():
    settings = GameSettings()
    assert (settings.screen_width, settings.screen_height) == (1000, 800)
    assert (settings.walkable_min_y, settings.walkable_max_y) == (360, 640)
    assert settings.ticks_per_second // settings.ticks_per_frame == 4
    assert settings.max_level == 12
    assert settings.game_over_y == settings.walkable_min_y


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CRAB_GAME_MAX_BIRD_COUNT", "4")
    settings = GameSettings()
    assert settings.max_bird_count == 4
    assert settings.max_level == 4 + 3 * 4


def test_root_settings_nest_game_settings(monkeypatch):
    monkeypatch.setenv("CRAB_SEED", "42")
    settings = Settings()
    assert settings.seed == 42
    assert settings.assets_path is None
    assert settings.game.max_level == 12
    assert settings.display.fps == 60


@pytest.mark.parametrize("overrides", [
    {"walkable_min_beach_y": 320, "walkable_max_beach_y": 180},
    {"walkable_max_beach_y": 500},
    {"walkable_min_beach_y": 300, "walkable_max_beach_y": 320},
    {"screen_width": 40},
    {"max_bird_step_tick": 1},
    {"score_level_divisor": 0},
    {"ticks_per_frame": 0},
])
def test_invalid_geometry_is_rejected(overrides):
    with pytest.raises(ValidationError):
        GameSettings(**overrides)
